"""Per-target rendering rules."""

from __future__ import annotations

from .anonymized import AnonymizedDialect
from .base import Dialect, Target
from .dotnet import DotNetDialect
from .go import GoDialect
from .groovy import GroovyDialect
from .java import JavaDialect
from .javascript import JavascriptDialect
from .python import PythonDialect

# Registry mapping targets to their rendering rules
DIALECTS: dict[Target, Dialect] = {
    Target.LANGUAGE: Dialect(),
    Target.ANONYMIZED: AnonymizedDialect(),
    Target.GROOVY: GroovyDialect(),
    Target.JAVA: JavaDialect(),
    Target.JAVASCRIPT: JavascriptDialect(),
    Target.PYTHON: PythonDialect(),
    Target.DOTNET: DotNetDialect(),
    Target.GO: GoDialect(),
}


def get_dialect(target: Target | str) -> Dialect:
    """Look up the rendering rules for a target selector.

    Raises:
        ValueError: If the selector names no known target
    """
    return DIALECTS[Target(target)]


__all__ = [
    "DIALECTS",
    "AnonymizedDialect",
    "Dialect",
    "DotNetDialect",
    "GoDialect",
    "GroovyDialect",
    "JavaDialect",
    "JavascriptDialect",
    "PythonDialect",
    "Target",
    "get_dialect",
]
