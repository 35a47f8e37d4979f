"""Identifier case conversions used by the host-language dialects."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")

PYTHON_RESERVED = frozenset(
    {
        "all",
        "and",
        "any",
        "as",
        "filter",
        "from",
        "global",
        "id",
        "in",
        "is",
        "list",
        "max",
        "min",
        "not",
        "or",
        "range",
        "set",
        "sum",
        "with",
    }
)

JAVASCRIPT_RESERVED = frozenset({"from", "in", "with"})


def to_snake_case(name: str) -> str:
    """``hasLabel`` -> ``has_label``; all-caps names such as ``V`` stay put."""
    return _CAMEL_BOUNDARY.sub(lambda m: "_" + m.group(1).lower(), name)


def to_pascal_case(name: str) -> str:
    return name[:1].upper() + name[1:]


def escape_reserved(name: str, reserved: frozenset[str]) -> str:
    """Append ``_`` to names that collide with a target keyword or builtin."""
    return f"{name}_" if name in reserved else name
