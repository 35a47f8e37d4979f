"""Per-call translation state."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Literal kind -> anonymization category. Kinds sharing a category share one
# placeholder counter.
DEFAULT_ANONYMIZATION_CATEGORIES: Mapping[str, str] = MappingProxyType(
    {
        "null": "object",
        "nullable_string": "string",
        "string": "string",
        "boolean": "boolean",
        "number": "number",
        "byte": "byte",
        "short": "short",
        "integer": "integer",
        "long": "long",
        "big_integer": "biginteger",
        "float": "float",
        "double": "double",
        "big_decimal": "bigdecimal",
        "nan": "number",
        "infinity": "number",
        "date": "date",
        "list": "list",
        "map": "map",
    }
)


@dataclass
class AnonymizationCache:
    """Assigns stable placeholders to literal values.

    Identical (category, value) pairs get the same placeholder for the
    lifetime of the cache, which is one translation.
    """

    categories: Mapping[str, str] = field(default_factory=lambda: DEFAULT_ANONYMIZATION_CATEGORIES)
    placeholders: dict[tuple[str, Hashable], str] = field(default_factory=dict)
    counters: dict[str, int] = field(default_factory=dict)

    def category_for(self, kind: str) -> str:
        try:
            return self.categories[kind]
        except KeyError:
            raise KeyError(f"No anonymization category for literal kind '{kind}'") from None

    def placeholder(self, kind: str, value: Hashable) -> str:
        """Return the placeholder for a literal, allocating one on first sight."""
        category = self.category_for(kind)
        key = (category, value)
        if key not in self.placeholders:
            index = self.counters.get(category, 0)
            self.counters[category] = index + 1
            self.placeholders[key] = f"{category}{index}"
        return self.placeholders[key]


@dataclass
class TranslationState:
    """Accumulates artifacts during one translation.

    Created fresh for each call and never shared between calls.
    """

    source_name: str = "g"
    output: list[str] = field(default_factory=list)
    parameters: set[str] = field(default_factory=set)
    anonymization: AnonymizationCache = field(default_factory=AnonymizationCache)

    def add_parameter(self, name: str) -> None:
        """Record a free variable. Repeats collapse."""
        self.parameters.add(name)

    def append(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "".join(self.output)
