"""Canonical form with literal values replaced by placeholders."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from ..literals import (
    BigDecimalValue,
    BigIntegerValue,
    BooleanValue,
    DateValue,
    FloatValue,
    InfinityValue,
    IntegerValue,
    LiteralValue,
    NanValue,
    NullValue,
    StringValue,
)
from ..nodes import ListLiteral, MapLiteral
from ..visitors import ParameterCollector
from .base import Dialect, Render, Target

if TYPE_CHECKING:
    from ..context import TranslationState


def literal_key(value: LiteralValue) -> tuple[str, Hashable]:
    """Literal kind and identity used for placeholder deduplication."""
    match value:
        case NullValue():
            return ("nullable_string" if value.nullable_string else "null", None)
        case BooleanValue():
            return "boolean", value.value
        case IntegerValue():
            return (value.width.value if value.width else "number"), value.text
        case BigIntegerValue():
            return "big_integer", value.text
        case FloatValue():
            return (value.width.value if value.width else "number"), value.text
        case BigDecimalValue():
            return "big_decimal", value.text
        case StringValue():
            return "string", value.text
        case DateValue():
            return "date", value.epoch_millis
        case NanValue():
            return "nan", "NaN"
        case InfinityValue():
            return "infinity", "-Infinity" if value.negative else "Infinity"
    raise TypeError(f"Not a literal value: {type(value).__name__}")


class AnonymizedDialect(Dialect):
    """Replaces every literal with a value-deduplicated placeholder.

    ``g.with('x', 'x')`` becomes ``g.with(string0, string0)``. Lists and maps
    collapse to a single placeholder; variables are kept.
    """

    target = Target.ANONYMIZED
    display_name = "Anonymized"

    def render_literal(self, value: LiteralValue, state: TranslationState) -> str:
        kind, key = literal_key(value)
        return state.anonymization.placeholder(kind, key)

    def list_literal(self, node: ListLiteral, render: Render, state: TranslationState) -> str:
        ParameterCollector(state.parameters).visit(node)
        return state.anonymization.placeholder("list", node.model_dump_json())

    def map_literal(self, node: MapLiteral, render: Render, state: TranslationState) -> str:
        ParameterCollector(state.parameters).visit(node)
        return state.anonymization.placeholder("map", node.model_dump_json())
