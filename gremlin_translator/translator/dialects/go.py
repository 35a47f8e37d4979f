"""Go rendering against the gremlingo driver package."""

from __future__ import annotations

from collections.abc import Sequence

from ..literals import (
    BigDecimalValue,
    BigIntegerValue,
    DateValue,
    FloatValue,
    FloatWidth,
    InfinityValue,
    IntegerValue,
    IntegerWidth,
)
from ..naming import to_pascal_case
from ..nodes import VertexLiteral
from .base import Dialect, Render, Target

PACKAGE = "gremlingo"

_INTEGER_TYPES = {
    IntegerWidth.BYTE: "int8",
    IntegerWidth.SHORT: "int16",
    IntegerWidth.INT: "int32",
    IntegerWidth.LONG: "int64",
}

_FLOAT_TYPES = {
    FloatWidth.FLOAT: "float32",
    FloatWidth.DOUBLE: "float64",
}


class GoDialect(Dialect):
    """Go exports PascalCase names and converts numerals with typed casts."""

    target = Target.GO
    display_name = "Go"
    quote_char = '"'
    dropped_escapes = "'"
    supports_ranges = False

    null_text = "nil"
    anonymous_prefix = f"{PACKAGE}.T__"

    def step_name(self, name: str) -> str:
        return to_pascal_case(name)

    def enum_constant(self, owner: str, name: str) -> str:
        return f"{PACKAGE}.{owner}.{to_pascal_case(name)}"

    def static_owner(self, owner: str) -> str:
        if owner == "Cardinality":
            owner = "CardinalityValue"
        return f"{PACKAGE}.{owner}"

    def integer(self, value: IntegerValue) -> str:
        if value.width is None:
            return value.text
        return f"{_INTEGER_TYPES[value.width]}({value.text})"

    def big_integer(self, value: BigIntegerValue) -> str:
        return f'{PACKAGE}.ParseBigInt("{value.text}")'

    def float_(self, value: FloatValue) -> str:
        if value.width is None:
            return value.text
        return f"{_FLOAT_TYPES[value.width]}({value.text})"

    def big_decimal(self, value: BigDecimalValue) -> str:
        return f'{PACKAGE}.ParseBigDecimal("{value.text}")'

    def date(self, value: DateValue) -> str:
        return f"time.UnixMilli({value.epoch_millis})"

    def nan(self) -> str:
        return "math.NaN()"

    def infinity(self, value: InfinityValue) -> str:
        return "math.Inf(-1)" if value.negative else "math.Inf(1)"

    def list_of(self, items: Sequence[str]) -> str:
        return "[]interface{}{" + ", ".join(items) + "}"

    def map_of(self, entries: Sequence[tuple[str, str]]) -> str:
        pairs = ", ".join(f"{k}: {v}" for k, v in entries)
        return "map[interface{}]interface{}{" + pairs + "}"

    def vertex_literal(self, node: VertexLiteral, render: Render) -> str:
        element = f"{PACKAGE}.Element{{Id: {render(node.id)}, Label: {render(node.label)}}}"
        return f"&{PACKAGE}.Vertex{{Element: {element}}}"

    def zero_arg_strategy(self, name: str) -> str:
        return f"{PACKAGE}.{name}()"

    def configured_strategy(self, name: str, args: Sequence[tuple[str, str]]) -> str:
        fields = ", ".join(f"{to_pascal_case(key)}: {value}" for key, value in args)
        return f"{PACKAGE}.{name}({PACKAGE}.{name}Config{{{fields}}})"
