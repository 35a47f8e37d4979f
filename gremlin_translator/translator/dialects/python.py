"""Python rendering."""

from __future__ import annotations

from collections.abc import Sequence

from ..literals import (
    BigDecimalValue,
    BigIntegerValue,
    DateValue,
    FloatValue,
    InfinityValue,
    IntegerValue,
    IntegerWidth,
    fits_int32,
    fits_int64,
)
from ..naming import PYTHON_RESERVED, escape_reserved, to_snake_case
from ..nodes import VertexLiteral
from .base import Dialect, Render, Target


def python_name(name: str) -> str:
    return escape_reserved(to_snake_case(name), PYTHON_RESERVED)


class PythonDialect(Dialect):
    """Python ints are arbitrary precision; ``long(...)`` marks values the
    server must treat as 64-bit.
    """

    target = Target.PYTHON
    display_name = "Python"
    quote_char = "'"
    supports_ranges = False

    null_text = "None"
    true_text = "True"
    false_text = "False"

    def step_name(self, name: str) -> str:
        return python_name(name)

    def enum_constant(self, owner: str, name: str) -> str:
        return f"{owner}.{python_name(name)}"

    def static_owner(self, owner: str) -> str:
        return "CardinalityValue" if owner == "Cardinality" else owner

    def integer(self, value: IntegerValue) -> str:
        if value.width is IntegerWidth.LONG:
            return f"long({value.text})"
        if value.width is None and not fits_int32(value.text) and fits_int64(value.text):
            return f"long({value.text})"
        return value.text

    def big_integer(self, value: BigIntegerValue) -> str:
        return value.text

    def float_(self, value: FloatValue) -> str:
        return value.text

    def big_decimal(self, value: BigDecimalValue) -> str:
        return value.text

    def date(self, value: DateValue) -> str:
        return f"datetime.datetime.utcfromtimestamp({value.epoch_millis} / 1000.0)"

    def nan(self) -> str:
        return "float('nan')"

    def infinity(self, value: InfinityValue) -> str:
        return "float('-inf')" if value.negative else "float('inf')"

    def map_of(self, entries: Sequence[tuple[str, str]]) -> str:
        if not entries:
            return "{}"
        return "{ " + ", ".join(f"{k}: {v}" for k, v in entries) + " }"

    def vertex_literal(self, node: VertexLiteral, render: Render) -> str:
        return f"Vertex({render(node.id)}, {render(node.label)})"

    def zero_arg_strategy(self, name: str) -> str:
        return f"{name}()"

    def configured_strategy(self, name: str, args: Sequence[tuple[str, str]]) -> str:
        kwargs = ", ".join(f"{python_name(key)}={value}" for key, value in args)
        return f"{name}({kwargs})"
