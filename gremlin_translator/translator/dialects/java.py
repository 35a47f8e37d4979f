"""Java rendering."""

from __future__ import annotations

from collections.abc import Sequence

from ..literals import (
    BigDecimalValue,
    BigIntegerValue,
    DateValue,
    InfinityValue,
    IntegerValue,
    IntegerWidth,
)
from ..nodes import VertexLiteral
from .base import Dialect, Render, Target


class JavaDialect(Dialect):
    """Java has no collection literals, so lists and maps are built with
    double-brace initialization, one ``add``/``put`` per element in order.
    Strategies use their builders.
    """

    target = Target.JAVA
    display_name = "Java"
    quote_char = '"'
    supports_ranges = False

    def integer(self, value: IntegerValue) -> str:
        match value.width:
            case IntegerWidth.BYTE:
                return f"new Byte({value.text})"
            case IntegerWidth.SHORT:
                return f"new Short({value.text})"
            case IntegerWidth.INT:
                return value.text
            case IntegerWidth.LONG:
                return f"{value.text}l"
        return value.text

    def big_integer(self, value: BigIntegerValue) -> str:
        return f'new BigInteger("{value.text}")'

    def big_decimal(self, value: BigDecimalValue) -> str:
        return f'new BigDecimal("{value.text}")'

    def date(self, value: DateValue) -> str:
        return f"new Date({value.epoch_millis})"

    def nan(self) -> str:
        return "Double.NaN"

    def infinity(self, value: InfinityValue) -> str:
        return "Double.NEGATIVE_INFINITY" if value.negative else "Double.POSITIVE_INFINITY"

    def list_of(self, items: Sequence[str]) -> str:
        if not items:
            return "new ArrayList<Object>()"
        adds = " ".join(f"add({item});" for item in items)
        return f"new ArrayList<Object>() {{{{ {adds} }}}}"

    def map_of(self, entries: Sequence[tuple[str, str]]) -> str:
        if not entries:
            return "new LinkedHashMap<Object, Object>()"
        puts = " ".join(f"put({k}, {v});" for k, v in entries)
        return f"new LinkedHashMap<Object, Object>() {{{{ {puts} }}}}"

    def vertex_literal(self, node: VertexLiteral, render: Render) -> str:
        return f"new DetachedVertex({render(node.id)}, {render(node.label)})"

    def zero_arg_strategy(self, name: str) -> str:
        return f"{name}.instance()"

    def configured_strategy(self, name: str, args: Sequence[tuple[str, str]]) -> str:
        calls = "".join(f".{key}({value})" for key, value in args)
        return f"{name}.build(){calls}.create()"
