"""Groovy rendering: the canonical form plus Groovy's numeric types."""

from __future__ import annotations

from ..literals import BigDecimalValue, BigIntegerValue, IntegerValue, IntegerWidth
from ..nodes import VertexLiteral
from .base import Dialect, Render, Target


class GroovyDialect(Dialect):
    target = Target.GROOVY
    display_name = "Groovy"

    def integer(self, value: IntegerValue) -> str:
        if value.width is IntegerWidth.BYTE:
            return f"new Byte({value.text})"
        if value.width is IntegerWidth.SHORT:
            return f"new Short({value.text})"
        return super().integer(value)

    def big_integer(self, value: BigIntegerValue) -> str:
        return f"{value.text}g"

    def big_decimal(self, value: BigDecimalValue) -> str:
        return f"{value.text}g"

    def vertex_literal(self, node: VertexLiteral, render: Render) -> str:
        return f"new DetachedVertex({render(node.id)}, {render(node.label)})"
