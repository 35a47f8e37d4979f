"""JavaScript rendering."""

from __future__ import annotations

from collections.abc import Sequence

from ..literals import BigDecimalValue, BigIntegerValue, DateValue, FloatValue, InfinityValue, IntegerValue
from ..naming import JAVASCRIPT_RESERVED, escape_reserved
from .base import Dialect, Target


class JavascriptDialect(Dialect):
    """JavaScript numbers carry no width, so every numeric suffix is dropped."""

    target = Target.JAVASCRIPT
    display_name = "Javascript"
    quote_char = '"'
    supports_ranges = False

    def step_name(self, name: str) -> str:
        return escape_reserved(name, JAVASCRIPT_RESERVED)

    def static_owner(self, owner: str) -> str:
        return "CardinalityValue" if owner == "Cardinality" else owner

    def integer(self, value: IntegerValue) -> str:
        return value.text

    def big_integer(self, value: BigIntegerValue) -> str:
        return value.text

    def float_(self, value: FloatValue) -> str:
        return value.text

    def big_decimal(self, value: BigDecimalValue) -> str:
        return value.text

    def date(self, value: DateValue) -> str:
        return f"new Date({value.epoch_millis})"

    def nan(self) -> str:
        return "Number.NaN"

    def infinity(self, value: InfinityValue) -> str:
        return "Number.NEGATIVE_INFINITY" if value.negative else "Number.POSITIVE_INFINITY"

    def map_of(self, entries: Sequence[tuple[str, str]]) -> str:
        if not entries:
            return "new Map()"
        pairs = ", ".join(f"[{k}, {v}]" for k, v in entries)
        return f"new Map([{pairs}])"

    def zero_arg_strategy(self, name: str) -> str:
        return f"new {name}()"

    def configured_strategy(self, name: str, args: Sequence[tuple[str, str]]) -> str:
        config = ", ".join(f"{key}: {value}" for key, value in args)
        return f"new {name}({{{config}}})"
