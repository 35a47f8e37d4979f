"""C# (.NET) rendering."""

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
)
from ..naming import to_pascal_case
from .base import Dialect, Target


class DotNetDialect(Dialect):
    """C# names are PascalCase; narrow integers use casts."""

    target = Target.DOTNET
    display_name = "DotNet"
    quote_char = '"'
    supports_ranges = False

    def step_name(self, name: str) -> str:
        return to_pascal_case(name)

    def enum_constant(self, owner: str, name: str) -> str:
        return f"{owner}.{to_pascal_case(name)}"

    def static_owner(self, owner: str) -> str:
        return "CardinalityValue" if owner == "Cardinality" else owner

    def integer(self, value: IntegerValue) -> str:
        match value.width:
            case IntegerWidth.BYTE:
                return f"(byte) {value.text}"
            case IntegerWidth.SHORT:
                return f"(short) {value.text}"
            case IntegerWidth.LONG:
                return f"{value.text}L"
        return value.text

    def big_integer(self, value: BigIntegerValue) -> str:
        return f'BigInteger.Parse("{value.text}")'

    def float_(self, value: FloatValue) -> str:
        return f"{value.text}{value.suffix}"

    def big_decimal(self, value: BigDecimalValue) -> str:
        return f"{value.text}M"

    def date(self, value: DateValue) -> str:
        return f"DateTimeOffset.FromUnixTimeMilliseconds({value.epoch_millis})"

    def nan(self) -> str:
        return "Double.NaN"

    def infinity(self, value: InfinityValue) -> str:
        return "Double.NegativeInfinity" if value.negative else "Double.PositiveInfinity"

    def list_of(self, items: Sequence[str]) -> str:
        if not items:
            return "new List<object>()"
        return "new List<object> { " + ", ".join(items) + " }"

    def map_of(self, entries: Sequence[tuple[str, str]]) -> str:
        if not entries:
            return "new Dictionary<object, object>()"
        pairs = ", ".join(f"{{ {k}, {v} }}" for k, v in entries)
        return f"new Dictionary<object, object> {{ {pairs} }}"

    def zero_arg_strategy(self, name: str) -> str:
        return f"new {name}()"

    def configured_strategy(self, name: str, args: Sequence[tuple[str, str]]) -> str:
        named = ", ".join(f"{key}: {value}" for key, value in args)
        return f"new {name}({named})"
