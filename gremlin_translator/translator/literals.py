"""Decoded literal values.

Scalar parse nodes carry raw source text. Decoding splits numeral suffixes,
strips string delimiters and resolves dates to epoch milliseconds so the
per-target renderers work on a uniform value shape.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .nodes import (
    BooleanLiteral,
    DateLiteral,
    FloatLiteral,
    InfLiteral,
    IntegerLiteral,
    NanLiteral,
    NullLiteral,
    StringLiteral,
)

# =============================================================================
# Enums
# =============================================================================


class IntegerWidth(str, Enum):
    """Fixed-width integer types selected by a numeral suffix."""

    BYTE = "byte"
    SHORT = "short"
    INT = "integer"
    LONG = "long"


class FloatWidth(str, Enum):
    """Fixed-width floating point types selected by a numeral suffix."""

    FLOAT = "float"
    DOUBLE = "double"


INTEGER_SUFFIXES: dict[str, IntegerWidth | None] = {
    "b": IntegerWidth.BYTE,
    "s": IntegerWidth.SHORT,
    "i": IntegerWidth.INT,
    "l": IntegerWidth.LONG,
    "n": None,  # arbitrary precision
}

FLOAT_SUFFIXES: dict[str, FloatWidth | None] = {
    "f": FloatWidth.FLOAT,
    "d": FloatWidth.DOUBLE,
    "m": None,  # arbitrary precision
}

INT32_RANGE = range(-(2**31), 2**31)
INT64_RANGE = range(-(2**63), 2**63)


# =============================================================================
# Literal values
# =============================================================================


class Value(BaseModel):
    model_config = ConfigDict(frozen=True)


class NullValue(Value):
    """Null; ``nullable_string`` marks a null held in a string slot."""

    type: Literal["null"] = "null"
    nullable_string: bool = False


class BooleanValue(Value):
    type: Literal["boolean"] = "boolean"
    value: bool


class IntegerValue(Value):
    """Fixed-width integer; width None means the numeral had no suffix."""

    type: Literal["integer"] = "integer"
    text: str
    width: IntegerWidth | None = None

    @property
    def suffix(self) -> str:
        return "" if self.width is None else _suffix_for(INTEGER_SUFFIXES, self.width)


class BigIntegerValue(Value):
    type: Literal["big_integer"] = "big_integer"
    text: str


class FloatValue(Value):
    """Fixed-width float; width None means the numeral had no suffix."""

    type: Literal["float"] = "float"
    text: str
    width: FloatWidth | None = None

    @property
    def suffix(self) -> str:
        return "" if self.width is None else _suffix_for(FLOAT_SUFFIXES, self.width)


class BigDecimalValue(Value):
    type: Literal["big_decimal"] = "big_decimal"
    text: str


class StringValue(Value):
    """String body without delimiters; quote is the delimiter used in source."""

    type: Literal["string"] = "string"
    text: str
    quote: str = '"'


class DateValue(Value):
    type: Literal["date"] = "date"
    epoch_millis: int
    text: str


class NanValue(Value):
    type: Literal["nan"] = "nan"


class InfinityValue(Value):
    type: Literal["infinity"] = "infinity"
    negative: bool = False


LiteralValue = Annotated[
    NullValue
    | BooleanValue
    | IntegerValue
    | BigIntegerValue
    | FloatValue
    | BigDecimalValue
    | StringValue
    | DateValue
    | NanValue
    | InfinityValue,
    Field(discriminator="type"),
]

ScalarLiteral = (
    IntegerLiteral
    | FloatLiteral
    | StringLiteral
    | BooleanLiteral
    | NullLiteral
    | NanLiteral
    | InfLiteral
    | DateLiteral
)


def _suffix_for(table: dict[str, Any], width: Enum) -> str:
    for suffix, candidate in table.items():
        if candidate is width:
            return suffix
    raise ValueError(f"No suffix for {width}")


# =============================================================================
# Decoding
# =============================================================================


def strip_quotes(text: str) -> str:
    """Remove the one delimiting quote character from each end."""
    return text[1:-1]


def _is_hex(numeral: str) -> bool:
    return numeral.lstrip("+-").lower().startswith("0x")


def decode_integer(text: str) -> IntegerValue | BigIntegerValue:
    """Split an integer numeral into digits and width.

    ``b`` is a hex digit, so hex numerals only take the s/i/l/n suffixes.
    """
    numeral = text.lower()
    last = numeral[-1]
    if last in INTEGER_SUFFIXES and not (last == "b" and _is_hex(numeral)):
        digits = numeral[:-1]
        width = INTEGER_SUFFIXES[last]
        if width is None:
            return BigIntegerValue(text=digits)
        return IntegerValue(text=digits, width=width)
    return IntegerValue(text=numeral)


def decode_float(text: str) -> FloatValue | BigDecimalValue:
    numeral = text.lower()
    last = numeral[-1]
    if last in FLOAT_SUFFIXES:
        digits = numeral[:-1]
        width = FLOAT_SUFFIXES[last]
        if width is None:
            return BigDecimalValue(text=digits)
        return FloatValue(text=digits, width=width)
    return FloatValue(text=numeral)


def decode_literal(node: ScalarLiteral) -> LiteralValue:
    """Decode a scalar parse node into its literal value."""
    match node:
        case IntegerLiteral():
            return decode_integer(node.text)
        case FloatLiteral():
            return decode_float(node.text)
        case StringLiteral():
            if node.nullable and node.text == "null":
                return NullValue(nullable_string=True)
            return StringValue(text=strip_quotes(node.text), quote=node.text[0])
        case BooleanLiteral():
            return BooleanValue(value=node.value)
        case NullLiteral():
            return NullValue()
        case NanLiteral():
            return NanValue()
        case InfLiteral():
            return InfinityValue(negative=node.negative)
        case DateLiteral():
            iso = strip_quotes(node.text)
            return DateValue(epoch_millis=parse_epoch_millis(iso), text=node.text)
    raise TypeError(f"Not a scalar literal: {type(node).__name__}")


def parse_integer(numeral: str) -> int:
    """Integer value of a suffix-free numeral (decimal, hex or octal)."""
    try:
        return int(numeral, 0)
    except ValueError:
        # leading zeros without a prefix, e.g. "007"
        return int(numeral, 10)


def fits_int32(numeral: str) -> bool:
    return parse_integer(numeral) in INT32_RANGE


def fits_int64(numeral: str) -> bool:
    return parse_integer(numeral) in INT64_RANGE


# =============================================================================
# Dates
# =============================================================================

_DATE_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})"
    r"(?:[T ](?P<time>\d{2}:\d{2}(?::\d{2}(?:\.\d{1,9})?)?))?"
    r"(?P<zone>Z|[+-]\d{2}:?\d{2})?$"
)


def parse_datetime(text: str) -> datetime:
    """Parse an ISO-8601 timestamp; a missing zone means UTC."""
    match = _DATE_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid datetime literal: {text}")

    time_part = match.group("time") or "00:00"
    if "." in time_part:
        # fromisoformat wants 3 or 6 fractional digits
        whole, fraction = time_part.split(".")
        time_part = f"{whole}.{fraction[:6].ljust(6, '0')}"
    parsed = datetime.fromisoformat(f"{match.group('date')}T{time_part}")

    zone = match.group("zone")
    if zone is None or zone == "Z":
        return parsed.replace(tzinfo=timezone.utc)
    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    offset = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
    return parsed.replace(tzinfo=timezone(sign * offset))


def parse_epoch_millis(text: str) -> int:
    parsed = parse_datetime(text)
    delta = parsed - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


# =============================================================================
# Python values
# =============================================================================


def to_python(value: LiteralValue) -> Any:
    """Python object for a literal value, used when building strategies."""
    match value:
        case NullValue():
            return None
        case BooleanValue():
            return value.value
        case IntegerValue() | BigIntegerValue():
            return parse_integer(value.text)
        case FloatValue():
            return float(value.text)
        case BigDecimalValue():
            return Decimal(value.text)
        case StringValue():
            return value.text
        case DateValue():
            return datetime.fromtimestamp(value.epoch_millis / 1000, tz=timezone.utc)
        case NanValue():
            return math.nan
        case InfinityValue():
            return -math.inf if value.negative else math.inf
    raise TypeError(f"Not a literal value: {type(value).__name__}")
