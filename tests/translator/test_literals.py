"""Tests for literal decoding."""

import math
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from gremlin_translator.translator.literals import (
    BigDecimalValue,
    BigIntegerValue,
    FloatValue,
    FloatWidth,
    IntegerValue,
    IntegerWidth,
    NullValue,
    StringValue,
    decode_float,
    decode_integer,
    decode_literal,
    fits_int32,
    parse_epoch_millis,
    to_python,
)
from tests.builders import date, inf, nullable, s


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1", IntegerValue(text="1")),
        ("1b", IntegerValue(text="1", width=IntegerWidth.BYTE)),
        ("1S", IntegerValue(text="1", width=IntegerWidth.SHORT)),
        ("-7i", IntegerValue(text="-7", width=IntegerWidth.INT)),
        ("1L", IntegerValue(text="1", width=IntegerWidth.LONG)),
        ("123n", BigIntegerValue(text="123")),
        # b is a hex digit
        ("0x1b", IntegerValue(text="0x1b")),
        ("0xffl", IntegerValue(text="0xff", width=IntegerWidth.LONG)),
    ],
)
def test_decode_integer(text, expected):
    assert decode_integer(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.0", FloatValue(text="1.0")),
        ("1.0f", FloatValue(text="1.0", width=FloatWidth.FLOAT)),
        ("1.0D", FloatValue(text="1.0", width=FloatWidth.DOUBLE)),
        ("1.0m", BigDecimalValue(text="1.0")),
        ("1e10", FloatValue(text="1e10")),
    ],
)
def test_decode_float(text, expected):
    assert decode_float(text) == expected


def test_suffix_round_trips_to_text():
    """Width maps back to the lower-case suffix character."""
    assert IntegerValue(text="1", width=IntegerWidth.LONG).suffix == "l"
    assert FloatValue(text="1.0", width=FloatWidth.FLOAT).suffix == "f"
    assert IntegerValue(text="1").suffix == ""


def test_decode_string_keeps_quote_char():
    assert decode_literal(s("'marko'")) == StringValue(text="marko", quote="'")
    assert decode_literal(s('"marko"')) == StringValue(text="marko", quote='"')


def test_decode_nullable_string_null():
    """A null in a nullable string slot is a null, flagged as string-typed."""
    assert decode_literal(nullable()) == NullValue(nullable_string=True)


def test_decode_nullable_string_with_text():
    assert decode_literal(nullable("'person'")) == StringValue(text="person", quote="'")


@pytest.mark.parametrize(
    "text,millis",
    [
        ("2023-08-02T00:00:00Z", 1690934400000),
        ("2023-08-02", 1690934400000),
        ("2023-08-02T00:00:00", 1690934400000),
        ("2023-08-02 00:00", 1690934400000),
        ("2023-08-02T02:00:00+02:00", 1690934400000),
        ("2023-08-01T19:00:00-05:00", 1690934400000),
        ("2023-08-02T00:00:00.123Z", 1690934400123),
        ("1970-01-01T00:00:00Z", 0),
    ],
)
def test_parse_epoch_millis(text, millis):
    assert parse_epoch_millis(text) == millis


def test_parse_epoch_millis_rejects_garbage():
    with pytest.raises(ValueError, match="Invalid datetime literal"):
        parse_epoch_millis("yesterday")


def test_decode_date():
    value = decode_literal(date("'2023-08-02T00:00:00Z'"))

    assert value.epoch_millis == 1690934400000
    assert value.text == "'2023-08-02T00:00:00Z'"


@pytest.mark.parametrize(
    "numeral,fits",
    [("2147483647", True), ("2147483648", False), ("-2147483648", True), ("0x7fffffff", True)],
)
def test_fits_int32(numeral, fits):
    assert fits_int32(numeral) is fits


def test_to_python_values():
    assert to_python(decode_integer("10000")) == 10000
    assert to_python(decode_integer("123n")) == 123
    assert to_python(decode_float("1.5m")) == Decimal("1.5")
    assert to_python(decode_float("1.5d")) == 1.5
    assert to_python(NullValue()) is None
    assert to_python(decode_literal(inf(negative=True))) == -math.inf
    assert to_python(decode_literal(date("'2023-08-02T00:00:00Z'"))) == datetime(
        2023, 8, 2, tzinfo=timezone.utc
    )
