"""Tests for AnonymizationCache and TranslationState."""

import pytest

from gremlin_translator.translator.context import AnonymizationCache, TranslationState


def test_placeholder_deduplicates_values():
    """Same category and value share one placeholder."""
    cache = AnonymizationCache()

    assert cache.placeholder("string", "x") == "string0"
    assert cache.placeholder("string", "xyz") == "string1"
    assert cache.placeholder("string", "x") == "string0"


def test_counters_are_per_category():
    cache = AnonymizationCache()

    assert cache.placeholder("boolean", True) == "boolean0"
    assert cache.placeholder("number", "1") == "number0"
    assert cache.placeholder("boolean", False) == "boolean1"


def test_kinds_sharing_a_category_share_a_counter():
    """NaN, infinity and unsuffixed numbers all draw from ``number``."""
    cache = AnonymizationCache()

    assert cache.placeholder("number", "1") == "number0"
    assert cache.placeholder("nan", "NaN") == "number1"
    assert cache.placeholder("infinity", "Infinity") == "number2"


def test_nullable_string_null_is_a_string():
    cache = AnonymizationCache()

    assert cache.placeholder("nullable_string", None) == "string0"
    assert cache.placeholder("null", None) == "object0"


def test_custom_categories():
    """The kind -> category table can be replaced."""
    cache = AnonymizationCache(categories={"string": "text", "null": "text"})

    assert cache.placeholder("string", "x") == "text0"
    assert cache.placeholder("null", None) == "text1"


def test_unknown_kind_raises():
    cache = AnonymizationCache(categories={})

    with pytest.raises(KeyError, match="No anonymization category"):
        cache.placeholder("string", "x")


def test_parameters_collapse_repeats():
    state = TranslationState()

    state.add_parameter("x")
    state.add_parameter("x")
    state.add_parameter("y")

    assert state.parameters == {"x", "y"}


def test_fresh_state_per_instance():
    """States never share collections."""
    first = TranslationState()
    second = TranslationState()

    first.add_parameter("x")
    first.anonymization.placeholder("string", "x")

    assert second.parameters == set()
    assert second.anonymization.placeholders == {}


def test_text_joins_output():
    state = TranslationState(source_name="traversal")

    state.append("traversal")
    state.append(".V()")

    assert state.text == "traversal.V()"
