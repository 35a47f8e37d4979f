"""Tests for parse tree models and JSON loading."""

import json

import pytest
from pydantic import ValidationError

from gremlin_translator.translator.nodes import (
    IntegerLiteral,
    MapLiteral,
    StepCall,
    StrategySpec,
    TraversalSource,
    dump_tree,
    load_tree,
)
from tests.builders import chain, g, i, mp, s, step, strategy


def test_load_tree_from_json():
    data = {
        "type": "step",
        "receiver": {"type": "source"},
        "name": "has",
        "args": [
            {"type": "string", "text": "'name'"},
            {"type": "integer", "text": "1"},
        ],
    }

    tree = load_tree(json.dumps(data))

    assert isinstance(tree, StepCall)
    assert isinstance(tree.receiver, TraversalSource)
    assert tree.args[1] == IntegerLiteral(text="1")


def test_load_tree_without_receiver():
    tree = load_tree('{"type": "step", "name": "out"}')

    assert tree.receiver is None
    assert tree.args == []


def test_load_map_and_strategy():
    data = {
        "type": "strategy",
        "name": "SeedStrategy",
        "args": [{"key": "seed", "value": {"type": "integer", "text": "1"}}],
    }

    tree = load_tree(json.dumps(data))

    assert isinstance(tree, StrategySpec)
    assert tree.args[0].key == "seed"
    assert not tree.is_zero_arg


def test_unknown_kind_rejected():
    with pytest.raises(ValidationError):
        load_tree('{"type": "lambda", "text": "{ it }"}')


def test_missing_discriminator_rejected():
    with pytest.raises(ValidationError):
        load_tree('{"text": "1"}')


def test_dump_then_load_is_identical():
    tree = chain(g(), step("inject", mp(("x", i("1")))), step("has", s("'k'")))

    assert load_tree(dump_tree(tree)) == tree


def test_nodes_are_frozen():
    node = IntegerLiteral(text="1")

    with pytest.raises(ValidationError):
        node.text = "2"


def test_zero_arg_strategy():
    assert strategy("ReadOnlyStrategy").is_zero_arg
    assert isinstance(mp(), MapLiteral)
