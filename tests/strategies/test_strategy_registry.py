"""Tests for the strategy registry."""

import threading

import pytest

from gremlin_translator.strategies import (
    BUILTIN_STRATEGIES,
    ConstructionKind,
    StrategyEntrypoints,
    StrategyRegistry,
    default_registry,
)
from gremlin_translator.strategies.builtin import ReadOnlyStrategy, SeedStrategy


def test_register_and_lookup():
    registry = StrategyRegistry()

    entry = registry.register(
        "ReadOnlyStrategy",
        ConstructionKind.SINGLETON,
        StrategyEntrypoints(instance=ReadOnlyStrategy.instance),
    )

    assert registry.lookup("ReadOnlyStrategy") is entry
    assert "ReadOnlyStrategy" in registry
    assert len(registry) == 1


def test_lookup_missing_returns_none():
    assert StrategyRegistry().lookup("Nope") is None


def test_register_requires_matching_entrypoint():
    """A singleton needs an instance accessor."""
    registry = StrategyRegistry()

    with pytest.raises(ValueError, match="without that entrypoint"):
        registry.register(
            "SeedStrategy",
            ConstructionKind.SINGLETON,
            StrategyEntrypoints(create=SeedStrategy.create),
        )


def test_frozen_registry_rejects_registration():
    registry = StrategyRegistry()
    registry.freeze()

    with pytest.raises(RuntimeError, match="frozen"):
        registry.register(
            "SeedStrategy",
            ConstructionKind.CONFIG_FACTORY,
            StrategyEntrypoints(create=SeedStrategy.create),
        )
    assert registry.frozen


def test_default_registry_holds_builtins():
    registry = default_registry()

    assert registry.frozen
    assert len(registry) == len(BUILTIN_STRATEGIES)
    assert registry.lookup("ReadOnlyStrategy").kind is ConstructionKind.SINGLETON
    assert registry.lookup("EventStrategy").kind is ConstructionKind.BARE_CONSTRUCTOR
    assert registry.lookup("PartitionStrategy").kind is ConstructionKind.CONFIG_FACTORY


def test_default_registry_is_shared_across_threads():
    """Concurrent first callers all see the same populated registry."""
    seen = []

    def grab():
        seen.append(default_registry())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r is seen[0] for r in seen)
    assert seen[0] is default_registry()
