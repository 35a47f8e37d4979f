"""Built-in traversal strategies.

Each strategy is a small model holding its configuration. Keys arrive in the
query language's camelCase (``partitionKey``) and map onto snake_case fields.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .registry import ConstructionKind, StrategyEntrypoints, StrategyRegistry


class TraversalStrategy(BaseModel):
    """Base for strategy models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    @classmethod
    def create(cls, configuration: Mapping[str, Any]) -> TraversalStrategy:
        """Build the strategy from a configuration mapping."""
        return cls.model_validate(dict(configuration))

    @property
    def configuration(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_defaults=True)


# =============================================================================
# Singletons
# =============================================================================


class ReadOnlyStrategy(TraversalStrategy):
    """Rejects traversals that mutate the graph."""

    @classmethod
    @functools.cache
    def instance(cls) -> ReadOnlyStrategy:
        return cls()


class LazyBarrierStrategy(TraversalStrategy):
    """Inserts barriers ahead of expensive flat-map steps."""

    @classmethod
    @functools.cache
    def instance(cls) -> LazyBarrierStrategy:
        return cls()


# =============================================================================
# Bare constructors
# =============================================================================


class EventStrategy(TraversalStrategy):
    """Raises mutation events to registered listeners."""


class ProductiveByStrategy(TraversalStrategy):
    """Filters unproductive ``by()`` modulations."""

    productive_keys: list[str] = Field(default_factory=list)


# =============================================================================
# Configuration factories
# =============================================================================


class SeedStrategy(TraversalStrategy):
    """Seeds random steps for repeatable results."""

    seed: int


class PartitionStrategy(TraversalStrategy):
    """Restricts reads and writes to graph partitions."""

    partition_key: str
    write_partition: str | None = None
    read_partitions: list[str] = Field(default_factory=list)
    include_meta_properties: bool = False


class SubgraphStrategy(TraversalStrategy):
    """Limits a traversal to a subgraph defined by filter traversals."""

    vertices: Any = None
    edges: Any = None
    vertex_properties: Any = None
    check_adjacent_vertices: bool = True


class EdgeLabelVerificationStrategy(TraversalStrategy):
    """Warns about or rejects edge steps without labels."""

    log_warning: bool = False
    throw_exception: bool = False


class ReservedKeysVerificationStrategy(TraversalStrategy):
    """Warns about or rejects reserved property keys."""

    log_warning: bool = False
    throw_exception: bool = False
    keys: list[str] = Field(default_factory=lambda: ["id", "label"])


# Registry of built-in strategies: class -> construction kind
BUILTIN_STRATEGIES: dict[type[TraversalStrategy], ConstructionKind] = {
    ReadOnlyStrategy: ConstructionKind.SINGLETON,
    LazyBarrierStrategy: ConstructionKind.SINGLETON,
    EventStrategy: ConstructionKind.BARE_CONSTRUCTOR,
    ProductiveByStrategy: ConstructionKind.BARE_CONSTRUCTOR,
    SeedStrategy: ConstructionKind.CONFIG_FACTORY,
    PartitionStrategy: ConstructionKind.CONFIG_FACTORY,
    SubgraphStrategy: ConstructionKind.CONFIG_FACTORY,
    EdgeLabelVerificationStrategy: ConstructionKind.CONFIG_FACTORY,
    ReservedKeysVerificationStrategy: ConstructionKind.CONFIG_FACTORY,
}


def _entrypoints_for(cls: type[TraversalStrategy], kind: ConstructionKind) -> StrategyEntrypoints:
    match kind:
        case ConstructionKind.SINGLETON:
            return StrategyEntrypoints(instance=cls.instance)
        case ConstructionKind.BARE_CONSTRUCTOR:
            return StrategyEntrypoints(constructor=cls, create=cls.create)
        case ConstructionKind.CONFIG_FACTORY:
            return StrategyEntrypoints(create=cls.create)


def register_builtin_strategies(registry: StrategyRegistry) -> None:
    for cls, kind in BUILTIN_STRATEGIES.items():
        registry.register(cls.__name__, kind, _entrypoints_for(cls, kind))
