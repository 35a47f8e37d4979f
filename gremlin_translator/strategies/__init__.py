"""Strategy registry and strategy spec resolution."""

from .builtin import BUILTIN_STRATEGIES, TraversalStrategy, register_builtin_strategies
from .registry import (
    ConstructionKind,
    StrategyEntry,
    StrategyEntrypoints,
    StrategyRegistry,
    default_registry,
)
from .resolver import (
    ArgumentEvaluator,
    build_configuration,
    construct_strategy,
    render_strategy_source,
)

__all__ = [
    "BUILTIN_STRATEGIES",
    "ArgumentEvaluator",
    "ConstructionKind",
    "StrategyEntry",
    "StrategyEntrypoints",
    "StrategyRegistry",
    "TraversalStrategy",
    "build_configuration",
    "construct_strategy",
    "default_registry",
    "register_builtin_strategies",
    "render_strategy_source",
]
