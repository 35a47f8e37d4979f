"""Strategy spec resolution.

A ``StrategySpec`` (name plus ordered ``key:value`` args) is consumed two
ways:

- execution: build the runtime strategy object through the registry
- translation: render equivalent construction source for a target

Both honour the same shape: the zero-arg form versus the configured form.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from ..translator.errors import StrategyConstructionError, UnregisteredStrategyError
from ..translator.literals import decode_literal, parse_integer, to_python
from ..translator.nodes import (
    Identifier,
    ListLiteral,
    MapLiteral,
    Node,
    ParseNode,
    RangeLiteral,
    StrategySpec,
    VariableRef,
)
from ..translator.visitors import NodeVisitor
from .registry import StrategyEntry, StrategyRegistry, default_registry

if TYPE_CHECKING:
    from ..translator.dialects import Dialect

logger = logging.getLogger(__name__)


# =============================================================================
# Runtime construction
# =============================================================================


class ArgumentEvaluator(NodeVisitor[Any]):
    """Evaluates strategy argument nodes into Python values.

    Literals evaluate directly and variables resolve from bindings. Nodes
    that need a traversal engine to evaluate (step chains, enum constants,
    vertices) are rejected.
    """

    def __init__(self, bindings: Mapping[str, Any] | None = None):
        self.bindings = bindings or {}

    def _scalar(self, node: Node) -> Any:
        return to_python(decode_literal(node))

    visit_IntegerLiteral = _scalar
    visit_FloatLiteral = _scalar
    visit_StringLiteral = _scalar
    visit_BooleanLiteral = _scalar
    visit_NullLiteral = _scalar
    visit_NanLiteral = _scalar
    visit_InfLiteral = _scalar
    visit_DateLiteral = _scalar

    def visit_ListLiteral(self, node: ListLiteral) -> list[Any]:
        return [self.visit(item) for item in node.items]

    def visit_MapLiteral(self, node: MapLiteral) -> dict[Any, Any]:
        try:
            return {self.visit(entry.key): self.visit(entry.value) for entry in node.entries}
        except TypeError as e:
            raise StrategyConstructionError(f"Unusable map key in strategy argument: {e}") from e

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name

    def visit_RangeLiteral(self, node: RangeLiteral) -> range:
        # lo..hi includes both ends
        low = parse_integer(decode_literal(node.low).text)
        high = parse_integer(decode_literal(node.high).text)
        return range(low, high + 1)

    def visit_VariableRef(self, node: VariableRef) -> Any:
        if node.name not in self.bindings:
            raise StrategyConstructionError(f"No binding for variable '{node.name}'")
        return self.bindings[node.name]

    def visit_default(self, node: Node) -> Any:
        raise StrategyConstructionError(
            f"Cannot evaluate {type(node).__name__} argument outside a traversal engine"
        )


def build_configuration(spec: StrategySpec, bindings: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Collect the strategy's args into a configuration, in source order.

    A repeated key keeps its last value. List values stay one property.
    """
    evaluator = ArgumentEvaluator(bindings)
    configuration: dict[str, Any] = {}
    for arg in spec.args:
        configuration[arg.key] = evaluator.visit(arg.value)
    return configuration


def _zero_arg_routes(entry: StrategyEntry) -> list[tuple[str, Callable[[], Any]]]:
    """Construction routes for the zero-arg form, in the order to try them."""
    entrypoints = entry.entrypoints
    routes: list[tuple[str, Callable[[], Any]]] = []
    if entrypoints.instance is not None:
        routes.append(("instance", entrypoints.instance))
    if entrypoints.constructor is not None:
        routes.append(("constructor", entrypoints.constructor))
    if entrypoints.create is not None:
        create = entrypoints.create
        routes.append(("create", lambda: create({})))
    return routes


def construct_strategy(
    spec: StrategySpec,
    registry: StrategyRegistry | None = None,
    bindings: Mapping[str, Any] | None = None,
) -> Any:
    """Build the runtime strategy object for a spec.

    The zero-arg form tries the singleton accessor, then the bare
    constructor, then the factory with an empty configuration; the first
    that succeeds wins. The configured form always uses the factory.

    Raises:
        UnregisteredStrategyError: If the name is not registered
        StrategyConstructionError: If no construction route succeeds
    """
    registry = registry if registry is not None else default_registry()
    entry = registry.lookup(spec.name)
    if entry is None:
        raise UnregisteredStrategyError(spec.name)

    if spec.is_zero_arg:
        failures: list[str] = []
        for route, build in _zero_arg_routes(entry):
            try:
                strategy = build()
            except Exception as e:
                logger.debug(f"{spec.name}: {route} failed: {e}")
                failures.append(f"{route}: {e}")
                continue
            logger.debug(f"{spec.name}: constructed via {route}")
            return strategy
        raise StrategyConstructionError(
            f"Unexpected TraversalStrategy specification - {spec.name} ({'; '.join(failures)})"
        )

    configuration = build_configuration(spec, bindings)
    if entry.entrypoints.create is None:
        raise StrategyConstructionError(
            f"Unexpected TraversalStrategy specification - {spec.name} takes no configuration"
        )
    try:
        strategy = entry.entrypoints.create(configuration)
    except Exception as e:
        raise StrategyConstructionError(
            f"Unexpected TraversalStrategy specification - {spec.name}: {e}"
        ) from e
    logger.debug(f"{spec.name}: constructed via create with {sorted(configuration)}")
    return strategy


# =============================================================================
# Source-text construction
# =============================================================================


def render_strategy_source(
    spec: StrategySpec,
    dialect: Dialect,
    render: Callable[[ParseNode], str],
    registry: StrategyRegistry | None = None,
) -> str:
    """Render the construction source for a spec in a target's syntax.

    Argument values go through ``render`` in source order. When a registry
    is given, the name must be registered in it.

    Raises:
        UnregisteredStrategyError: If a registry is given and lacks the name
    """
    if registry is not None and registry.lookup(spec.name) is None:
        raise UnregisteredStrategyError(spec.name)

    if spec.is_zero_arg:
        return dialect.zero_arg_strategy(spec.name)
    args = [(arg.key, render(arg.value)) for arg in spec.args]
    return dialect.configured_strategy(spec.name, args)
