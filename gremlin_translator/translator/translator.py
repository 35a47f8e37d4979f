"""Traversal translator.

Walks a validated parse tree depth-first, receiver before the call applied
to it, and renders each node with the selected target's dialect.

Translation Flow:
    ParseNode + Target -> translate() -> Translation(translated, parameters)

Any error aborts the whole translation; no partial text is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pydantic import BaseModel

from ..strategies.registry import StrategyRegistry
from ..strategies.resolver import render_strategy_source
from .context import DEFAULT_ANONYMIZATION_CATEGORIES, AnonymizationCache, TranslationState
from .dialects import Dialect, Target, get_dialect
from .errors import (
    StrategyConstructionError,
    TranslationError,
    UnregisteredStrategyError,
    UnsupportedLiteralError,
)
from .literals import ScalarLiteral, decode_literal
from .nodes import (
    AnonymousTraversal,
    EnumConstant,
    Identifier,
    ListLiteral,
    MapLiteral,
    ParseNode,
    RangeLiteral,
    StaticCall,
    StepCall,
    StrategySpec,
    TraversalSource,
    VariableRef,
    VertexLiteral,
)
from .visitors import NodeVisitor

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_NAME = "g"


class Translation(BaseModel):
    """Result of translating one traversal."""

    target: Target
    translated: str
    parameters: frozenset[str]


class Translator(NodeVisitor[str]):
    """Renders parse nodes as source text for one target.

    Every node kind has exactly one rule here; the dialect supplies the
    target-specific pieces. One instance serves one translation call.

    Example:
        translator = Translator(get_dialect(Target.PYTHON), TranslationState())
        text = translator.visit(tree)
    """

    def __init__(
        self,
        dialect: Dialect,
        state: TranslationState,
        registry: StrategyRegistry | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            dialect: Rendering rules of the output target
            state: Per-call state receiving parameters and placeholders
            registry: When given, strategy names must be registered in it
        """
        self.dialect = dialect
        self.state = state
        self.registry = registry

    # =========================================================================
    # Literals
    # =========================================================================

    def _scalar(self, node: ScalarLiteral) -> str:
        return self.dialect.render_literal(decode_literal(node), self.state)

    visit_IntegerLiteral = _scalar
    visit_FloatLiteral = _scalar
    visit_StringLiteral = _scalar
    visit_BooleanLiteral = _scalar
    visit_NullLiteral = _scalar
    visit_NanLiteral = _scalar
    visit_InfLiteral = _scalar
    visit_DateLiteral = _scalar

    def visit_ListLiteral(self, node: ListLiteral) -> str:
        return self.dialect.list_literal(node, self.visit, self.state)

    def visit_MapLiteral(self, node: MapLiteral) -> str:
        return self.dialect.map_literal(node, self.visit, self.state)

    def visit_RangeLiteral(self, node: RangeLiteral) -> str:
        return self.dialect.range_literal(node, self.visit)

    def visit_VertexLiteral(self, node: VertexLiteral) -> str:
        return self.dialect.vertex_literal(node, self.visit)

    def visit_StrategySpec(self, node: StrategySpec) -> str:
        return render_strategy_source(node, self.dialect, self.visit, self.registry)

    # =========================================================================
    # Traversal structure
    # =========================================================================

    def visit_TraversalSource(self, node: TraversalSource) -> str:
        return self.dialect.source(self.state.source_name)

    def visit_AnonymousTraversal(self, node: AnonymousTraversal) -> str:
        return self.dialect.anonymous_prefix

    def visit_StepCall(self, node: StepCall) -> str:
        # a bare step sequence gets an explicit anonymous prefix
        if node.receiver is None:
            receiver = self.dialect.anonymous_prefix
        else:
            receiver = self.visit(node.receiver)
        return f"{receiver}.{self.dialect.step_name(node.name)}({self._arguments(node.args)})"

    def visit_StaticCall(self, node: StaticCall) -> str:
        owner = self.dialect.static_owner(node.owner)
        return f"{owner}.{self.dialect.step_name(node.name)}({self._arguments(node.args)})"

    def visit_EnumConstant(self, node: EnumConstant) -> str:
        return self.dialect.enum_constant(node.owner, node.name)

    def visit_VariableRef(self, node: VariableRef) -> str:
        self.state.add_parameter(node.name)
        return node.name

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name

    def _arguments(self, args: Sequence[ParseNode]) -> str:
        return ", ".join(self.visit(arg) for arg in args)


def translate(
    tree: ParseNode,
    target: Target | str = Target.LANGUAGE,
    source_name: str = DEFAULT_SOURCE_NAME,
    *,
    registry: StrategyRegistry | None = None,
    anonymization_categories: Mapping[str, str] | None = None,
) -> Translation:
    """Translate a validated parse tree to the target's source text.

    Args:
        tree: Root of the parse tree
        target: Output target selector
        source_name: Name of the root traversal source
        registry: When given, strategy names are checked against it
        anonymization_categories: Entries replacing defaults in the literal kind -> category table

    Returns:
        Translation with the text and the free variable names

    Raises:
        TranslationError: Wrapping the first error met; no partial text
    """
    dialect = get_dialect(target)
    state = TranslationState(source_name=source_name)
    if anonymization_categories is not None:
        categories = {**DEFAULT_ANONYMIZATION_CATEGORIES, **anonymization_categories}
        state.anonymization = AnonymizationCache(categories=categories)

    translator = Translator(dialect, state, registry)
    logger.debug(f"Translating {type(tree).__name__} tree to {dialect.display_name}")
    try:
        state.append(translator.visit(tree))
    except (UnsupportedLiteralError, UnregisteredStrategyError, StrategyConstructionError) as e:
        logger.warning(f"Translation to {dialect.display_name} failed: {e}")
        raise TranslationError(e) from e

    logger.debug(f"Translated to {dialect.display_name} with {len(state.parameters)} parameters")
    return Translation(
        target=dialect.target,
        translated=state.text,
        parameters=frozenset(state.parameters),
    )
