"""Parse tree node kinds handed over by the query front end.

The front end validates query text against the grammar and produces a tree
of these nodes. The translator only reads them; every node is frozen.

Scalar literals keep the raw source text (suffixes and quote characters
included) since several targets re-emit that text verbatim.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Node(BaseModel):
    """Base for all parse tree nodes."""

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Scalar literals
# =============================================================================


class IntegerLiteral(Node):
    """Integer numeral with an optional b/s/i/l/n suffix, e.g. ``-1L``."""

    type: Literal["integer"] = "integer"
    text: str


class FloatLiteral(Node):
    """Decimal numeral with an optional f/d/m suffix, e.g. ``1.0D``."""

    type: Literal["float"] = "float"
    text: str


class StringLiteral(Node):
    """Quoted string as written, delimiters included.

    A nullable slot (``hasLabel(null)``) carries the bare text ``null``.
    """

    type: Literal["string"] = "string"
    text: str
    nullable: bool = False


class BooleanLiteral(Node):
    type: Literal["boolean"] = "boolean"
    value: bool


class NullLiteral(Node):
    type: Literal["null"] = "null"


class NanLiteral(Node):
    type: Literal["nan"] = "nan"


class InfLiteral(Node):
    type: Literal["inf"] = "inf"
    negative: bool = False


class DateLiteral(Node):
    """``datetime('...')`` call; text is the quoted ISO-8601 argument."""

    type: Literal["date"] = "date"
    text: str


# =============================================================================
# Collection literals
# =============================================================================


class ListLiteral(Node):
    type: Literal["list"] = "list"
    items: list[ParseNode] = Field(default_factory=list)


class MapEntry(Node):
    """One ``key:value`` pair of a map literal."""

    type: Literal["map_entry"] = "map_entry"
    key: ParseNode
    value: ParseNode


class MapLiteral(Node):
    type: Literal["map"] = "map"
    entries: list[MapEntry] = Field(default_factory=list)


class RangeLiteral(Node):
    """``lo..hi`` integer range."""

    type: Literal["range"] = "range"
    low: IntegerLiteral
    high: IntegerLiteral


class VertexLiteral(Node):
    """``new Vertex(id, label)`` reference element."""

    type: Literal["vertex"] = "vertex"
    id: ParseNode
    label: ParseNode


# =============================================================================
# Strategies
# =============================================================================


class StrategyArg(Node):
    """``key:value`` configuration argument of a strategy."""

    type: Literal["strategy_arg"] = "strategy_arg"
    key: str
    value: ParseNode


class StrategySpec(Node):
    """Named strategy, optionally configured.

    No args is the zero-arg form (``ReadOnlyStrategy``); otherwise the
    ``new Name(k:v, ...)`` form. Argument order is significant.
    """

    type: Literal["strategy"] = "strategy"
    name: str
    args: list[StrategyArg] = Field(default_factory=list)

    @property
    def is_zero_arg(self) -> bool:
        return not self.args


# =============================================================================
# Traversal structure
# =============================================================================


class TraversalSource(Node):
    """The root traversal source; its name is chosen by the caller."""

    type: Literal["source"] = "source"


class AnonymousTraversal(Node):
    """The ``__`` marker that starts a spawned anonymous traversal."""

    type: Literal["anonymous"] = "anonymous"


class StepCall(Node):
    """A step or method applied to a receiver.

    A missing receiver marks a bare step sequence (``out().count()``) used
    where an anonymous traversal is expected.
    """

    type: Literal["step"] = "step"
    receiver: ParseNode | None = None
    name: str
    args: list[ParseNode] = Field(default_factory=list)


class StaticCall(Node):
    """Function on a named owner, e.g. ``P.within(...)``."""

    type: Literal["static_call"] = "static_call"
    owner: str
    name: str
    args: list[ParseNode] = Field(default_factory=list)


class EnumConstant(Node):
    """Enum-like keyword resolved to its owner, e.g. ``T.id``."""

    type: Literal["enum"] = "enum"
    owner: str
    name: str


class VariableRef(Node):
    """Free variable, extracted as a parameter."""

    type: Literal["variable"] = "variable"
    name: str


class Identifier(Node):
    """Bare identifier used as a map key (``[name:1]``)."""

    type: Literal["identifier"] = "identifier"
    name: str


# Discriminated union of all node kinds
ParseNode = Annotated[
    IntegerLiteral
    | FloatLiteral
    | StringLiteral
    | BooleanLiteral
    | NullLiteral
    | NanLiteral
    | InfLiteral
    | DateLiteral
    | ListLiteral
    | MapLiteral
    | RangeLiteral
    | VertexLiteral
    | StrategySpec
    | TraversalSource
    | AnonymousTraversal
    | StepCall
    | StaticCall
    | EnumConstant
    | VariableRef
    | Identifier,
    Field(discriminator="type"),
]

for _model in (ListLiteral, MapEntry, MapLiteral, VertexLiteral, StrategyArg, StrategySpec, StepCall, StaticCall):
    _model.model_rebuild()

_tree_adapter: TypeAdapter[ParseNode] = TypeAdapter(ParseNode)


def load_tree(data: str | bytes) -> ParseNode:
    """Load a parse tree from its JSON form."""
    return _tree_adapter.validate_json(data)


def dump_tree(node: ParseNode) -> str:
    """Serialize a parse tree to JSON."""
    return _tree_adapter.dump_json(node).decode()
