"""Rendering rules shared by every output target.

A dialect is a table of rendering rules for one target. The base class holds
the canonical rules (the query language itself); each target overrides only
the rules where its syntax differs. Dialects hold no per-call state: the
translation state is passed in where a rule needs it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TYPE_CHECKING

from ..errors import UnsupportedLiteralError
from ..literals import (
    BigDecimalValue,
    BigIntegerValue,
    BooleanValue,
    DateValue,
    FloatValue,
    InfinityValue,
    IntegerValue,
    LiteralValue,
    NanValue,
    NullValue,
    StringValue,
)
from ..nodes import Identifier, ListLiteral, MapLiteral, ParseNode, RangeLiteral, VertexLiteral

if TYPE_CHECKING:
    from ..context import TranslationState

Render = Callable[[ParseNode], str]


class Target(str, Enum):
    """Output targets a traversal can be translated to."""

    LANGUAGE = "language"
    ANONYMIZED = "anonymized"
    GROOVY = "groovy"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    DOTNET = "dotnet"
    GO = "go"


def requote(body: str, quote: str, unescape: str = "") -> str:
    """Wrap a string body in ``quote``, escaping bare occurrences of it.

    Escape sequences already in the body are kept verbatim, except that a
    backslash before any character in ``unescape`` is dropped.
    """
    out: list[str] = []
    escaped = False
    for ch in body:
        if escaped:
            escaped = False
            if ch in unescape:
                out.pop()
        elif ch == "\\":
            escaped = True
        elif ch == quote:
            out.append("\\")
        out.append(ch)
    return f"{quote}{''.join(out)}{quote}"


class Dialect:
    """Canonical rendering rules.

    Attributes:
        target: Target this dialect renders for
        display_name: Name used in error messages, e.g. "Java"
        quote_char: Delimiter for strings; None keeps the source delimiter
        dropped_escapes: Characters whose backslash escape is invalid in the target
        supports_ranges: Whether ``lo..hi`` has a rendering
    """

    target: Target = Target.LANGUAGE
    display_name: str = "Language"
    quote_char: str | None = None
    dropped_escapes: str = ""
    supports_ranges: bool = True

    null_text = "null"
    true_text = "true"
    false_text = "false"
    anonymous_prefix = "__"

    # =========================================================================
    # Names
    # =========================================================================

    def source(self, name: str) -> str:
        return name

    def step_name(self, name: str) -> str:
        return name

    def enum_constant(self, owner: str, name: str) -> str:
        return f"{owner}.{name}"

    def static_owner(self, owner: str) -> str:
        return owner

    # =========================================================================
    # Scalar literals
    # =========================================================================

    def render_literal(self, value: LiteralValue, state: TranslationState) -> str:
        """Render a decoded scalar literal."""
        match value:
            case NullValue():
                return self.null(value)
            case BooleanValue():
                return self.true_text if value.value else self.false_text
            case IntegerValue():
                return self.integer(value)
            case BigIntegerValue():
                return self.big_integer(value)
            case FloatValue():
                return self.float_(value)
            case BigDecimalValue():
                return self.big_decimal(value)
            case StringValue():
                return self.string(value)
            case DateValue():
                return self.date(value)
            case NanValue():
                return self.nan()
            case InfinityValue():
                return self.infinity(value)
        raise TypeError(f"Not a literal value: {type(value).__name__}")

    def null(self, value: NullValue) -> str:
        return self.null_text

    def integer(self, value: IntegerValue) -> str:
        return f"{value.text}{value.suffix}"

    def big_integer(self, value: BigIntegerValue) -> str:
        return f"{value.text}n"

    def float_(self, value: FloatValue) -> str:
        return f"{value.text}{value.suffix}"

    def big_decimal(self, value: BigDecimalValue) -> str:
        return f"{value.text}m"

    def string(self, value: StringValue) -> str:
        if self.quote_char is None:
            return f"{value.quote}{value.text}{value.quote}"
        return requote(value.text, self.quote_char, self.dropped_escapes)

    def quote(self, text: str) -> str:
        return requote(text, self.quote_char or '"', self.dropped_escapes)

    def date(self, value: DateValue) -> str:
        return f"datetime({value.text})"

    def nan(self) -> str:
        return "NaN"

    def infinity(self, value: InfinityValue) -> str:
        return "-Infinity" if value.negative else "Infinity"

    # =========================================================================
    # Collections and structure
    # =========================================================================

    def list_literal(self, node: ListLiteral, render: Render, state: TranslationState) -> str:
        return self.list_of([render(item) for item in node.items])

    def list_of(self, items: Sequence[str]) -> str:
        return f"[{', '.join(items)}]"

    def map_key(self, key: ParseNode, render: Render) -> str:
        """Render a map key; construction targets quote bare identifiers."""
        if isinstance(key, Identifier):
            return key.name if self.quote_char is None else self.quote(key.name)
        return render(key)

    def map_literal(self, node: MapLiteral, render: Render, state: TranslationState) -> str:
        entries = [(self.map_key(e.key, render), render(e.value)) for e in node.entries]
        return self.map_of(entries)

    def map_of(self, entries: Sequence[tuple[str, str]]) -> str:
        if not entries:
            return "[:]"
        return "[" + ", ".join(f"{k}:{v}" for k, v in entries) + "]"

    def range_literal(self, node: RangeLiteral, render: Render) -> str:
        if not self.supports_ranges:
            raise UnsupportedLiteralError(f"{self.display_name} does not support range literals")
        return f"{render(node.low)}..{render(node.high)}"

    def vertex_literal(self, node: VertexLiteral, render: Render) -> str:
        return f"new Vertex({render(node.id)}, {render(node.label)})"

    # =========================================================================
    # Strategies
    # =========================================================================

    def zero_arg_strategy(self, name: str) -> str:
        return name

    def configured_strategy(self, name: str, args: Sequence[tuple[str, str]]) -> str:
        rendered = ", ".join(f"{key}:{value}" for key, value in args)
        return f"new {name}({rendered})"
