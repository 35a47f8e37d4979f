"""Base visitor class for parse tree traversal."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from ..nodes import Node

T = TypeVar("T")


def child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct child nodes of a node in field order."""
    for name in type(node).model_fields:
        value = getattr(node, name)
        if isinstance(value, Node):
            yield value
        elif isinstance(value, list):
            yield from (item for item in value if isinstance(item, Node))


class NodeVisitor(Generic[T]):
    """Visitor over the closed set of parse node kinds.

    Dispatches to ``visit_{ClassName}``. A node kind without a handler goes
    to ``visit_default``, which raises unless a subclass opts into a generic
    rule.

    Usage:
        class Counter(NodeVisitor[int]):
            def visit_default(self, node):
                return 1 + sum(self.visit(c) for c in child_nodes(node))
    """

    def visit(self, node: Node) -> T:
        method_name = f"visit_{type(node).__name__}"
        visitor = getattr(self, method_name, self.visit_default)
        return visitor(node)

    def visit_default(self, node: Node) -> T:
        raise TypeError(f"{type(self).__name__} has no rule for {type(node).__name__} nodes")
