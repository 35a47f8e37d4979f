"""Collects free variable names from a subtree."""

from __future__ import annotations

from ..nodes import Node, VariableRef
from .base import NodeVisitor, child_nodes


class ParameterCollector(NodeVisitor[None]):
    """Records every ``VariableRef`` name below a node.

    Used where a renderer collapses a subtree without walking it, so that
    variables inside still reach the parameter set.
    """

    def __init__(self, parameters: set[str]):
        self.parameters = parameters

    def visit_VariableRef(self, node: VariableRef) -> None:
        self.parameters.add(node.name)

    def visit_default(self, node: Node) -> None:
        for child in child_nodes(node):
            self.visit(child)
