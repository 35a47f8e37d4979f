"""Parse tree visitors."""

from .base import NodeVisitor, child_nodes
from .parameter_collector import ParameterCollector

__all__ = ["NodeVisitor", "ParameterCollector", "child_nodes"]
