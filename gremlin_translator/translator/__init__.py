"""Traversal parse tree translator.

Renders a validated parse tree as source text in one of several targets:
the canonical query language, an anonymized form, or host-language driver
code (Groovy, Java, JavaScript, Python, C#, Go).

The translation pipeline:
  1. Query text -> front end -> ParseNode tree (nodes.py)
  2. ParseNode + Target -> Translator walks the tree (translator.py)
  3. Each node is rendered by the target's Dialect (dialects/)

The driver itself (``translate``) is exported from the top-level package.
"""

from .context import DEFAULT_ANONYMIZATION_CATEGORIES, AnonymizationCache, TranslationState
from .dialects import DIALECTS, Dialect, Target, get_dialect
from .errors import (
    GremlinTranslatorError,
    StrategyConstructionError,
    TranslationError,
    UnregisteredStrategyError,
    UnsupportedLiteralError,
)
from .nodes import ParseNode, dump_tree, load_tree

__all__ = [
    "DEFAULT_ANONYMIZATION_CATEGORIES",
    "DIALECTS",
    "AnonymizationCache",
    "Dialect",
    "GremlinTranslatorError",
    "ParseNode",
    "StrategyConstructionError",
    "Target",
    "TranslationError",
    "TranslationState",
    "UnregisteredStrategyError",
    "UnsupportedLiteralError",
    "dump_tree",
    "get_dialect",
    "load_tree",
]
