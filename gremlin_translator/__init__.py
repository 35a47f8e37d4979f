"""Gremlin traversal translator and strategy resolver."""

from .strategies import StrategyRegistry, construct_strategy, default_registry
from .translator import Target, TranslationError, load_tree
from .translator.translator import Translation, Translator, translate

__all__ = [
    "StrategyRegistry",
    "Target",
    "Translation",
    "TranslationError",
    "Translator",
    "construct_strategy",
    "default_registry",
    "load_tree",
    "translate",
]
