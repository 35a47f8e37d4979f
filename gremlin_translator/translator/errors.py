"""Errors raised while translating traversals or resolving strategies."""

from __future__ import annotations


class GremlinTranslatorError(Exception):
    """Base class for all translator errors."""


class UnsupportedLiteralError(GremlinTranslatorError):
    """A literal has no representation in the selected target."""


class UnregisteredStrategyError(GremlinTranslatorError):
    """A strategy name is absent from the strategy registry."""

    def __init__(self, name: str):
        super().__init__(f"Unexpected TraversalStrategy specification - {name}")
        self.name = name


class StrategyConstructionError(GremlinTranslatorError):
    """Every construction route for a registered strategy failed."""


class TranslationError(GremlinTranslatorError):
    """Terminal error of a translation call.

    The message is the wrapped cause's message, unchanged, so consumers that
    match on message prefixes keep working.
    """

    def __init__(self, cause: GremlinTranslatorError):
        super().__init__(str(cause))
        self.cause = cause
