"""Strategy registry.

Maps strategy names to how they are constructed. Strategy modules register
explicitly at start-up; once populated, the registry is frozen and read-only,
so any number of translations can consult it concurrently.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ConstructionKind(str, Enum):
    """Primary construction route of a strategy."""

    SINGLETON = "singleton"
    BARE_CONSTRUCTOR = "bare_constructor"
    CONFIG_FACTORY = "config_factory"


@dataclass(frozen=True)
class StrategyEntrypoints:
    """Callables a strategy exposes for construction.

    Attributes:
        instance: Zero-argument accessor returning the shared instance
        constructor: Zero-argument constructor
        create: Factory taking a configuration mapping
    """

    instance: Callable[[], Any] | None = None
    constructor: Callable[[], Any] | None = None
    create: Callable[[Mapping[str, Any]], Any] | None = None


@dataclass(frozen=True)
class StrategyEntry:
    name: str
    kind: ConstructionKind
    entrypoints: StrategyEntrypoints


def _required_entrypoint(kind: ConstructionKind, entrypoints: StrategyEntrypoints) -> Callable | None:
    match kind:
        case ConstructionKind.SINGLETON:
            return entrypoints.instance
        case ConstructionKind.BARE_CONSTRUCTOR:
            return entrypoints.constructor
        case ConstructionKind.CONFIG_FACTORY:
            return entrypoints.create


class StrategyRegistry:
    """Write-once mapping from strategy name to its construction policy.

    Example:
        registry = StrategyRegistry()
        registry.register(
            "ReadOnlyStrategy",
            ConstructionKind.SINGLETON,
            StrategyEntrypoints(instance=ReadOnlyStrategy.instance),
        )
        registry.freeze()
    """

    def __init__(self) -> None:
        self._entries: dict[str, StrategyEntry] = {}
        self._frozen = False
        self._lock = threading.Lock()

    def register(
        self,
        name: str,
        kind: ConstructionKind,
        entrypoints: StrategyEntrypoints,
    ) -> StrategyEntry:
        """Register a strategy.

        Raises:
            ValueError: If the entrypoint for ``kind`` is missing
            RuntimeError: If the registry is already frozen
        """
        if _required_entrypoint(kind, entrypoints) is None:
            raise ValueError(f"Strategy {name} registered as {kind.value} without that entrypoint")

        entry = StrategyEntry(name=name, kind=kind, entrypoints=entrypoints)
        with self._lock:
            if self._frozen:
                raise RuntimeError(f"Strategy registry is frozen; cannot register {name}")
            self._entries[name] = entry
        logger.debug(f"Registered strategy {name} ({kind.value})")
        return entry

    def lookup(self, name: str) -> StrategyEntry | None:
        return self._entries.get(name)

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[StrategyEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)


_default_registry: StrategyRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> StrategyRegistry:
    """Process-wide registry holding the built-in strategies.

    Populated and frozen on first use; concurrent first callers wait for
    population to finish.
    """
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                from .builtin import register_builtin_strategies

                registry = StrategyRegistry()
                register_builtin_strategies(registry)
                registry.freeze()
                logger.info(f"Strategy registry populated with {len(registry)} strategies")
                _default_registry = registry
    return _default_registry
