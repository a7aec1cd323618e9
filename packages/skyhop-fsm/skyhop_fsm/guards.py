"""LifecycleGuards registry."""
from __future__ import annotations

from typing import Any, Callable


class LifecycleGuards:
    """Maps guard name strings to callable predicates over the session."""

    def __init__(self) -> None:
        self._guards: dict[str, Callable[[Any], bool]] = {}

    def register(self, name: str, fn: Callable[[Any], bool]) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, state: Any) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](state)

    def has(self, name: str) -> bool:
        return name in self._guards
