"""Lifecycle state machine component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Lifecycle:
    """Finite state machine. Transition table maps states to trigger/target pairs.

    A trigger is either a command name fired explicitly (``"activate"``)
    or the name of a registered guard evaluated once per tick
    (``"died"``). Triggers with no edge from the current state are
    ignored.
    """

    state: str
    transitions: dict[str, list[list[str]]]

    def target(self, trigger: str) -> str | None:
        for name, target in self.transitions.get(self.state, ()):
            if name == trigger:
                return target
        return None

    def triggers(self) -> list[str]:
        return [name for name, _ in self.transitions.get(self.state, ())]
