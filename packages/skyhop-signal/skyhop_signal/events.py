"""Output events emitted by the simulation.

Events are plain frozen dataclasses. Anything with side effects (sound,
storage, analytics) subscribes to them instead of being called from the
simulation itself.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """Base class for all simulation events."""

    tick: int


@dataclass(frozen=True)
class Flapped(Event):
    velocity: float


@dataclass(frozen=True)
class ObstaclePassed(Event):
    score: int


@dataclass(frozen=True)
class BestScoreAchieved(Event):
    best_score: int


@dataclass(frozen=True)
class BestScoreReset(Event):
    previous: int


@dataclass(frozen=True)
class Died(Event):
    score: int
    cause: str


@dataclass(frozen=True)
class PhaseChanged(Event):
    is_night: bool


@dataclass(frozen=True)
class StateChanged(Event):
    old: str
    new: str


@dataclass(frozen=True)
class GameReset(Event):
    pass
