"""skyhop-signal - In-process event bus for the skyhop engine."""
from __future__ import annotations

from skyhop_signal.bus import SignalBus
from skyhop_signal.events import (
    BestScoreAchieved,
    BestScoreReset,
    Died,
    Event,
    Flapped,
    GameReset,
    ObstaclePassed,
    PhaseChanged,
    StateChanged,
)
from skyhop_signal.systems import make_signal_system

__all__ = [
    "SignalBus",
    "make_signal_system",
    "Event",
    "Flapped",
    "ObstaclePassed",
    "BestScoreAchieved",
    "BestScoreReset",
    "Died",
    "PhaseChanged",
    "StateChanged",
    "GameReset",
]
