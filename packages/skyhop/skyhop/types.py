"""Shared type aliases and protocols for the skyhop engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    """Per-tick view handed to every system.

    ``delta_ms`` is the host frame delta after clamping (never negative).
    ``now_ms`` is the raw host timestamp of the frame.
    """

    tick_number: int
    now_ms: float
    delta_ms: float
    random: _random.Random


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, unknown state)."""


System = Callable[[Any, TickContext], None]
