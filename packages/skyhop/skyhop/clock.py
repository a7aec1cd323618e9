"""FrameClock - turns host frame timestamps into clamped deltas."""

import math
import random

from skyhop.types import TickContext


class FrameClock:
    def __init__(self, max_delta_ms: float | None = None) -> None:
        if max_delta_ms is not None and max_delta_ms <= 0:
            raise ValueError("max_delta_ms must be positive")
        self._max_delta_ms = max_delta_ms
        self._tick_number = 0
        self._last_ms: float | None = None
        self._delta_ms = 0.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def last_ms(self) -> float | None:
        return self._last_ms

    @property
    def delta_ms(self) -> float:
        return self._delta_ms

    def advance(self, now_ms: float) -> float:
        """Record a frame timestamp and return the delta since the previous one.

        The first frame, non-finite timestamps and timestamps that go
        backwards all yield a delta of zero.
        """
        self._tick_number += 1
        if not math.isfinite(now_ms):
            self._delta_ms = 0.0
            return 0.0
        if self._last_ms is None:
            delta = 0.0
        else:
            delta = max(0.0, now_ms - self._last_ms)
        if self._max_delta_ms is not None:
            delta = min(delta, self._max_delta_ms)
        # Re-anchor on backwards jumps.
        self._last_ms = now_ms
        self._delta_ms = delta
        return delta

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            now_ms=self._last_ms if self._last_ms is not None else 0.0,
            delta_ms=self._delta_ms,
            random=rng,
        )

    def reset(self, tick_number: int = 0, last_ms: float | None = None) -> None:
        self._tick_number = tick_number
        self._last_ms = last_ms
        self._delta_ms = 0.0
