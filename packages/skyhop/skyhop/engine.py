"""Engine - frame-driven loop over an explicit state object."""

import os
import random
from typing import Any, Callable, Generic, Iterable, TypeVar

from skyhop.clock import FrameClock
from skyhop.types import SnapshotError, System, TickContext

S = TypeVar("S")

_SNAPSHOT_VERSION = 1


class Engine(Generic[S]):
    """Runs registered systems against ``state`` once per host frame.

    The engine owns no game data of its own; everything a system touches
    lives on ``state``. Randomness comes from a seeded ``random.Random``
    carried on the tick context so runs are reproducible.
    """

    def __init__(
        self,
        state: S,
        seed: int | None = None,
        max_delta_ms: float | None = None,
    ) -> None:
        self._state = state
        self._clock = FrameClock(max_delta_ms)
        self._systems: list[System] = []

        if seed is None:
            seed = _random_seed()
        self._seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def from_factory(
        cls,
        factory: Callable[[random.Random], S],
        seed: int | None = None,
        max_delta_ms: float | None = None,
    ) -> "Engine[S]":
        """Build the initial state from the engine's seeded RNG.

        Draws made by ``factory`` advance the same stream the systems
        later see, so a seed fixes the initial state too.
        """
        if seed is None:
            seed = _random_seed()
        rng = random.Random(seed)
        engine = cls(factory(rng), seed=seed, max_delta_ms=max_delta_ms)
        engine._rng.setstate(rng.getstate())
        return engine

    @property
    def state(self) -> S:
        return self._state

    @state.setter
    def state(self, value: S) -> None:
        self._state = value

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self, now_ms: float) -> TickContext:
        self._clock.advance(now_ms)
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(self._state, ctx)
        return ctx

    def run(self, frames: Iterable[float]) -> TickContext | None:
        ctx = None
        for now_ms in frames:
            ctx = self.step(now_ms)
        return ctx

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "tick_number": self._clock.tick_number,
            "last_ms": self._clock.last_ms,
            "seed": self._seed,
            "rng_state": _serialize_rng_state(self._rng.getstate()),
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        try:
            rng_state = _deserialize_rng_state(data["rng_state"])
            tick_number = data["tick_number"]
            last_ms = data["last_ms"]
            seed = data["seed"]
            self._rng.setstate(rng_state)
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed engine snapshot: {exc}") from exc

        self._clock.reset(tick_number, last_ms)
        self._seed = seed


def _random_seed() -> int:
    return int.from_bytes(os.urandom(8))


def _serialize_rng_state(state: tuple[int, tuple[int, ...], float | None]) -> list[Any]:
    """Convert Random.getstate() tuple to JSON-compatible list.

    The state format (version, internalstate, gauss_next) is the
    CPython Mersenne Twister representation. Stable across CPython
    versions but may differ on other implementations (PyPy, etc.).
    """
    version, internalstate, gauss_next = state
    return [version, list(internalstate), gauss_next]


def _deserialize_rng_state(data: list[Any]) -> tuple[int, tuple[int, ...], float | None]:
    """Convert JSON list back to Random.setstate() tuple."""
    version, internalstate, gauss_next = data
    return (version, tuple(internalstate), gauss_next)
