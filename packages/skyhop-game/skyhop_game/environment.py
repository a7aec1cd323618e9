"""Day/night cycle."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from skyhop_signal import PhaseChanged, SignalBus

if TYPE_CHECKING:
    from skyhop import TickContext

    from skyhop_game.session import GameSession


@dataclass
class EnvironmentCycle:
    """Boolean day/night phase plus a blend value easing toward it.

    ``blend`` is 0 for full day and 1 for full night. ``last_flip_ms`` is
    None until the first simulated tick anchors it.
    """

    is_night: bool = False
    blend: float = 0.0
    last_flip_ms: float | None = None

    def advance(self, delta_ms: float, blend_duration_ms: float = 1500.0) -> None:
        step = max(0.0, delta_ms) / blend_duration_ms
        self.blend += step if self.is_night else -step
        self.blend = max(0.0, min(1.0, self.blend))

    def maybe_flip(self, now_ms: float, interval_ms: float = 7000.0) -> bool:
        if self.last_flip_ms is None:
            self.last_flip_ms = now_ms
            return False
        if now_ms - self.last_flip_ms >= interval_ms:
            self.is_night = not self.is_night
            self.last_flip_ms = now_ms
            return True
        return False


def make_environment_system(
    bus: SignalBus,
    interval_ms: float = 7000.0,
    blend_duration_ms: float = 1500.0,
) -> Callable[[GameSession, TickContext], None]:
    """Flip on the simulation clock first, then blend toward the new phase."""

    def environment_system(session: GameSession, ctx: TickContext) -> None:
        env = session.environment
        if env.maybe_flip(session.sim_ms, interval_ms):
            bus.publish(PhaseChanged(tick=ctx.tick_number, is_night=env.is_night))
        env.advance(ctx.delta_ms, blend_duration_ms)

    return environment_system
