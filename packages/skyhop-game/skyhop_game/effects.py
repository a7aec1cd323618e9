"""Simulation clock and post-death effect timers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from skyhop_game.lifecycle import GAMEOVER

if TYPE_CHECKING:
    from skyhop import TickContext

    from skyhop_game.session import GameSession


def sim_clock_system(session: GameSession, ctx: TickContext) -> None:
    session.sim_ms += ctx.delta_ms


def make_effects_system(
    shake_magnitude: float = 6.0,
    death_fade_ms: float = 700.0,
) -> Callable[[GameSession, TickContext], None]:
    """Count down the shake timer and ramp the death fade.

    The shake offset is redrawn every tick while shaking, from the
    engine's seeded RNG.
    """

    def effects_system(session: GameSession, ctx: TickContext) -> None:
        if session.shake_ms > 0:
            session.shake_ms = max(0.0, session.shake_ms - ctx.delta_ms)
        if session.shake_ms > 0:
            session.shake_offset = (
                (ctx.random.random() - 0.5) * shake_magnitude,
                (ctx.random.random() - 0.5) * shake_magnitude,
            )
        else:
            session.shake_offset = (0.0, 0.0)

        if session.state == GAMEOVER:
            session.death_fade = min(1.0, session.death_fade + ctx.delta_ms / death_fade_ms)

    return effects_system
