"""Collision and scoring systems."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from skyhop_physics import check_collision, check_pass, out_of_bounds, scroll
from skyhop_signal import BestScoreAchieved, ObstaclePassed, SignalBus

if TYPE_CHECKING:
    from skyhop import TickContext

    from skyhop_game.session import GameSession


def kill(session: GameSession, cause: str) -> None:
    """Mark the session dead. The first cause wins."""
    if not session.dead:
        session.dead = True
        session.death_cause = cause


def award_pass(session: GameSession, bus: SignalBus, tick: int) -> None:
    session.score += 1
    bus.publish(ObstaclePassed(tick=tick, score=session.score))
    if session.score > session.best_score:
        session.best_score = session.score
        bus.publish(BestScoreAchieved(tick=tick, best_score=session.best_score))


def make_bounds_system(floor: float, ceiling: float = 0.0) -> Callable[[GameSession, TickContext], None]:
    def bounds_system(session: GameSession, ctx: TickContext) -> None:
        cause = out_of_bounds(session.actor, ceiling, floor)
        if cause is not None:
            kill(session, cause)

    return bounds_system


def make_obstacle_system(
    bus: SignalBus,
    speed: float = 2.0,
) -> Callable[[GameSession, TickContext], None]:
    """Scroll columns, then test each survivor: collision first, pass otherwise.

    A column that hits the actor never scores, and neither does any column
    after it. A ground or ceiling death earlier in the tick still lets
    columns behind the actor score.
    """

    def obstacle_system(session: GameSession, ctx: TickContext) -> None:
        scroll(session.obstacles, speed)
        actor = session.actor
        for obstacle in session.obstacles:
            if check_collision(actor, obstacle):
                kill(session, "obstacle")
                break
            if check_pass(actor, obstacle):
                award_pass(session, bus, ctx.tick_number)

    return obstacle_system
