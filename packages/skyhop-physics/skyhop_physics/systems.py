"""Integrators and system factories for actor and obstacle motion."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from skyhop_physics.components import Actor, FlightParams, Obstacle

if TYPE_CHECKING:
    from skyhop import TickContext


def _actor_of(state: Any) -> Actor:
    return state.actor


def integrate(actor: Actor, params: FlightParams) -> None:
    """One fixed step: gravity -> velocity -> position, then tilt."""
    actor.velocity += params.gravity
    actor.y += actor.velocity

    if actor.velocity < params.tilt_up_threshold:
        actor.rotation = min(actor.rotation + params.tilt_up_step, params.tilt_up_max)
    else:
        actor.rotation = max(actor.rotation - params.tilt_down_step, params.tilt_down_min)


def jump(actor: Actor, params: FlightParams) -> None:
    actor.velocity = params.jump_impulse


def fall(actor: Actor, delta_ms: float, speed_per_ms: float, floor: float | None = None) -> None:
    """Time-scaled descent used after death. Stops with the body resting on ``floor``.

    A body already below the resting line stays where it is.
    """
    step = speed_per_ms * max(0.0, delta_ms)
    if floor is None:
        actor.y += step
        return
    rest = floor - actor.radius
    if actor.y < rest:
        actor.y = min(actor.y + step, rest)


def scroll(obstacles: list[Obstacle], speed: float) -> list[Obstacle]:
    """Move every obstacle left by ``speed`` and drop the ones fully off-screen.

    Returns the removed obstacles.
    """
    removed: list[Obstacle] = []
    for obstacle in obstacles:
        obstacle.x -= speed
    for obstacle in list(obstacles):
        if obstacle.right < 0:
            obstacles.remove(obstacle)
            removed.append(obstacle)
    return removed


def make_flight_system(
    params: FlightParams,
    get_actor: Callable[[Any], Actor] = _actor_of,
) -> Callable[[Any, TickContext], None]:
    def flight_system(state: Any, ctx: TickContext) -> None:
        integrate(get_actor(state), params)

    return flight_system


def make_fall_system(
    speed_per_ms: float,
    floor: float | None = None,
    get_actor: Callable[[Any], Actor] = _actor_of,
) -> Callable[[Any, TickContext], None]:
    def fall_system(state: Any, ctx: TickContext) -> None:
        fall(get_actor(state), ctx.delta_ms, speed_per_ms, floor)

    return fall_system
