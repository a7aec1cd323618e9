"""Pure collision and pass detection between the actor and obstacles."""
from __future__ import annotations

from skyhop_physics.components import Actor, Obstacle


def overlaps_horizontally(actor: Actor, obstacle: Obstacle) -> bool:
    return actor.x + actor.radius > obstacle.x and actor.x - actor.radius < obstacle.right


def check_collision(actor: Actor, obstacle: Obstacle) -> bool:
    """True when the actor overlaps the column and pokes out of the gap."""
    if not overlaps_horizontally(actor, obstacle):
        return False
    return (
        actor.y - actor.radius < obstacle.gap_top
        or actor.y + actor.radius > obstacle.gap_bottom
    )


def check_pass(actor: Actor, obstacle: Obstacle) -> bool:
    """One-shot: True the first time the column's right edge is behind the actor.

    Marks the obstacle as passed so later calls return False.
    """
    if obstacle.passed:
        return False
    if obstacle.right < actor.x:
        obstacle.passed = True
        return True
    return False


def out_of_bounds(actor: Actor, ceiling: float, floor: float) -> str | None:
    """Return ``"ground"`` or ``"ceiling"`` when the actor leaves the band."""
    if actor.y + actor.radius > floor:
        return "ground"
    if actor.y < ceiling + actor.radius:
        return "ceiling"
    return None
