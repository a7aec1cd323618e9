"""skyhop-physics - Flight integration and gap collision for the skyhop engine."""
from __future__ import annotations

from skyhop_physics.collision import (
    check_collision,
    check_pass,
    out_of_bounds,
    overlaps_horizontally,
)
from skyhop_physics.components import Actor, FlightParams, Obstacle
from skyhop_physics.systems import (
    fall,
    integrate,
    jump,
    make_fall_system,
    make_flight_system,
    scroll,
)

__all__ = [
    "Actor",
    "FlightParams",
    "Obstacle",
    "check_collision",
    "check_pass",
    "out_of_bounds",
    "overlaps_horizontally",
    "fall",
    "integrate",
    "jump",
    "make_fall_system",
    "make_flight_system",
    "scroll",
]
