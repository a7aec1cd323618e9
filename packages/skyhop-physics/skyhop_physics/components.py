"""Physics components and flight constants."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Actor:
    """The player body: a circle with vertical velocity and a visual tilt."""

    x: float
    y: float
    radius: float = 15.0
    velocity: float = 0.0
    rotation: float = 0.0


@dataclass
class Obstacle:
    """A scrolling column with a vertical gap. ``x`` is the left edge."""

    x: float
    width: float
    gap_center: float
    gap_height: float
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def gap_top(self) -> float:
        return self.gap_center - self.gap_height / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_center + self.gap_height / 2


@dataclass(frozen=True)
class FlightParams:
    """Per-tick flight constants. Not scaled by frame delta.

    Attributes:
        gravity: Added to velocity every tick.
        jump_impulse: Velocity set by a flap (negative is up).
        tilt_up_threshold: Velocities below this tilt the nose up.
        tilt_up_step: Rotation added per tick while climbing.
        tilt_up_max: Upper rotation cap.
        tilt_down_step: Rotation removed per tick otherwise.
        tilt_down_min: Lower rotation cap.
    """

    gravity: float = 0.35
    jump_impulse: float = -7.0
    tilt_up_threshold: float = -2.0
    tilt_up_step: float = 0.2
    tilt_up_max: float = 0.6
    tilt_down_step: float = 0.15
    tilt_down_min: float = -1.2
