"""Game configuration dataclass and loader."""
from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skyhop_physics import FlightParams


class ConfigError(ValueError):
    """Raised when a configuration mapping is invalid."""


@dataclass(frozen=True)
class GameConfig:
    """Immutable gameplay constants. Defaults match the reference game.

    Speeds, gravity and the jump impulse are per-tick values; intervals
    and timers are milliseconds of simulated time.

    Attributes:
        width: Playfield width in pixels.
        height: Playfield height in pixels.
        ground_height: Height of the ground strip at the bottom.
        actor_radius: Radius of the player body.
        actor_x_ratio: Horizontal start position as a fraction of width.
        gravity: Velocity added per tick.
        jump_impulse: Velocity set by a flap.
        obstacle_speed: Pixels per tick obstacles scroll left.
        obstacle_width: Column width.
        gap_height: Vertical opening of each column.
        gap_margin_top: Smallest allowed gap center.
        gap_margin_bottom: Distance from the bottom for the largest gap center.
        spawn_interval_ms: Minimum simulated time between spawns.
        phase_interval_ms: Simulated time between day/night flips.
        blend_duration_ms: Time for a full day/night blend.
        shake_duration_ms: Screen shake length after death.
        shake_magnitude: Peak-to-peak shake offset in pixels.
        death_fade_ms: Time for the actor to fade out after death.
        fall_speed: Post-death descent in pixels per millisecond.
        max_delta_ms: Optional cap on host frame deltas.
        skins: Actor colours selectable with ``cycle_skin``.
    """

    width: int = 400
    height: int = 600
    ground_height: int = 40
    actor_radius: float = 15.0
    actor_x_ratio: float = 0.25

    gravity: float = 0.35
    jump_impulse: float = -7.0
    tilt_up_threshold: float = -2.0
    tilt_up_step: float = 0.2
    tilt_up_max: float = 0.6
    tilt_down_step: float = 0.15
    tilt_down_min: float = -1.2

    obstacle_speed: float = 2.0
    obstacle_width: float = 60.0
    gap_height: float = 140.0
    gap_margin_top: float = 100.0
    gap_margin_bottom: float = 100.0
    spawn_interval_ms: float = 1500.0

    phase_interval_ms: float = 7000.0
    blend_duration_ms: float = 1500.0

    cloud_speed: float = 0.3
    mountain_speed: float = 0.15
    hill_speed: float = 0.7

    shake_duration_ms: float = 250.0
    shake_magnitude: float = 6.0
    death_fade_ms: float = 700.0
    fall_speed: float = 0.1
    max_delta_ms: float | None = None

    skins: tuple[str, ...] = field(
        default=("#f1c40f", "#e74c3c", "#9b59b6", "#2ecc71", "#3498db")
    )

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError("width and height must be positive")
        if self.ground_height < 0 or self.ground_height >= self.height:
            raise ConfigError("ground_height must be within the playfield")
        if self.gap_margin_top + self.gap_margin_bottom > self.height:
            raise ConfigError("gap margins leave no room for a gap center")
        for name in ("spawn_interval_ms", "blend_duration_ms", "death_fade_ms"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        if self.max_delta_ms is not None and self.max_delta_ms <= 0:
            raise ConfigError("max_delta_ms must be positive when set")
        if not self.skins:
            raise ConfigError("at least one skin is required")

    @property
    def floor(self) -> float:
        return float(self.height - self.ground_height)

    @property
    def flight(self) -> FlightParams:
        return FlightParams(
            gravity=self.gravity,
            jump_impulse=self.jump_impulse,
            tilt_up_threshold=self.tilt_up_threshold,
            tilt_up_step=self.tilt_up_step,
            tilt_up_max=self.tilt_up_max,
            tilt_down_step=self.tilt_down_step,
            tilt_down_min=self.tilt_down_min,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        values = dict(data)
        if "skins" in values:
            values["skins"] = tuple(values["skins"])
        try:
            return cls(**values)
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc


def load_config(path: str | Path) -> GameConfig:
    """Read a JSON object of overrides from ``path``."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return GameConfig.from_dict(data)
