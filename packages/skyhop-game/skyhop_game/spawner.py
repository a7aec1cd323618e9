"""Timed obstacle spawning."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from skyhop_physics import Obstacle

if TYPE_CHECKING:
    from skyhop import TickContext

    from skyhop_game.config import GameConfig
    from skyhop_game.session import GameSession


@dataclass(frozen=True)
class ObstacleSpawner:
    """Creates columns at the right edge on a fixed simulated-time interval."""

    playfield_width: float
    playfield_height: float
    obstacle_width: float = 60.0
    gap_height: float = 140.0
    margin_top: float = 100.0
    margin_bottom: float = 100.0
    interval_ms: float = 1500.0

    @classmethod
    def from_config(cls, config: GameConfig) -> ObstacleSpawner:
        return cls(
            playfield_width=config.width,
            playfield_height=config.height,
            obstacle_width=config.obstacle_width,
            gap_height=config.gap_height,
            margin_top=config.gap_margin_top,
            margin_bottom=config.gap_margin_bottom,
            interval_ms=config.spawn_interval_ms,
        )

    def gap_center(self, rng: random.Random) -> float:
        low = self.margin_top
        high = self.playfield_height - self.margin_bottom
        draw = rng.random() * (high - low) + low
        return max(low, min(high, draw))

    def due(self, now_ms: float, last_spawn_ms: float | None) -> bool:
        return last_spawn_ms is None or now_ms - last_spawn_ms > self.interval_ms

    def maybe_spawn(
        self,
        obstacles: list[Obstacle],
        now_ms: float,
        last_spawn_ms: float | None,
        rng: random.Random,
    ) -> float | None:
        """Append a column when due. Returns the new spawn time, or the old one."""
        if not self.due(now_ms, last_spawn_ms):
            return last_spawn_ms
        obstacles.append(Obstacle(
            x=float(self.playfield_width),
            width=self.obstacle_width,
            gap_center=self.gap_center(rng),
            gap_height=self.gap_height,
        ))
        return now_ms


def make_spawn_system(spawner: ObstacleSpawner) -> Callable[[GameSession, TickContext], None]:
    def spawn_system(session: GameSession, ctx: TickContext) -> None:
        session.last_spawn_ms = spawner.maybe_spawn(
            session.obstacles, session.sim_ms, session.last_spawn_ms, ctx.random,
        )

    return spawn_system
