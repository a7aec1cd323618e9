"""GameSession - every piece of mutable game state in one object."""
from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass, field
from typing import Any

from skyhop import SnapshotError
from skyhop_fsm import Lifecycle
from skyhop_physics import Actor, Obstacle

from skyhop_game.config import GameConfig
from skyhop_game.environment import EnvironmentCycle
from skyhop_game.lifecycle import STATES, new_lifecycle
from skyhop_game.parallax import ParallaxLayer, init_layers


@dataclass
class GameSession:
    """State owned by one run of the game.

    ``sim_ms`` is simulated time: it only advances while playing, so
    pausing never causes a burst of spawns or phase flips on resume.
    ``dead`` is raised by the systems and consumed by the lifecycle.
    """

    lifecycle: Lifecycle
    actor: Actor
    obstacles: list[Obstacle] = field(default_factory=list)
    environment: EnvironmentCycle = field(default_factory=EnvironmentCycle)
    layers: list[ParallaxLayer] = field(default_factory=list)
    score: int = 0
    best_score: int = 0
    sim_ms: float = 0.0
    last_spawn_ms: float | None = None
    shake_ms: float = 0.0
    shake_offset: tuple[float, float] = (0.0, 0.0)
    death_fade: float = 0.0
    dead: bool = False
    death_cause: str | None = None
    skin: int = 0

    @property
    def state(self) -> str:
        return self.lifecycle.state


def new_actor(config: GameConfig) -> Actor:
    return Actor(
        x=config.width * config.actor_x_ratio,
        y=config.height / 2,
        radius=config.actor_radius,
    )


def new_session(
    config: GameConfig,
    rng: random.Random,
    best_score: int = 0,
    skin: int = 0,
) -> GameSession:
    """Fresh ``ready`` session. Carries over the best score and skin."""
    return GameSession(
        lifecycle=new_lifecycle(),
        actor=new_actor(config),
        layers=init_layers(rng, config),
        best_score=best_score,
        skin=skin % len(config.skins),
    )


def session_to_dict(session: GameSession) -> dict[str, Any]:
    data = dataclasses.asdict(session)
    data["shake_offset"] = list(session.shake_offset)
    data["lifecycle"] = {"state": session.lifecycle.state}
    return data


def session_from_dict(data: dict[str, Any]) -> GameSession:
    try:
        state = data["lifecycle"]["state"]
        if state not in STATES:
            raise SnapshotError(f"Unknown lifecycle state: {state!r}")
        return GameSession(
            lifecycle=new_lifecycle(state),
            actor=Actor(**data["actor"]),
            obstacles=[Obstacle(**o) for o in data["obstacles"]],
            environment=EnvironmentCycle(**data["environment"]),
            layers=[ParallaxLayer(**layer) for layer in data["layers"]],
            score=data["score"],
            best_score=data["best_score"],
            sim_ms=data["sim_ms"],
            last_spawn_ms=data["last_spawn_ms"],
            shake_ms=data["shake_ms"],
            shake_offset=tuple(data["shake_offset"]),
            death_fade=data["death_fade"],
            dead=data["dead"],
            death_cause=data["death_cause"],
            skin=data["skin"],
        )
    except (KeyError, TypeError) as exc:
        raise SnapshotError(f"Malformed session snapshot: {exc}") from exc
