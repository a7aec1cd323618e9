"""Immutable per-tick snapshot handed to renderers."""
from __future__ import annotations

from dataclasses import dataclass

from skyhop_signal import Event

from skyhop_game.config import GameConfig
from skyhop_game.lifecycle import GAMEOVER
from skyhop_game.palette import Color, Palette, hex_to_rgb, palette_for
from skyhop_game.session import GameSession


@dataclass(frozen=True)
class ActorPose:
    x: float
    y: float
    radius: float
    rotation: float
    velocity: float
    expression: str


@dataclass(frozen=True)
class ObstacleView:
    x: float
    width: float
    gap_top: float
    gap_bottom: float
    passed: bool


@dataclass(frozen=True)
class LayerView:
    kind: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class RenderableState:
    state: str
    score: int
    best_score: int
    actor: ActorPose
    obstacles: tuple[ObstacleView, ...]
    is_night: bool
    blend: float
    layers: tuple[LayerView, ...]
    palette: Palette
    shake_offset: tuple[float, float]
    death_fade: float
    skin: Color
    width: int
    height: int
    ground_height: int
    events: tuple[Event, ...] = ()


def expression_for(state: str, velocity: float) -> str:
    if state == GAMEOVER:
        return "dead"
    if velocity < -3:
        return "up"
    if velocity > 3:
        return "down"
    return "normal"


def build_render_state(
    session: GameSession,
    config: GameConfig,
    events: tuple[Event, ...] = (),
) -> RenderableState:
    actor = session.actor
    env = session.environment
    return RenderableState(
        state=session.state,
        score=session.score,
        best_score=session.best_score,
        actor=ActorPose(
            x=actor.x,
            y=actor.y,
            radius=actor.radius,
            rotation=actor.rotation,
            velocity=actor.velocity,
            expression=expression_for(session.state, actor.velocity),
        ),
        obstacles=tuple(
            ObstacleView(o.x, o.width, o.gap_top, o.gap_bottom, o.passed)
            for o in session.obstacles
        ),
        is_night=env.is_night,
        blend=env.blend,
        layers=tuple(
            LayerView(layer.kind, layer.x, layer.y, layer.width, layer.height)
            for layer in session.layers
        ),
        palette=palette_for(env.blend),
        shake_offset=session.shake_offset,
        death_fade=session.death_fade,
        skin=hex_to_rgb(config.skins[session.skin % len(config.skins)]),
        width=config.width,
        height=config.height,
        ground_height=config.ground_height,
        events=events,
    )
