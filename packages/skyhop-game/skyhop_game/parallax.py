"""Decorative parallax layers with fixed-margin wraparound."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from skyhop import TickContext

    from skyhop_game.config import GameConfig
    from skyhop_game.session import GameSession

CLOUD = "cloud"
MOUNTAIN = "mountain"
HILL = "hill"


@dataclass
class ParallaxLayer:
    """One decorative shape.

    Clouds are centred on (x, y) with ``width``/``height`` spanning the
    ellipse. Mountains and hills start at ``x`` and rise ``height``
    above the ground line.
    """

    kind: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LayerKind:
    """Scroll speed and recycle rule for one kind of layer.

    A layer wraps once ``x + exit_span < 0``; ``exit_span`` defaults to
    the layer's own width. It reappears at ``playfield width + respawn_margin``.
    """

    speed: float
    respawn_margin: float
    exit_span: float | None = None


def layer_kinds(config: GameConfig) -> dict[str, LayerKind]:
    return {
        CLOUD: LayerKind(speed=config.cloud_speed, respawn_margin=100.0, exit_span=100.0),
        MOUNTAIN: LayerKind(speed=config.mountain_speed, respawn_margin=100.0),
        HILL: LayerKind(speed=config.hill_speed, respawn_margin=50.0),
    }


def init_layers(rng: random.Random, config: GameConfig) -> list[ParallaxLayer]:
    """Lay out the initial clouds, far mountains and hills."""
    layers: list[ParallaxLayer] = []
    for i in range(5):
        radius = 20 + rng.random() * 10
        layers.append(ParallaxLayer(
            kind=CLOUD,
            x=i * 130 + rng.random() * 60,
            y=60 + rng.random() * 120,
            width=radius * 3,
            height=radius * 2,
        ))
    for i in range(3):
        layers.append(ParallaxLayer(
            kind=MOUNTAIN,
            x=float(i * 280),
            y=config.floor,
            width=340.0,
            height=120 + rng.random() * 40,
        ))
    for i in range(3):
        layers.append(ParallaxLayer(
            kind=HILL,
            x=float(i * 220),
            y=config.floor,
            width=240.0,
            height=70 + rng.random() * 30,
        ))
    return layers


def advance_layer(layer: ParallaxLayer, kind: LayerKind, playfield_width: float) -> bool:
    """Scroll one layer; returns True when it was recycled to the right."""
    layer.x -= kind.speed
    span = layer.width if kind.exit_span is None else kind.exit_span
    if layer.x + span < 0:
        layer.x = playfield_width + kind.respawn_margin
        return True
    return False


def make_parallax_system(config: GameConfig) -> Callable[[GameSession, TickContext], None]:
    kinds = layer_kinds(config)

    def parallax_system(session: GameSession, ctx: TickContext) -> None:
        for layer in session.layers:
            advance_layer(layer, kinds[layer.kind], config.width)

    return parallax_system
