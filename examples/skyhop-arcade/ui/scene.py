"""Playfield drawing: sky, parallax layers, columns, ground and the bird."""
from __future__ import annotations

import math
import random

import pygame

from skyhop_game import RenderableState
from skyhop_game.parallax import CLOUD, HILL, MOUNTAIN

from ui.constants import (
    BEAK_COLOR,
    CLOUD_COLOR,
    EYE_PUPIL,
    EYE_WHITE,
    GROUND_STRIPE,
    PIPE_CAP_H,
    PIPE_CAP_LIP,
    STAR_COLOR,
    STAR_COUNT,
)


def make_stars(width: int, height: int, seed: int = 7) -> list[tuple[int, int, int]]:
    """Fixed star field in the upper part of the sky as (x, y, size)."""
    rng = random.Random(seed)
    return [
        (rng.randrange(width), rng.randrange(height // 2), rng.choice((1, 1, 2)))
        for _ in range(STAR_COUNT)
    ]


def draw_scene(
    surface: pygame.Surface,
    view: RenderableState,
    stars: list[tuple[int, int, int]],
) -> None:
    """Draw one frame of the playfield onto ``surface``."""
    palette = view.palette
    ox, oy = view.shake_offset
    floor = view.height - view.ground_height

    surface.fill(palette.sky)
    if palette.stars_visible:
        for x, y, size in stars:
            pygame.draw.circle(surface, STAR_COLOR, (x, y), size)

    for layer in view.layers:
        if layer.kind == MOUNTAIN:
            points = [
                (layer.x + ox, layer.y + oy),
                (layer.x + layer.width / 2 + ox, layer.y - layer.height + oy),
                (layer.x + layer.width + ox, layer.y + oy),
            ]
            pygame.draw.polygon(surface, palette.mountain, points)
    for layer in view.layers:
        if layer.kind == HILL:
            rect = pygame.Rect(layer.x + ox, layer.y - layer.height + oy, layer.width, layer.height * 2)
            pygame.draw.ellipse(surface, palette.hill, rect)
    _draw_clouds(surface, view, ox, oy)

    for obstacle in view.obstacles:
        x = obstacle.x + ox
        top = pygame.Rect(x, oy, obstacle.width, obstacle.gap_top)
        bottom = pygame.Rect(x, obstacle.gap_bottom + oy, obstacle.width, floor - obstacle.gap_bottom)
        pygame.draw.rect(surface, palette.pipe, top)
        pygame.draw.rect(surface, palette.pipe, bottom)
        cap_w = obstacle.width + PIPE_CAP_LIP * 2
        pygame.draw.rect(
            surface, palette.pipe,
            (x - PIPE_CAP_LIP, obstacle.gap_top - PIPE_CAP_H + oy, cap_w, PIPE_CAP_H),
        )
        pygame.draw.rect(
            surface, palette.pipe,
            (x - PIPE_CAP_LIP, obstacle.gap_bottom + oy, cap_w, PIPE_CAP_H),
        )

    pygame.draw.rect(surface, palette.ground, (0, floor + oy, view.width, view.ground_height))
    stripe = pygame.Surface((view.width, 4), pygame.SRCALPHA)
    stripe.fill(GROUND_STRIPE)
    surface.blit(stripe, (0, floor + oy))

    _draw_bird(surface, view, ox, oy)


def _draw_clouds(surface: pygame.Surface, view: RenderableState, ox: float, oy: float) -> None:
    clouds = [layer for layer in view.layers if layer.kind == CLOUD]
    if not clouds:
        return
    layer_surface = pygame.Surface((view.width, view.height), pygame.SRCALPHA)
    alpha = int(255 * view.palette.cloud_alpha)
    for cloud in clouds:
        r = cloud.height / 2
        for dx in (r, r * 2, r * 1.5):
            pygame.draw.circle(
                layer_surface, (*CLOUD_COLOR, alpha),
                (cloud.x + dx + ox, cloud.y + oy), r,
            )
    surface.blit(layer_surface, (0, 0))


def _draw_bird(surface: pygame.Surface, view: RenderableState, ox: float, oy: float) -> None:
    pose = view.actor
    size = int(pose.radius * 2 + 8)
    sprite = pygame.Surface((size, size), pygame.SRCALPHA)
    c = size / 2
    alpha = int(255 * (1.0 - view.death_fade))

    pygame.draw.circle(sprite, (*view.skin, 255), (c, c), pose.radius)
    pygame.draw.polygon(
        sprite, BEAK_COLOR,
        [(c + pose.radius - 2, c - 3), (c + pose.radius + 7, c), (c + pose.radius - 2, c + 3)],
    )
    eye = (c + pose.radius * 0.4, c - pose.radius * 0.35)
    pygame.draw.circle(sprite, EYE_WHITE, eye, 4)
    if pose.expression == "dead":
        ex, ey = eye
        pygame.draw.line(sprite, EYE_PUPIL, (ex - 3, ey - 3), (ex + 3, ey + 3), 2)
        pygame.draw.line(sprite, EYE_PUPIL, (ex - 3, ey + 3), (ex + 3, ey - 3), 2)
    else:
        shift = {"up": -1.5, "down": 1.5}.get(pose.expression, 0.0)
        pygame.draw.circle(sprite, EYE_PUPIL, (eye[0] + 1, eye[1] + shift), 2)

    sprite.set_alpha(alpha)
    # Positive rotation tilts the nose up; pygame rotates counter-clockwise.
    rotated = pygame.transform.rotate(sprite, math.degrees(pose.rotation))
    rect = rotated.get_rect(center=(pose.x + ox, pose.y + oy))
    surface.blit(rotated, rect)
