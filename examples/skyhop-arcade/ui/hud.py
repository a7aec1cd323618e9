"""Score readout and state overlays."""
from __future__ import annotations

import pygame

from skyhop_game import GAMEOVER, PAUSED, READY, RenderableState

from ui.constants import OVERLAY_COLOR, TEXT_COLOR, TEXT_SHADOW


def _text(surface: pygame.Surface, font: pygame.font.Font, text: str, center: tuple[float, float]) -> None:
    shadow = font.render(text, True, TEXT_SHADOW)
    label = font.render(text, True, TEXT_COLOR)
    x, y = center
    surface.blit(shadow, shadow.get_rect(center=(x + 2, y + 2)))
    surface.blit(label, label.get_rect(center=(x, y)))


def draw_hud(
    surface: pygame.Surface,
    view: RenderableState,
    big: pygame.font.Font,
    small: pygame.font.Font,
) -> None:
    """Draw the score and any ready/paused/game-over overlay."""
    cx = view.width / 2
    if view.state != READY:
        _text(surface, big, str(view.score), (cx, 60))

    if view.state == READY:
        _text(surface, big, "SKYHOP", (cx, view.height * 0.3))
        _text(surface, small, "Space or click to fly", (cx, view.height * 0.3 + 50))
        _text(surface, small, f"Best: {view.best_score}", (cx, view.height * 0.3 + 80))
        _text(surface, small, "S skin   R reset best   P pause", (cx, view.height - 20))
    elif view.state == PAUSED:
        _dim(surface, view)
        _text(surface, big, "PAUSED", (cx, view.height / 2))
    elif view.state == GAMEOVER and view.death_fade >= 1.0:
        _dim(surface, view)
        _text(surface, big, "GAME OVER", (cx, view.height * 0.35))
        _text(surface, small, f"Score: {view.score}   Best: {view.best_score}", (cx, view.height * 0.35 + 50))
        _text(surface, small, "Space to try again", (cx, view.height * 0.35 + 80))


def _dim(surface: pygame.Surface, view: RenderableState) -> None:
    overlay = pygame.Surface((view.width, view.height), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    surface.blit(overlay, (0, 0))
