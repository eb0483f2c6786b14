"""
Draw surface the game renders through, and its pygame implementation.
"""

from __future__ import annotations

from typing import Any, Iterable, Literal, Protocol

import pygame

from space_game.constants import FONT_NAME
from space_game.geometry import Color, Rect

Align = Literal["left", "center", "right"]


class DrawSurface(Protocol):
    """
    Primitive drawing operations used by the game.

    Images are opaque handles produced by the surface itself
    (``prerender``) or by the sprite loader.
    """

    def draw_sprite(self, image: Any, source_rect: Rect, dest_rect: Rect) -> None:
        ...

    def fill_rect(self, color: Color, rect: Rect) -> None:
        ...

    def stroke_rect(self, color: Color, rect: Rect, width: int = 1) -> None:
        ...

    def draw_text(
        self,
        text: str,
        position: tuple[float, float],
        *,
        size: int,
        color: Color,
        align: Align = "left",
        bold: bool = False,
        outline: tuple[Color, int] | None = None,
    ) -> None:
        ...

    def prerender(
        self, width: int, height: int, rects: Iterable[Rect], color: Color
    ) -> Any:
        ...


class PygameSurface:
    """
    ``DrawSurface`` backed by a pygame surface.

    Text positions are baselines, matching how the overlay lays out
    its lines.
    """

    def __init__(self, target: pygame.Surface):
        self._target = target
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}
        self._scaled: dict[tuple[int, tuple[int, int, int, int], tuple[int, int]], pygame.Surface] = {}

    @property
    def target(self) -> pygame.Surface:
        return self._target

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(FONT_NAME, size, bold=bold)
        return self._fonts[key]

    def draw_sprite(self, image: pygame.Surface, source_rect: Rect, dest_rect: Rect) -> None:
        src = pygame.Rect(*(int(v) for v in source_rect)).clip(image.get_rect())
        if src.width <= 0 or src.height <= 0:
            return

        dx, dy, dw, dh = (int(v) for v in dest_rect)
        size = (dw, dh)
        frame = image.subsurface(src)
        if frame.get_size() != size:
            key = (id(image), (src.x, src.y, src.width, src.height), size)
            if key not in self._scaled:
                self._scaled[key] = pygame.transform.scale(frame, size)
            frame = self._scaled[key]
        self._target.blit(frame, (dx, dy))

    def fill_rect(self, color: Color, rect: Rect) -> None:
        self._target.fill(color, pygame.Rect(*(int(v) for v in rect)))

    def stroke_rect(self, color: Color, rect: Rect, width: int = 1) -> None:
        pygame.draw.rect(self._target, color, pygame.Rect(*(int(v) for v in rect)), width)

    def draw_text(
        self,
        text: str,
        position: tuple[float, float],
        *,
        size: int,
        color: Color,
        align: Align = "left",
        bold: bool = False,
        outline: tuple[Color, int] | None = None,
    ) -> None:
        font = self._font(size, bold)
        x, y = position
        rendered = font.render(text, True, color)
        rect = rendered.get_rect()
        if align == "center":
            rect.centerx = int(x)
        elif align == "right":
            rect.right = int(x)
        else:
            rect.left = int(x)
        rect.top = int(y) - font.get_ascent()

        if outline is not None:
            outline_color, thickness = outline
            shadow = font.render(text, True, outline_color)
            half = max(1, thickness // 2)
            for ox in (-half, 0, half):
                for oy in (-half, 0, half):
                    if ox or oy:
                        self._target.blit(shadow, rect.move(ox, oy))

        self._target.blit(rendered, rect)

    def prerender(
        self, width: int, height: int, rects: Iterable[Rect], color: Color
    ) -> pygame.Surface:
        tile = pygame.Surface((width, height), pygame.SRCALPHA)
        for rect in rects:
            tile.fill(color, pygame.Rect(*(int(v) for v in rect)))
        return tile
