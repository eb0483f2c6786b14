"""
Scrolling starfield background layer
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any

from space_game.backend import DrawSurface
from space_game.constants import WHITE
from space_game.geometry import Rect


@dataclass
class StarfieldLayer:
    """
    One parallax layer.

    The stars are scattered over a tile and repeated one tile lower so
    that a field-sized window slid over the ``width x 2*height`` strip
    wraps without a seam.
    """

    width: int
    height: int
    speed: float = 0.1
    stars: list[Rect] = field(default_factory=list)
    pos_y: float = 0.0
    tile: Any = None

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        rng: random.Random,
        stars: int = 200,
        speed: float = 0.1,
        max_size: int = 3,
    ) -> StarfieldLayer:
        rects: list[Rect] = []
        for _ in range(stars):
            x = int(rng.random() * width)
            y = int(rng.random() * height)
            s = int(rng.random() * max_size + 1)
            rects.append((x, y, s, s))
        rects.extend((x, y + height, w, h) for x, y, w, h in list(rects))
        return cls(width=width, height=height, speed=speed, stars=rects, pos_y=height)

    def scroll(self) -> float:
        self.pos_y -= self.speed
        if self.pos_y < 0:
            self.pos_y = self.height
        return self.pos_y

    def draw(self, surface: DrawSurface) -> None:
        if self.tile is None:
            self.tile = surface.prerender(
                self.width, self.height * 2, self.stars, WHITE
            )
        surface.draw_sprite(
            self.tile,
            (0, self.pos_y, self.width, self.height),
            (0, 0, self.width, self.height),
        )
