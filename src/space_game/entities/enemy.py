"""
Enemy mother ship
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any, Mapping

from space_game.backend import DrawSurface
from space_game.constants import MOTHERSHIP_SIZE, SPRITE_MOTHERSHIP
from space_game.entities.actor import Actor
from space_game.entities.projectile import Projectile
from space_game.geometry import Hitbox


@dataclass(frozen=True)
class PatrolPath:
    """
    Figure-eight sweep driven by elapsed time.
    """

    center_x: float
    base_y: float
    range_x: float
    range_y: float

    def position_at(self, seconds: float) -> tuple[float, float]:
        angle = seconds % (math.pi * 2)
        x = self.center_x + math.cos(angle) * self.range_x
        y = self.base_y + math.sin(angle * 2) * self.range_y
        return x, y


@dataclass
class Enemy:
    """
    Enemy entity. Never dies; its position is set each tick from a
    patrol path.
    """

    actor: Actor

    @property
    def projectiles(self) -> list[Projectile]:
        return self.actor.projectiles

    @property
    def hitbox(self) -> Hitbox:
        return self.actor.hitbox

    def patrol(self, path: PatrolPath, seconds: float) -> None:
        self.actor.move_to(*path.position_at(seconds))

    def try_fire(self, rng: random.Random, chance: float) -> Projectile | None:
        """
        Fire with probability ``chance``, still subject to the cap.
        """
        if rng.random() < chance:
            return self.actor.fire()
        return None

    def draw(self, surface: DrawSurface, sprites: Mapping[str, Any]) -> None:
        width, height = MOTHERSHIP_SIZE
        x, y = self.actor.position.to_tuple()
        surface.draw_sprite(
            sprites[SPRITE_MOTHERSHIP],
            (0, 0, width, height),
            (x - width / 2, y - height, width, height),
        )

    def reset(self, x: float, y: float) -> None:
        self.actor.reset(x, y)
