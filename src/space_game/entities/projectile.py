"""
Projectile entity
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mini_arcade_core.spaces.math.vec2 import Vec2

from space_game.backend import DrawSurface
from space_game.geometry import Color, Hitbox


class ProjectileOwner(str, Enum):
    PLAYER = "player"
    ENEMY = "enemy"


@dataclass(frozen=True)
class ProjectileSpec:
    """
    Template an actor fires from.

    ``speed`` is signed: negative moves up the screen, positive down.
    """

    width: int
    height: int
    speed: float
    color: Color
    owner: ProjectileOwner


@dataclass
class Projectile:
    """
    Projectile entity
    """

    position: Vec2
    width: int
    height: int
    velocity: float
    color: Color
    owner: ProjectileOwner

    @classmethod
    def spawn(cls, spec: ProjectileSpec, x: float, y: float) -> Projectile:
        """
        Create a projectile centred on ``x`` just beyond ``y``.

        Upward shots start one projectile-height above ``y``, downward
        shots one projectile-height below it.
        """
        pos_x = int(x - spec.width / 2)
        pos_y = y - spec.height if spec.speed < 0 else y + spec.height
        return cls(
            position=Vec2(pos_x, pos_y),
            width=spec.width,
            height=spec.height,
            velocity=spec.speed,
            color=spec.color,
            owner=spec.owner,
        )

    def advance(self, field_height: float) -> bool:
        """
        Move by one tick and report whether the projectile is still on
        the field.

        :param field_height: Height of the play field
        :type field_height: float

        :return: False once the projectile has left ``[-height, field_height]``
        :rtype: bool
        """
        self.position.y += self.velocity
        return -self.height <= self.position.y <= field_height

    @property
    def hitbox(self) -> Hitbox:
        x, y = self.position.to_tuple()
        return Hitbox(
            left=x,
            top=y,
            right=x + self.width - 1,
            bottom=y + self.height - 1,
        )

    def draw(self, surface: DrawSurface) -> None:
        x, y = self.position.to_tuple()
        surface.fill_rect(self.color, (x, y, self.width, self.height))
