"""
Shared actor capability composed into the player and the enemy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mini_arcade_core.spaces.geometry.bounds import Size2D
from mini_arcade_core.spaces.math.vec2 import Vec2

from space_game.backend import DrawSurface
from space_game.collision import HitCallback, resolve_projectiles
from space_game.constants import (
    ENEMY_HITBOX_OFFSETS,
    HITBOX_GREEN,
    PLAYER_HITBOX_OFFSETS,
)
from space_game.entities.projectile import Projectile, ProjectileSpec
from space_game.geometry import Hitbox
from space_game.utils import logger


class ActorKind(str, Enum):
    PLAYER = "player"
    ENEMY = "enemy"


HITBOX_OFFSETS: dict[ActorKind, tuple[float, float, float, float]] = {
    ActorKind.PLAYER: PLAYER_HITBOX_OFFSETS,
    ActorKind.ENEMY: ENEMY_HITBOX_OFFSETS,
}


@dataclass
class Actor:
    """
    Position, direction and a capped set of projectiles.
    """

    kind: ActorKind
    position: Vec2
    play_field: Size2D
    projectile_spec: ProjectileSpec
    max_projectiles: int
    direction: int = 0
    projectiles: list[Projectile] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        self.position.x = x
        self.position.y = y

    def fire(self, spec: ProjectileSpec | None = None) -> Projectile | None:
        """
        Spawn a projectile from the actor's position.

        Does nothing once ``max_projectiles`` are in flight.

        :param spec: Template to fire, defaults to the actor's own
        :type spec: ProjectileSpec | None

        :return: The new projectile, or None when at capacity
        :rtype: Projectile | None
        """
        if len(self.projectiles) >= self.max_projectiles:
            return None

        projectile = Projectile.spawn(
            spec or self.projectile_spec, self.position.x, self.position.y
        )
        self.projectiles.append(projectile)
        logger.debug(
            f"{self.kind.value} fired at {projectile.position.to_tuple()}"
        )
        return projectile

    def update_projectiles(
        self,
        opponent: Hitbox | None,
        on_hit: HitCallback | None = None,
    ) -> None:
        """
        Advance owned projectiles and drop the spent ones.

        :param opponent: Opponent hitbox, or None to disable hit detection
        :type opponent: Hitbox | None

        :param on_hit: Called with every projectile that hits ``opponent``
        :type on_hit: Callable[[Projectile], None] | None
        """
        self.projectiles = resolve_projectiles(
            self.projectiles, self.play_field.height, opponent, on_hit
        )

    def draw_projectiles(self, surface: DrawSurface) -> None:
        for projectile in self.projectiles:
            projectile.draw(surface)

    def draw_hitbox(self, surface: DrawSurface) -> None:
        surface.stroke_rect(HITBOX_GREEN, self.hitbox.to_rect(), 1)

    @property
    def hitbox(self) -> Hitbox:
        return Hitbox.from_offsets(self.position, HITBOX_OFFSETS[self.kind])

    def reset(self, x: float, y: float) -> None:
        self.move_to(x, y)
        self.projectiles = []
        self.direction = 0
