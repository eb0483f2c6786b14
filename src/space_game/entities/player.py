"""
Player ship
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from space_game.backend import DrawSurface
from space_game.constants import (
    EXPLOSION_FRAMES,
    EXPLOSION_STEP,
    FRAME_SIZE,
    SHIP_DRAW_SIZE,
    SPRITE_EXPLOSION,
    SPRITE_SHIP,
    SPRITE_THRUSTER,
    THRUSTER_FRAMES,
    THRUSTER_STEP,
)
from space_game.entities.actor import Actor
from space_game.entities.projectile import Projectile
from space_game.geometry import Hitbox
from space_game.utils import clamp, logger


class PlayerState(str, Enum):
    ALIVE = "alive"
    EXPLODING = "exploding"
    DEAD = "dead"


@dataclass
class Player:
    """
    Player ship: an actor plus movement, thruster animation and the
    ALIVE -> EXPLODING -> DEAD state machine.
    """

    actor: Actor
    speed: float = 2.0
    state: PlayerState = PlayerState.ALIVE
    frame_thruster: float = 0.0
    frame_explosion: float = 0.0

    @property
    def is_alive(self) -> bool:
        return self.state is PlayerState.ALIVE

    @property
    def is_exploding(self) -> bool:
        return self.state is PlayerState.EXPLODING

    @property
    def is_dead(self) -> bool:
        return self.state is PlayerState.DEAD

    @property
    def direction(self) -> int:
        return self.actor.direction

    @direction.setter
    def direction(self, value: int) -> None:
        self.actor.direction = value

    @property
    def projectiles(self) -> list[Projectile]:
        return self.actor.projectiles

    @property
    def hitbox(self) -> Hitbox:
        return self.actor.hitbox

    def die(self) -> None:
        """Start the explosion. Ignored unless the ship is alive."""
        if not self.is_alive:
            return
        self.state = PlayerState.EXPLODING
        self.frame_explosion = 0.0
        logger.debug("Player hit, exploding")

    def shoot(self) -> Projectile | None:
        if not self.is_alive:
            return None
        return self.actor.fire()

    def tick(self) -> None:
        """
        Move and animate by one frame. Does nothing once dead.
        """
        if self.is_dead:
            return

        position = self.actor.position
        position.x = clamp(
            position.x + self.speed * self.actor.direction,
            0,
            self.actor.play_field.width,
        )

        if self.frame_thruster < THRUSTER_FRAMES:
            self.frame_thruster += THRUSTER_STEP
        else:
            self.frame_thruster = 0.0

        if self.is_exploding:
            self.frame_explosion += EXPLOSION_STEP
            if self.frame_explosion >= EXPLOSION_FRAMES:
                self.state = PlayerState.DEAD
                logger.debug("Player dead")

    def draw(self, surface: DrawSurface, sprites: Mapping[str, Any]) -> None:
        if self.is_dead:
            return

        x = self.actor.position.x - SHIP_DRAW_SIZE / 2
        y = self.actor.position.y
        size = SHIP_DRAW_SIZE

        # the ship is gone for the last two explosion frames
        if not self.is_exploding or self.frame_explosion < 3:
            surface.draw_sprite(
                sprites[SPRITE_SHIP],
                (FRAME_SIZE * (self.actor.direction + 1), 0, FRAME_SIZE, FRAME_SIZE),
                (x, y, size, size),
            )
            surface.draw_sprite(
                sprites[SPRITE_THRUSTER],
                (FRAME_SIZE * int(self.frame_thruster), 0, FRAME_SIZE, FRAME_SIZE),
                (x, y + size, size, size),
            )

        if self.is_exploding:
            surface.draw_sprite(
                sprites[SPRITE_EXPLOSION],
                (FRAME_SIZE * int(self.frame_explosion), 0, FRAME_SIZE, FRAME_SIZE),
                (x, y, size, size),
            )

    def reset(self, x: float, y: float) -> None:
        self.actor.reset(x, y)
        self.state = PlayerState.ALIVE
        self.frame_thruster = 0.0
        self.frame_explosion = 0.0
