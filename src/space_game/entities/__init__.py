"""
Game entities
"""

from space_game.entities.actor import HITBOX_OFFSETS, Actor, ActorKind
from space_game.entities.effects import ScoreHint
from space_game.entities.enemy import Enemy, PatrolPath
from space_game.entities.player import Player, PlayerState
from space_game.entities.projectile import (
    Projectile,
    ProjectileOwner,
    ProjectileSpec,
)
from space_game.entities.starfield import StarfieldLayer

__all__ = [
    "Actor",
    "ActorKind",
    "Enemy",
    "HITBOX_OFFSETS",
    "PatrolPath",
    "Player",
    "PlayerState",
    "Projectile",
    "ProjectileOwner",
    "ProjectileSpec",
    "ScoreHint",
    "StarfieldLayer",
]
