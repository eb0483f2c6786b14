"""
Game settings.

Built from plain dicts so they can come from CLI flags or a file.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from space_game.constants import FPS, RED, TITLE, WINDOW_SIZE, YELLOW
from space_game.entities.projectile import ProjectileOwner, ProjectileSpec


class ConfigError(ValueError):
    """Raised for invalid or unknown settings."""


def _build(cls, data: dict[str, Any] | None):
    if data is None:
        return cls()
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown {cls.__name__} keys: {sorted(unknown)}")
    return cls(**data)


def _check_chance(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigError(f"{name} must be within [0, 1], got {value}")


@dataclass
class WindowSettings:
    width: int = WINDOW_SIZE[0]
    height: int = WINDOW_SIZE[1]
    title: str = TITLE


@dataclass
class PlayerSettings:
    speed: float = 2.0
    max_projectiles: int = 3
    projectile_width: int = 4
    projectile_height: int = 20
    projectile_speed: float = -4.0
    start_y_ratio: float = 0.75

    def projectile_spec(self) -> ProjectileSpec:
        return ProjectileSpec(
            width=self.projectile_width,
            height=self.projectile_height,
            speed=self.projectile_speed,
            color=YELLOW,
            owner=ProjectileOwner.PLAYER,
        )


@dataclass
class EnemySettings:
    max_projectiles: int = 10
    fire_chance: float = 0.04
    projectile_width: int = 6
    projectile_height: int = 12
    projectile_speed: float = 2.0
    start_y_ratio: float = 0.2
    patrol_base_y_ratio: float = 0.3
    patrol_range_y: float = 50.0

    def projectile_spec(self) -> ProjectileSpec:
        return ProjectileSpec(
            width=self.projectile_width,
            height=self.projectile_height,
            speed=self.projectile_speed,
            color=RED,
            owner=ProjectileOwner.ENEMY,
        )


@dataclass
class AttractSettings:
    """Odds used by the demo AI each tick."""

    turn_chance: float = 0.1
    fire_chance: float = 0.04


@dataclass
class StarfieldSettings:
    stars: int = 200
    speed: float = 0.1
    max_size: int = 3


def _default_layers() -> list[StarfieldSettings]:
    return [
        StarfieldSettings(stars=80, speed=0.6, max_size=4),
        StarfieldSettings(stars=200, speed=0.2, max_size=3),
        StarfieldSettings(stars=300, speed=0.05, max_size=2),
    ]


@dataclass
class GameSettings:  # pylint: disable=too-many-instance-attributes
    """
    Top level settings.
    """

    window: WindowSettings = field(default_factory=WindowSettings)
    player: PlayerSettings = field(default_factory=PlayerSettings)
    enemy: EnemySettings = field(default_factory=EnemySettings)
    attract: AttractSettings = field(default_factory=AttractSettings)
    starfield: list[StarfieldSettings] = field(default_factory=_default_layers)
    fps: int = FPS
    hit_score: int = 10
    score_hint_ttl: int = 45
    show_hitbox: bool = False
    seed: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSettings:
        """
        Build settings from a nested dict; missing keys keep defaults.

        :raises ConfigError: On unknown keys or invalid values.
        """
        data = dict(data)
        sections = {
            "window": _build(WindowSettings, data.pop("window", None)),
            "player": _build(PlayerSettings, data.pop("player", None)),
            "enemy": _build(EnemySettings, data.pop("enemy", None)),
            "attract": _build(AttractSettings, data.pop("attract", None)),
        }
        layers = data.pop("starfield", None)
        if layers is not None:
            sections["starfield"] = [_build(StarfieldSettings, layer) for layer in layers]

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown settings keys: {sorted(unknown)}")

        settings = cls(**sections, **data)
        settings.validate()
        return settings

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def validate(self) -> None:
        if self.window.width <= 0 or self.window.height <= 0:
            raise ConfigError(
                f"Window size must be positive, got {self.window.width}x{self.window.height}"
            )
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")
        if self.player.max_projectiles < 0 or self.enemy.max_projectiles < 0:
            raise ConfigError("max_projectiles cannot be negative")
        if self.score_hint_ttl <= 0:
            raise ConfigError(f"score_hint_ttl must be positive, got {self.score_hint_ttl}")
        _check_chance("enemy.fire_chance", self.enemy.fire_chance)
        _check_chance("attract.turn_chance", self.attract.turn_chance)
        _check_chance("attract.fire_chance", self.attract.fire_chance)
