"""
Short-lived feedback entities.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mini_arcade_core.engine.components import Life
from mini_arcade_core.spaces.math.vec2 import Vec2

from space_game.backend import DrawSurface
from space_game.constants import YELLOW

SCORE_HINT_TTL = 45  # ticks


@dataclass
class ScoreHint:
    """
    Floating "+N" shown where a shot landed.
    """

    position: Vec2
    value: int
    life: Life = field(default_factory=lambda: Life(ttl=SCORE_HINT_TTL))
    rise: float = 1.0

    @classmethod
    def at(cls, position: Vec2, value: int, ttl: int = SCORE_HINT_TTL) -> ScoreHint:
        return cls(position=position, value=value, life=Life(ttl=ttl))

    @property
    def ttl(self) -> int:
        return max(0, int(self.life.ttl or 0))

    @property
    def alive(self) -> bool:
        return self.life.alive

    def decay(self) -> bool:
        """Age by one tick; returns False once expired."""
        self.life.step(1)
        self.position.y -= self.rise
        return self.alive

    def draw(self, surface: DrawSurface) -> None:
        surface.draw_text(
            f"+{self.value}",
            self.position.to_tuple(),
            size=18,
            color=YELLOW,
            align="center",
        )
