"""
Closed-interval hitbox used by the collision resolver.

Positions and sizes are the engine's ``Vec2`` and ``Size2D``. A hitbox is
stored by its edges, as the actor offset tables are, and tests overlap
through the engine's ``RectCollider``.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.math.vec2 import Vec2

Rect = tuple[float, float, float, float]  # x, y, width, height
Color = tuple[int, int, int]


@dataclass(frozen=True)
class Hitbox:
    """
    Axis-aligned rectangle with inclusive edges.

    ``right`` and ``bottom`` are the last covered pixel, so a 4px wide
    rectangle at x=10 spans 10..13.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_offsets(
        cls, position: Vec2, offsets: tuple[float, float, float, float]
    ) -> Hitbox:
        left, top, right, bottom = offsets
        return cls(
            left=position.x + left,
            top=position.y + top,
            right=position.x + right,
            bottom=position.y + bottom,
        )

    def to_collider(self) -> RectCollider:
        # touching edges collide, so the span is right - left
        return RectCollider(
            position=Position2D(self.left, self.top),
            size=Size2D(self.right - self.left, self.bottom - self.top),
        )

    def intersects(self, other: Hitbox) -> bool:
        return self.to_collider().intersects(other.to_collider())

    def to_rect(self) -> Rect:
        return (
            self.left,
            self.top,
            self.right - self.left,
            self.bottom - self.top,
        )
