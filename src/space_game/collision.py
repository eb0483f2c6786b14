"""
Collision resolver: rectangle intersection between projectile sets and
an opposing actor's hitbox.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

from space_game.geometry import Hitbox

if TYPE_CHECKING:
    from space_game.entities.projectile import Projectile

HitCallback = Callable[["Projectile"], None]


def intersect(a: Hitbox, b: Hitbox) -> bool:
    """
    Detect intersection between two closed rectangles.

    Touching edges count as intersecting.
    """
    return a.intersects(b)


def resolve_projectiles(
    projectiles: Iterable[Projectile],
    field_height: float,
    target: Hitbox | None,
    on_hit: HitCallback | None = None,
) -> list[Projectile]:
    """
    Advance projectiles, report hits and return the survivors.

    A projectile touching ``target`` is reported through ``on_hit`` and
    removed before it moves, even if the move would also take it off the
    field. With ``target=None`` hit detection is off and projectiles only
    expire by leaving the field.

    :param projectiles: Projectiles owned by one actor
    :param field_height: Height of the play field
    :param target: Opponent hitbox, or None to disable hits
    :param on_hit: Called once for every projectile that hits

    :return: Projectiles still in flight
    :rtype: list[Projectile]
    """
    alive: list[Projectile] = []
    for projectile in projectiles:
        if target is not None and intersect(projectile.hitbox, target):
            if on_hit is not None:
                on_hit(projectile)
            continue
        if projectile.advance(field_height):
            alive.append(projectile)
    return alive
