from mini_arcade_core.spaces.math.vec2 import Vec2

from space_game.collision import intersect, resolve_projectiles
from space_game.constants import YELLOW
from space_game.entities import Projectile, ProjectileOwner, ProjectileSpec
from space_game.geometry import Hitbox

PLAYER_SHOT = ProjectileSpec(4, 20, -4, YELLOW, ProjectileOwner.PLAYER)


def test_intersect_is_symmetric():
    boxes = [
        Hitbox(0, 0, 10, 10),
        Hitbox(10, 10, 20, 20),
        Hitbox(11, 0, 20, 5),
        Hitbox(-5, -5, 0, 0),
        Hitbox(3, 3, 4, 4),
    ]
    for a in boxes:
        for b in boxes:
            assert intersect(a, b) == intersect(b, a)


def test_touching_edges_intersect():
    assert intersect(Hitbox(0, 0, 10, 10), Hitbox(10, 0, 20, 10))
    assert intersect(Hitbox(0, 0, 10, 10), Hitbox(0, 10, 10, 20))
    assert not intersect(Hitbox(0, 0, 10, 10), Hitbox(11, 0, 20, 10))


def test_projectile_touching_enemy_edge_registers_hit():
    shot = Hitbox(left=636, top=580, right=639, bottom=599)
    enemy = Hitbox.from_offsets(Vec2(692, 640), (-56, -55, 56, -8))

    assert enemy.left == 636
    assert intersect(shot, enemy)

    enemy_shifted = Hitbox.from_offsets(Vec2(696, 640), (-56, -55, 56, -8))
    assert not intersect(shot, enemy_shifted)


def test_hit_takes_priority_over_leaving_the_field():
    shot = Projectile.spawn(PLAYER_SHOT, 10, 1)  # y = -19, next move leaves
    hits = []

    alive = resolve_projectiles([shot], 800, Hitbox(0, -30, 30, 0), hits.append)

    assert alive == []
    assert hits == [shot]
    assert shot.position.y == -19


def test_no_target_disables_hits():
    shot = Projectile.spawn(PLAYER_SHOT, 10, 100)
    hits = []

    alive = resolve_projectiles([shot], 800, None, hits.append)

    assert alive == [shot]
    assert hits == []
    assert shot.position.y == 76


def test_spent_projectiles_are_dropped():
    on_field = Projectile.spawn(PLAYER_SHOT, 10, 300)
    leaving = Projectile.spawn(PLAYER_SHOT, 10, 2)  # y = -18 -> -22

    assert resolve_projectiles([on_field, leaving], 800, None) == [on_field]


def test_hitbox_maps_onto_an_engine_collider():
    collider = Hitbox(10, 20, 13, 39).to_collider()

    assert (collider.position.x, collider.position.y) == (10, 20)
    assert collider.size.to_tuple() == (3, 19)
