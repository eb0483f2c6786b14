from space_game.constants import RED, YELLOW
from space_game.entities import Projectile, ProjectileOwner, ProjectileSpec

PLAYER_SHOT = ProjectileSpec(4, 20, -4, YELLOW, ProjectileOwner.PLAYER)
ENEMY_SHOT = ProjectileSpec(6, 12, 2, RED, ProjectileOwner.ENEMY)


def test_spawn_positions_upward_shot_above_the_origin():
    shot = Projectile.spawn(PLAYER_SHOT, 640, 600)

    assert shot.position.to_tuple() == (638, 580)
    assert shot.velocity == -4
    assert shot.owner is ProjectileOwner.PLAYER


def test_spawn_positions_downward_shot_below_the_origin():
    shot = Projectile.spawn(ENEMY_SHOT, 641.5, 160)

    assert shot.position.to_tuple() == (638, 172)


def test_hitbox_edges_are_inclusive():
    hitbox = Projectile.spawn(PLAYER_SHOT, 640, 600).hitbox

    assert (hitbox.left, hitbox.top, hitbox.right, hitbox.bottom) == (638, 580, 641, 599)


def test_upward_shot_leaves_after_passing_minus_height():
    shot = Projectile.spawn(PLAYER_SHOT, 640, 600)  # y = 580
    ticks = 0
    while shot.advance(800):
        ticks += 1

    # y reaches -20 (still on field) after 150 moves, -24 on the 151st
    assert ticks == 150
    assert shot.position.y == -24


def test_downward_shot_leaves_after_passing_field_height():
    shot = Projectile.spawn(ENEMY_SHOT, 100, 768)  # y = 780
    results = [shot.advance(800) for _ in range(11)]

    assert results == [True] * 10 + [False]
    assert shot.position.y == 802


def test_displacement_grows_every_tick():
    shot = Projectile.spawn(ENEMY_SHOT, 100, 100)
    start = shot.position.y
    last = 0.0
    for _ in range(20):
        shot.advance(800)
        displacement = abs(shot.position.y - start)
        assert displacement > last
        last = displacement


def test_draw_fills_its_rectangle(surface):
    Projectile.spawn(PLAYER_SHOT, 640, 600).draw(surface)

    assert surface.calls == [("fill", YELLOW, (638, 580, 4, 20))]
