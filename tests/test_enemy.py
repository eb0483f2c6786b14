import math

import pytest
from mini_arcade_core.spaces.geometry.bounds import Size2D
from mini_arcade_core.spaces.math.vec2 import Vec2

from space_game.config import EnemySettings
from space_game.entities import Actor, ActorKind, Enemy, PatrolPath

from conftest import ScriptedRandom

PATH = PatrolPath(center_x=640, base_y=240, range_x=640, range_y=50)


@pytest.fixture
def enemy() -> Enemy:
    settings = EnemySettings()
    return Enemy(
        actor=Actor(
            kind=ActorKind.ENEMY,
            position=Vec2(640, 160),
            play_field=Size2D(1280, 800),
            projectile_spec=settings.projectile_spec(),
            max_projectiles=settings.max_projectiles,
        )
    )


def test_patrol_path_traces_a_figure_eight():
    assert PATH.position_at(0) == pytest.approx((1280, 240))
    assert PATH.position_at(math.pi / 4) == pytest.approx((640 + 640 * math.cos(math.pi / 4), 290))
    assert PATH.position_at(math.pi / 2) == pytest.approx((640, 240), abs=1e-9)
    assert PATH.position_at(math.pi) == pytest.approx((0, 240), abs=1e-9)


def test_patrol_path_repeats():
    assert PATH.position_at(1.0 + 2 * math.pi) == pytest.approx(PATH.position_at(1.0))


def test_patrol_moves_the_enemy(enemy):
    enemy.patrol(PATH, 0)

    assert enemy.actor.position.to_tuple() == pytest.approx((1280, 240))


def test_try_fire_follows_the_dice(enemy):
    assert enemy.try_fire(ScriptedRandom([0.5]), 0.04) is None
    assert enemy.try_fire(ScriptedRandom([0.01]), 0.04) is not None
    assert len(enemy.projectiles) == 1


def test_try_fire_respects_capacity(enemy):
    always = ScriptedRandom(default=0.0)
    for _ in range(25):
        enemy.try_fire(always, 0.04)

    assert len(enemy.projectiles) == 10


def test_draw_puts_bottom_centre_at_position(enemy, surface, sprites):
    enemy.draw(surface, sprites)

    assert surface.calls == [
        ("sprite", "mothership", (0, 0, 144, 64), (568, 96, 144, 64)),
    ]
