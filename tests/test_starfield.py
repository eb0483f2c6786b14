import random

from space_game.entities import StarfieldLayer

from conftest import ScriptedRandom


def test_generate_repeats_stars_one_tile_lower():
    rng = ScriptedRandom([0.5, 0.25, 0.9, 0.0, 0.99, 0.0])

    layer = StarfieldLayer.generate(100, 40, rng, stars=2, speed=0.5, max_size=3)

    assert layer.stars == [
        (50, 10, 3, 3),
        (0, 39, 1, 1),
        (50, 50, 3, 3),
        (0, 79, 1, 1),
    ]
    assert layer.pos_y == 40
    assert layer.speed == 0.5


def test_star_sizes_stay_within_max():
    layer = StarfieldLayer.generate(200, 100, random.Random(3), stars=50, max_size=4)

    assert len(layer.stars) == 100
    assert all(1 <= w <= 4 and w == h for _, _, w, h in layer.stars)


def test_scroll_wraps_to_the_tile_height():
    layer = StarfieldLayer(width=10, height=10, speed=4, pos_y=10)

    assert [layer.scroll() for _ in range(4)] == [6, 2, 10, 6]


def test_draw_prerenders_the_strip_once(surface):
    layer = StarfieldLayer(width=10, height=10, speed=4, pos_y=6)

    layer.draw(surface)
    layer.draw(surface)

    assert surface.prerendered == 1
    assert surface.ops("sprite") == [
        ("sprite", "tile-1", (0, 6, 10, 10), (0, 0, 10, 10)),
        ("sprite", "tile-1", (0, 6, 10, 10), (0, 0, 10, 10)),
    ]
