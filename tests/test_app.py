import logging

import pygame
import pytest

from space_game.app import parse_args, settings_from_args, translate_event
from space_game.config import ConfigError
from space_game.input import InputEvent, Key, KeyEventKind
from space_game.utils import configure_logging, logger


@pytest.mark.parametrize(
    "event_type, key, expected",
    [
        (pygame.KEYDOWN, pygame.K_LEFT, InputEvent(KeyEventKind.PRESS, Key.LEFT)),
        (pygame.KEYUP, pygame.K_RIGHT, InputEvent(KeyEventKind.RELEASE, Key.RIGHT)),
        (pygame.KEYUP, pygame.K_SPACE, InputEvent(KeyEventKind.RELEASE, Key.FIRE)),
        (pygame.KEYUP, pygame.K_a, InputEvent(KeyEventKind.RELEASE, Key.OTHER)),
    ],
)
def test_translate_key_events(event_type, key, expected):
    assert translate_event(pygame.event.Event(event_type, key=key)) == expected


def test_translate_ignores_other_events():
    assert translate_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1)) is None


def test_settings_from_args():
    args = parse_args(["--width", "640", "--seed", "3", "--show-hitbox", "--fps", "30"])

    settings = settings_from_args(args)

    assert settings.window.width == 640
    assert settings.window.height == 800
    assert settings.seed == 3
    assert settings.show_hitbox
    assert settings.fps == 30


def test_settings_from_args_defaults():
    settings = settings_from_args(parse_args([]))

    assert settings.window.width == 1280
    assert not settings.show_hitbox
    assert settings.seed is None


def test_settings_from_args_rejects_bad_size():
    with pytest.raises(ConfigError):
        settings_from_args(parse_args(["--height", "-5"]))


def test_log_level_name_reaches_the_engine_logger():
    try:
        configure_logging("warning")
        assert logger.level == logging.WARNING
        assert logging.getLogger().level == logging.WARNING
    finally:
        configure_logging(logging.DEBUG)
