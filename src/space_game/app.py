"""
Space Game application: pygame window, event pump and frame loop.
"""

from __future__ import annotations

import argparse
import random
from typing import Sequence

import pygame

from space_game.backend import PygameSurface
from space_game.config import GameSettings
from space_game.input import InputEvent, Key, KeyEventKind
from space_game.scenes.space_game import GameController
from space_game.sprites import build_sprites
from space_game.utils import configure_logging, logger, set_screen

KEY_MAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.FIRE,
}


def translate_event(event: pygame.event.Event) -> InputEvent | None:
    """
    Map a pygame key event to an input event.

    :return: None for anything that is not a key press or release
    :rtype: InputEvent | None
    """
    if event.type == pygame.KEYDOWN:
        kind = KeyEventKind.PRESS
    elif event.type == pygame.KEYUP:
        kind = KeyEventKind.RELEASE
    else:
        return None
    return InputEvent(kind=kind, key=KEY_MAP.get(event.key, Key.OTHER))


class SpaceGame:
    """
    Space Game class
    """

    def __init__(self, settings: GameSettings | None = None):
        self._settings = settings or GameSettings()
        self._carry_on = True
        logger.debug(f"Initializing {self._settings.window.title}")
        pygame.init()

        window = self._settings.window
        self._screen = set_screen(window.title, window.width, window.height)
        self._surface = PygameSurface(self._screen)
        self._clock = pygame.time.Clock()
        self._controller = GameController(
            self._settings,
            sprites=build_sprites(),
            rng=random.Random(self._settings.seed),
        )

    @property
    def controller(self) -> GameController:
        return self._controller

    def stop(self) -> None:
        self._carry_on = False

    def handle_events(self) -> None:
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self.stop()
                continue
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.debug("Escape pressed, quitting")
                self.stop()
                continue

            input_event = translate_event(event)
            if input_event is not None:
                self._controller.handle_event(input_event)

    def run(self) -> None:
        """
        Run the game
        """
        logger.info("Running the game")

        try:
            while self._carry_on:
                self.handle_events()
                self._controller.tick(pygame.time.get_ticks(), self._surface)
                pygame.display.flip()
                self._clock.tick(self._settings.fps)
        finally:
            pygame.quit()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Space Game 101")
    parser.add_argument("--width", type=int, default=None, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a repeatable demo")
    parser.add_argument(
        "--show-hitbox", action="store_true", help="Outline the hitboxes used for collisions"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    """
    Build game settings from parsed CLI arguments.

    :raises ConfigError: If the resulting settings are invalid.
    """
    settings_data: dict = {"show_hitbox": args.show_hitbox, "seed": args.seed}
    window = {
        key: value
        for key, value in (("width", args.width), ("height", args.height))
        if value is not None
    }
    if window:
        settings_data["window"] = window
    if args.fps is not None:
        settings_data["fps"] = args.fps
    return GameSettings.from_dict(settings_data)


def run(argv: Sequence[str] | None = None) -> None:
    """
    Main entry point for Space Game.
    """
    args = parse_args(argv)
    configure_logging(args.log_level)

    settings = settings_from_args(args)
    logger.info("Starting Space Game...")
    logger.info(settings.to_dict())
    SpaceGame(settings).run()


if __name__ == "__main__":
    run()
