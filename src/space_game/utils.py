"""
Space Game utils
"""

from __future__ import annotations

import logging

import pygame
from mini_arcade_core.utils import logger
from mini_arcade_core.utils.logging import (
    configure_logging as configure_core_logging,
)

__all__ = ["clamp", "configure_logging", "logger", "set_screen"]


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Route game logs through the engine's console handler at ``level``.

    :param level: Logging level name or number
    :type level: str | int
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    configure_core_logging(level)
    logger.setLevel(level)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value between low and high bounds"""
    return low if value < low else high if value > high else value


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
