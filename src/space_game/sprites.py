"""
Procedurally drawn sprite sheets.

Each sheet is a row of 64x64 frames except the mother ship, which is a
single 144x64 image.
"""

from __future__ import annotations

import pygame

from space_game.constants import (
    EXPLOSION_FRAMES,
    FRAME_SIZE,
    MOTHERSHIP_SIZE,
    SPRITE_EXPLOSION,
    SPRITE_MOTHERSHIP,
    SPRITE_SHIP,
    SPRITE_THRUSTER,
)

HULL = (200, 210, 230)
COCKPIT = (60, 140, 255)
FLAME_OUTER = (255, 140, 0)
FLAME_INNER = (255, 240, 120)
BLAST = ((255, 255, 200), (255, 200, 60), (255, 110, 20), (160, 60, 20), (70, 40, 30))
MOTHERSHIP_HULL = (150, 40, 60)
MOTHERSHIP_LIGHTS = (255, 220, 90)


def _sheet(frames: int, width: int = FRAME_SIZE, height: int = FRAME_SIZE) -> pygame.Surface:
    return pygame.Surface((width * frames, height), pygame.SRCALPHA)


def ship_sheet() -> pygame.Surface:
    """Three frames: banking left, level, banking right."""
    sheet = _sheet(3)
    for frame, lean in enumerate((-1, 0, 1)):
        ox = frame * FRAME_SIZE
        tip = (ox + 32 + lean * 4, 4)
        pygame.draw.polygon(
            sheet,
            HULL,
            [tip, (ox + 6 + max(lean, 0) * 8, 60), (ox + 58 + min(lean, 0) * 8, 60)],
        )
        pygame.draw.ellipse(sheet, COCKPIT, (ox + 26 + lean * 3, 24, 12, 20))
    return sheet


def thruster_sheet() -> pygame.Surface:
    sheet = _sheet(4)
    for frame in range(4):
        ox = frame * FRAME_SIZE
        length = 24 + frame * 8
        pygame.draw.polygon(sheet, FLAME_OUTER, [(ox + 20, 0), (ox + 44, 0), (ox + 32, length)])
        pygame.draw.polygon(sheet, FLAME_INNER, [(ox + 26, 0), (ox + 38, 0), (ox + 32, length // 2)])
    return sheet


def explosion_sheet() -> pygame.Surface:
    sheet = _sheet(EXPLOSION_FRAMES)
    for frame in range(EXPLOSION_FRAMES):
        center = (frame * FRAME_SIZE + 32, 32)
        radius = 8 + frame * 5
        pygame.draw.circle(sheet, BLAST[frame], center, radius)
        pygame.draw.circle(sheet, BLAST[max(frame - 1, 0)], center, radius // 2)
    return sheet


def mothership_sheet() -> pygame.Surface:
    width, height = MOTHERSHIP_SIZE
    sheet = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.ellipse(sheet, MOTHERSHIP_HULL, (0, 16, width, 40))
    pygame.draw.ellipse(sheet, HULL, (44, 0, 56, 32))
    for x in range(16, width - 8, 20):
        pygame.draw.circle(sheet, MOTHERSHIP_LIGHTS, (x, 38), 4)
    return sheet


def build_sprites() -> dict[str, pygame.Surface]:
    return {
        SPRITE_SHIP: ship_sheet(),
        SPRITE_THRUSTER: thruster_sheet(),
        SPRITE_EXPLOSION: explosion_sheet(),
        SPRITE_MOTHERSHIP: mothership_sheet(),
    }
