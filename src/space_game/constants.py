"""
Constants for the game.
"""

from __future__ import annotations

FPS = 60
WINDOW_SIZE = (1280, 800)
TITLE = "Space Game 101"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREY = (153, 153, 153)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
HITBOX_GREEN = (136, 255, 136)

FONT_NAME = "russoone,sans"

# sprite sheet keys
SPRITE_SHIP = "ship"
SPRITE_THRUSTER = "thruster"
SPRITE_EXPLOSION = "explosion"
SPRITE_MOTHERSHIP = "mothership"

# source frames are 64x64, drawn at 32x32
FRAME_SIZE = 64
SHIP_DRAW_SIZE = 32
MOTHERSHIP_SIZE = (144, 64)

# (left, top, right, bottom) relative to the actor's position
PLAYER_HITBOX_OFFSETS = (-14, 1, 14, 29)
ENEMY_HITBOX_OFFSETS = (-56, -55, 56, -8)

EXPLOSION_FRAMES = 5
EXPLOSION_STEP = 0.25
THRUSTER_FRAMES = 3
THRUSTER_STEP = 0.5
