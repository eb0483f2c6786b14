"""
Shared fixtures: a draw surface that records calls and a random source
that replays scripted values.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable

import pytest

from space_game.config import GameSettings
from space_game.constants import (
    SPRITE_EXPLOSION,
    SPRITE_MOTHERSHIP,
    SPRITE_SHIP,
    SPRITE_THRUSTER,
)
from space_game.scenes.space_game import GameController


@dataclass
class RecordingSurface:
    calls: list[tuple] = field(default_factory=list)
    prerendered: int = 0

    def draw_sprite(self, image, source_rect, dest_rect):
        self.calls.append(("sprite", image, tuple(source_rect), tuple(dest_rect)))

    def fill_rect(self, color, rect):
        self.calls.append(("fill", color, tuple(rect)))

    def stroke_rect(self, color, rect, width=1):
        self.calls.append(("stroke", color, tuple(rect)))

    def draw_text(self, text, position, *, size, color, align="left", bold=False, outline=None):
        self.calls.append(("text", text, tuple(position)))

    def prerender(self, width, height, rects: Iterable, color) -> Any:
        self.prerendered += 1
        return f"tile-{self.prerendered}"

    def ops(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]

    def texts(self) -> list[str]:
        return [call[1] for call in self.ops("text")]


class ScriptedRandom:
    """
    Replays queued values; once a queue runs dry ``random`` returns
    ``default`` (no chance-based event fires) and ``randint`` returns 0.
    """

    def __init__(self, values=(), ints=(), default: float = 0.99):
        self.values = deque(values)
        self.ints = deque(ints)
        self.default = default

    def random(self) -> float:
        return self.values.popleft() if self.values else self.default

    def randint(self, a: int, b: int) -> int:
        value = self.ints.popleft() if self.ints else 0
        assert a <= value <= b
        return value


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def sprites() -> dict[str, str]:
    return {
        SPRITE_SHIP: "ship",
        SPRITE_THRUSTER: "thruster",
        SPRITE_EXPLOSION: "explosion",
        SPRITE_MOTHERSHIP: "mothership",
    }


@pytest.fixture
def settings() -> GameSettings:
    # no starfield layers, so nothing draws on the scripted random source
    return GameSettings(starfield=[])


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def controller(settings, sprites, rng) -> GameController:
    return GameController(settings, sprites=sprites, rng=rng)
