"""
Input events and the intent buffer they feed.

Events only set flags here; the controller drains a snapshot once at
the start of every tick.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mini_arcade_core.scenes.sim_scene import BaseIntent


class Key(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    OTHER = "other"


class KeyEventKind(str, Enum):
    PRESS = "press"
    RELEASE = "release"


@dataclass(frozen=True)
class InputEvent:
    kind: KeyEventKind
    key: Key


@dataclass(frozen=True)
class Intent(BaseIntent):
    """
    Input consumed by one tick.
    """

    direction: int = 0
    fire_requests: int = 0
    any_release: bool = False


@dataclass
class IntentBuffer:
    """
    Accumulates input between ticks.

    ``direction`` is held state and survives ``drain``; fire requests and
    the release flag are one-shot.
    """

    direction: int = 0
    fire_requests: int = 0
    any_release: bool = False

    def push(self, event: InputEvent) -> None:
        if event.kind is KeyEventKind.PRESS:
            if event.key is Key.LEFT:
                self.direction = -1
            elif event.key is Key.RIGHT:
                self.direction = 1
            return

        self.any_release = True
        if event.key is Key.LEFT and self.direction == -1:
            self.direction = 0
        elif event.key is Key.RIGHT and self.direction == 1:
            self.direction = 0
        elif event.key is Key.FIRE:
            self.fire_requests += 1

    def drain(self) -> Intent:
        intent = Intent(
            direction=self.direction,
            fire_requests=self.fire_requests,
            any_release=self.any_release,
        )
        self.fire_requests = 0
        self.any_release = False
        return intent
