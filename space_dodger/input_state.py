"""Held-direction tracking fed by keyboard and pointer/touch press/release events."""

from collections import namedtuple
from enum import Enum

import pygame


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


InputSnapshot = namedtuple("InputSnapshot", ["up", "down", "left", "right"])

NO_INPUT = InputSnapshot(False, False, False, False)

# Keyboard identifiers -> logical direction
KEY_BINDINGS = {
    "ArrowLeft": Direction.LEFT,
    "a": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "d": Direction.RIGHT,
    "ArrowUp": Direction.UP,
    "w": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "s": Direction.DOWN,
}

# pygame key constants -> keyboard identifiers
PYGAME_KEYS = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_a: "a",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_d: "d",
    pygame.K_UP: "ArrowUp",
    pygame.K_w: "w",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_s: "s",
}


def direction_for_key(key):
    """Map a keyboard identifier or pygame key constant to a Direction, or None."""
    if isinstance(key, int):
        key = PYGAME_KEYS.get(key)
    return KEY_BINDINGS.get(key)


def _as_direction(token):
    try:
        return Direction(token)
    except ValueError:
        return None


class InputState:
    """Held directions. Unknown direction tokens and keys are ignored; nothing here raises."""

    def __init__(self):
        self._held = set()

    def press(self, direction):
        direction = _as_direction(direction)
        if direction is None:
            return False
        self._held.add(direction)
        return True

    def release(self, direction):
        direction = _as_direction(direction)
        if direction is None:
            return False
        self._held.discard(direction)
        return True

    def release_all(self):
        self._held.clear()

    def key_down(self, key):
        direction = direction_for_key(key)
        if direction is None:
            return False
        return self.press(direction)

    def key_up(self, key):
        direction = direction_for_key(key)
        if direction is None:
            return False
        return self.release(direction)

    def is_held(self, direction):
        return _as_direction(direction) in self._held

    def snapshot(self):
        return InputSnapshot(
            up=Direction.UP in self._held,
            down=Direction.DOWN in self._held,
            left=Direction.LEFT in self._held,
            right=Direction.RIGHT in self._held,
        )
