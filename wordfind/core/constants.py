"""Shared constants and enumerations for the word find generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


ROWS = 10
COLS = 12
MAX_WORDS = 8
MAX_TRIES = 100
MIN_WORD_LENGTH = 1
ALPHABET = string.ascii_uppercase


class Direction(str, Enum):
    """The eight straight-line directions a word may run in."""

    EAST = "E"
    WEST = "W"
    NORTH = "N"
    SOUTH = "S"
    NORTH_EAST = "NE"
    NORTH_WEST = "NW"
    SOUTH_EAST = "SE"
    SOUTH_WEST = "SW"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


DIRECTION_STEPS = {
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.NORTH_EAST: (-1, 1),
    Direction.NORTH_WEST: (-1, -1),
    Direction.SOUTH_EAST: (1, 1),
    Direction.SOUTH_WEST: (1, -1),
}

DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
