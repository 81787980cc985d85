"""Mutable grid used while a puzzle is being generated."""

from __future__ import annotations

from typing import List, Optional

from ..core.constants import ALPHABET, COLS, DIRECTIONS, ROWS, Bounds, Direction
from ..core.models import Grid, RandomSource, WordPlacement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class GridBuilder:
    """Places words on an empty grid and freezes it into a :class:`Grid`.

    The builder is private to the generator; callers only ever see the
    frozen result returned by :meth:`freeze`.
    """

    def __init__(self, rng: RandomSource, rows: int = ROWS, cols: int = COLS) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rng = rng
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: List[List[Optional[str]]] = [[None] * cols for _ in range(rows)]
        self.placements: List[WordPlacement] = []

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def fits(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Return whether ``word`` can be written starting at ``(row, col)``."""

        dr, dc = direction.step
        end_row = row + dr * (len(word) - 1)
        end_col = col + dc * (len(word) - 1)
        if not self.bounds.contains(row, col) or not self.bounds.contains(end_row, end_col):
            return False
        for index, letter in enumerate(word):
            existing = self.cells[row + dr * index][col + dc * index]
            if existing is not None and existing != letter:
                return False
        return True

    def place(self, word: str, row: int, col: int, direction: Direction) -> WordPlacement:
        placement = WordPlacement(word=word, start_row=row, start_col=col, direction=direction)
        for letter, (r, c) in zip(word, placement.cells):
            self.cells[r][c] = letter
        self.placements.append(placement)
        return placement

    def try_place(self, word: str, max_tries: int) -> Optional[WordPlacement]:
        """Attempt random placements of ``word``; ``None`` once tries run out."""

        for attempt in range(1, max_tries + 1):
            direction = self.rng.choice(DIRECTIONS)
            row = self.rng.randrange(self.bounds.rows)
            col = self.rng.randrange(self.bounds.cols)
            if self.fits(word, row, col, direction):
                LOGGER.debug(
                    "Placed %s at (%s,%s) heading %s after %s attempt(s)",
                    word, row, col, direction.value, attempt,
                )
                return self.place(word, row, col, direction)
        LOGGER.debug("Dropping %s after %s attempts", word, max_tries)
        return None

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------
    @property
    def empty_count(self) -> int:
        return sum(1 for row in self.cells for letter in row if letter is None)

    def fill_empty(self) -> None:
        for row in self.cells:
            for index, letter in enumerate(row):
                if letter is None:
                    row[index] = self.rng.choice(ALPHABET)

    def freeze(self) -> Grid:
        if self.empty_count:
            raise ValueError("Cannot freeze a grid with empty cells")
        return Grid(rows=tuple(tuple(row) for row in self.cells))  # type: ignore[arg-type]
