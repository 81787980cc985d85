"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Set

from ..core.constants import ALPHABET
from ..core.exceptions import ValidationError
from ..core.models import Coordinate, Grid, WordPlacement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a frozen grid and its placements."""

    def validate(self, grid: Grid, placements: Sequence[WordPlacement]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters_valid(grid)
            self._check_no_duplicate_words(placements)
            self._check_placements(grid, placements)
            self._check_overlaps(placements)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters_valid(self, grid: Grid) -> None:
        for r, row in enumerate(grid.rows):
            if len(row) != grid.bounds.cols:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {grid.bounds.cols}")
            for c, letter in enumerate(row):
                if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
                    raise ValidationError(f"Invalid letter {letter!r} at ({r},{c})")

    def _check_no_duplicate_words(self, placements: Sequence[WordPlacement]) -> None:
        seen: Set[str] = set()
        for placement in placements:
            if placement.word in seen:
                raise ValidationError(f"Duplicate placed word '{placement.word}'")
            seen.add(placement.word)

    def _check_placements(self, grid: Grid, placements: Sequence[WordPlacement]) -> None:
        for placement in placements:
            cells = placement.cells
            if not all(grid.bounds.contains(r, c) for r, c in cells):
                raise ValidationError(
                    f"Word '{placement.word}' at ({placement.start_row},{placement.start_col}) "
                    "runs outside the grid"
                )
            text = grid.read(cells)
            if text != placement.word:
                raise ValidationError(
                    f"Word '{placement.word}' reads as '{text}' at "
                    f"({placement.start_row},{placement.start_col}) heading {placement.direction.value}"
                )

    def _check_overlaps(self, placements: Sequence[WordPlacement]) -> None:
        claimed: Dict[Coordinate, str] = {}
        for placement in placements:
            for letter, cell in zip(placement.word, placement.cells):
                existing = claimed.setdefault(cell, letter)
                if existing != letter:
                    raise ValidationError(
                        f"Letter conflict at {cell}: '{existing}' vs '{letter}' ({placement.word})"
                    )
