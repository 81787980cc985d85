"""Main word find generator orchestration.

One pass per puzzle:
  1. Sample up to ``max_words`` words from the chosen theme.
  2. Place each word with bounded random attempts, dropping the ones that
     never fit, then fill the remaining cells with random letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..core.constants import COLS, MAX_TRIES, MAX_WORDS, ROWS
from ..core.exceptions import ValidationError
from ..core.models import Grid, PuzzleState, RandomSource, Theme, WordPlacement
from ..data.catalog import select_theme
from ..data.sampler import sample_words
from ..utils.clock import DayProvider
from ..utils.logger import get_logger
from .grid import GridBuilder
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    rows: int = ROWS
    cols: int = COLS
    max_words: int = MAX_WORDS
    max_tries: int = MAX_TRIES
    seed: Optional[int] = None


@dataclass
class Puzzle:
    theme: Theme
    grid: Grid
    placements: List[WordPlacement]
    dropped_words: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    def new_state(self) -> PuzzleState:
        """Open a fresh solving session over this puzzle."""

        return PuzzleState(grid=self.grid, placed_words=tuple(self.placed_words))

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "theme": self.theme.name,
            "rows": self.grid.bounds.rows,
            "cols": self.grid.bounds.cols,
            "grid": self.grid.to_jsonable(),
            "words": self.placed_words,
            "placements": [
                {
                    "word": placement.word,
                    "start": [placement.start_row, placement.start_col],
                    "end": list(placement.end),
                    "direction": placement.direction.value,
                }
                for placement in self.placements
            ],
            "dropped_words": list(self.dropped_words),
            "seed": self.seed,
        }


class PuzzleGenerator:
    """High-level orchestrator: theme choice, sampling, then placement."""

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[RandomSource] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng: RandomSource = rng or random.Random(self.config.seed)
        self.validator = PuzzleValidator()

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, theme: Theme) -> Puzzle:
        LOGGER.info("Generating %sx%s puzzle for theme '%s'", self.config.rows, self.config.cols, theme.name)
        words = sample_words(theme.words, self.rng, self.config.max_words)
        if not words:
            LOGGER.warning("Theme '%s' has no usable words; the puzzle will be empty", theme.name)
        grid, placements, dropped = self.build_grid(words)
        validation = self.validator.validate(grid, placements)
        if not validation.ok:
            raise ValidationError(f"Puzzle validation failed: {validation.messages}")
        LOGGER.info(
            "Placed %s/%s words for '%s'%s",
            len(placements), len(words), theme.name,
            f" (dropped: {', '.join(dropped)})" if dropped else "",
        )
        return Puzzle(
            theme=theme,
            grid=grid,
            placements=placements,
            dropped_words=dropped,
            seed=self.config.seed,
        )

    def generate_daily(self, catalog: Sequence[Theme], clock: DayProvider) -> Puzzle:
        theme = select_theme(clock.day_of_month(), catalog)
        return self.generate(theme)

    # ------------------------------------------------------------------
    # Grid construction
    # ------------------------------------------------------------------
    def build_grid(self, words: Sequence[str]) -> tuple[Grid, List[WordPlacement], List[str]]:
        """Place ``words`` in order and return the frozen grid.

        Words that cannot be placed within ``max_tries`` attempts are
        returned in the dropped list rather than raising.
        """

        builder = GridBuilder(self.rng, rows=self.config.rows, cols=self.config.cols)
        dropped: List[str] = []
        for word in words:
            if builder.try_place(word, self.config.max_tries) is None:
                dropped.append(word)
        builder.fill_empty()
        return builder.freeze(), list(builder.placements), dropped
