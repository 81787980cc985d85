"""Pretty-print helpers for word find grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, Optional, Set

from ..core.models import Coordinate, Grid, PuzzleState

if TYPE_CHECKING:
    from ..engine.generator import Puzzle


def format_grid(
    grid: Grid,
    *,
    found_cells: Optional[Iterable[Coordinate]] = None,
    selected_cells: Optional[Iterable[Coordinate]] = None,
) -> str:
    """Render the grid with row/column headers.

    Found cells are shown in lowercase, selected cells in brackets.
    """

    found: Set[Coordinate] = set(found_cells or ())
    selected: Set[Coordinate] = set(selected_cells or ())
    width = grid.bounds.cols
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r, row in enumerate(grid.rows):
        rendered = []
        for c, letter in enumerate(row):
            symbol = letter.lower() if (r, c) in found else letter
            rendered.append(f"[{symbol}]" if (r, c) in selected else f" {symbol} ")
        lines.append(f"{r:>2} |" + "".join(rendered))
    return "\n".join(lines)


def format_word_list(state: PuzzleState) -> str:
    parts = [f"~{word}~" if word in state.found else word for word in state.placed_words]
    return f"Words ({len(state.found)}/{len(state.placed_words)}): " + " ".join(parts)


def print_puzzle(puzzle: Puzzle, state: Optional[PuzzleState] = None, *, stream=None) -> None:
    """Print the grid and word list, marking progress from ``state``."""

    stream = stream or sys.stdout
    state = state or puzzle.new_state()
    found_cells = [
        cell
        for placement in puzzle.placements
        if placement.word in state.found
        for cell in placement.cells
    ]
    print(f"Theme: {puzzle.theme.name}", file=stream)
    print(format_grid(puzzle.grid, found_cells=found_cells, selected_cells=state.selection), file=stream)
    print(format_word_list(state), file=stream)
    if puzzle.seed is not None:
        print(f"Seed: {puzzle.seed}", file=stream)
