"""Daily themed word find puzzles.

This package exposes the public API surface via:

- ``wordfind.engine.generator.PuzzleGenerator``: builds a puzzle for a theme.
- ``wordfind.engine.tracker.SelectionTracker``: tap-driven solving session.
- ``wordfind.data.catalog`` helpers: the bundled catalog and daily rotation.
"""

from .core.models import PuzzleState, Theme
from .data.catalog import DEFAULT_CATALOG, select_theme
from .engine.generator import GeneratorConfig, Puzzle, PuzzleGenerator
from .engine.tracker import SelectionTracker, TapEvent, tap

__all__ = [
    "DEFAULT_CATALOG",
    "GeneratorConfig",
    "Puzzle",
    "PuzzleGenerator",
    "PuzzleState",
    "SelectionTracker",
    "TapEvent",
    "Theme",
    "select_theme",
    "tap",
]

__version__ = "0.1.0"
