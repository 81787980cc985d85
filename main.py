"""CLI entrypoint for the daily word find puzzle."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from wordfind.core.exceptions import WordFindError
from wordfind.core.models import Theme
from wordfind.data.catalog import DEFAULT_CATALOG, load_catalog, select_theme
from wordfind.data.theme import CatalogThemeSource, GeminiThemeSource, merge_theme_sources
from wordfind.engine.generator import GeneratorConfig, Puzzle, PuzzleGenerator
from wordfind.engine.tracker import SelectionTracker, TapEvent
from wordfind.utils.clock import FixedClock, SystemClock
from wordfind.utils.logger import configure_logging
from wordfind.utils.pretty import format_grid, print_puzzle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and play the daily themed word find",
    )
    parser.add_argument("--day", type=int, help="Day of month (1-31); defaults to today")
    parser.add_argument("--theme", type=str, help="Play a named theme instead of today's")
    parser.add_argument(
        "--catalog",
        type=Path,
        metavar="FILE",
        help="JSON catalog of [{name, words}] themes (defaults to the bundled catalog)",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Ask Gemini for the --theme word list, falling back to the catalog",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--max-words", type=int, default=GeneratorConfig.max_words, help="Words per puzzle")
    parser.add_argument(
        "--max-tries",
        type=int,
        default=GeneratorConfig.max_tries,
        help="Placement attempts per word before it is dropped",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--play", action="store_true", help="Solve the puzzle by typing 'row col' taps")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def resolve_theme(args: argparse.Namespace, catalog: List[Theme]) -> Theme:
    if args.theme:
        primary = GeminiThemeSource() if args.llm else None
        theme = merge_theme_sources(primary, [CatalogThemeSource(catalog)], args.theme)
        if theme is None:
            raise WordFindError(f"No words available for theme '{args.theme}'")
        return theme
    clock = FixedClock(args.day) if args.day is not None else SystemClock()
    return select_theme(clock.day_of_month(), catalog)


def play(puzzle: Puzzle, lines: Iterable[str], stream: TextIO) -> SelectionTracker:
    """Run a line-based solving session until the puzzle is won or input ends.

    Each line is ``row col``; ``reset`` clears the selection and ``quit``
    stops early.
    """

    tracker = SelectionTracker(puzzle.new_state())
    bounds = puzzle.grid.bounds
    print_puzzle(puzzle, tracker.state, stream=stream)
    for line in lines:
        command = line.strip().lower()
        if not command:
            continue
        if command in {"quit", "exit"}:
            break
        if command == "reset":
            tracker.reset()
            print("Selection cleared", file=stream)
            continue
        parts = command.replace(",", " ").split()
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            print("Enter a tap as 'row col', 'reset' or 'quit'", file=stream)
            continue
        row, col = int(parts[0]), int(parts[1])
        if not bounds.contains(row, col):
            print(f"({row},{col}) is outside the {bounds.rows}x{bounds.cols} grid", file=stream)
            continue

        attempted = puzzle.grid.read(tracker.selection + ((row, col),))
        result = tracker.tap(row, col)
        if result.event is TapEvent.RESET:
            print(f"No word starts with '{attempted}'", file=stream)
        elif result.event is TapEvent.EXTENDED:
            print(f"Selected: {result.state.candidate}", file=stream)
        else:
            print(f"Found {result.word}!", file=stream)
            if result.event is TapEvent.FOUND:
                print_puzzle(puzzle, result.state, stream=stream)
        if result.event is TapEvent.COMPLETED:
            found_cells = [cell for placement in puzzle.placements for cell in placement.cells]
            print(format_grid(puzzle.grid, found_cells=found_cells), file=stream)
            print("Puzzle complete, well done!", file=stream)
            break
    return tracker


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.day is not None and not 1 <= args.day <= 31:
        parser.error("--day must be within 1-31")
    if args.llm and not args.theme:
        parser.error("--llm requires --theme")
    if args.max_words < 0 or args.max_tries < 1:
        parser.error("--max-words must be >= 0 and --max-tries >= 1")

    try:
        catalog = load_catalog(args.catalog) if args.catalog else list(DEFAULT_CATALOG)
        theme = resolve_theme(args, catalog)
    except WordFindError as exc:
        parser.exit(2, f"error: {exc}\n")

    config = GeneratorConfig(seed=args.seed, max_words=args.max_words, max_tries=args.max_tries)
    puzzle = PuzzleGenerator(config).generate(theme)

    if args.output:
        args.output.write_text(json.dumps(puzzle.to_jsonable(), indent=2), encoding="utf-8")
    if args.play:
        play(puzzle, sys.stdin, sys.stdout)
    elif not args.output:
        print_puzzle(puzzle)


if __name__ == "__main__":  # pragma: no cover
    main()
