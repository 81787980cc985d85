"""Tap-driven selection state machine for solving a puzzle."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from ..core.models import Coordinate, PuzzleState
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class TapEvent(str, Enum):
    """Outcome of a single tap."""

    EXTENDED = "EXTENDED"
    RESET = "RESET"
    FOUND = "FOUND"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class TapResult:
    state: PuzzleState
    event: TapEvent
    word: Optional[str] = None


def tap(state: PuzzleState, cell: Coordinate) -> TapResult:
    """Apply one tap and return the next state.

    The tapped cell extends the selection. A selection that no longer
    prefixes any placed word is cleared; one that spells a placed word marks
    it found and is cleared. An exact match wins as soon as it occurs, even
    when a longer placed word shares the same prefix.
    """

    selection = state.selection + (cell,)
    candidate = state.grid.read(selection)

    if not any(word.startswith(candidate) for word in state.placed_words):
        return TapResult(state=replace(state, selection=()), event=TapEvent.RESET)

    if candidate in state.placed_words:
        found = state.found | {candidate}
        celebrate = bool(state.placed_words) and len(found) == len(state.placed_words)
        next_state = replace(state, selection=(), found=found, celebrate=celebrate)
        event = TapEvent.COMPLETED if celebrate else TapEvent.FOUND
        return TapResult(state=next_state, event=event, word=candidate)

    return TapResult(state=replace(state, selection=selection), event=TapEvent.EXTENDED)


def reset(state: PuzzleState) -> PuzzleState:
    """Drop the current selection without touching the found words."""

    return replace(state, selection=())


class SelectionTracker:
    """Holds one solving session and feeds taps through :func:`tap`."""

    def __init__(self, state: PuzzleState) -> None:
        self.state = state
        self.history: List[TapEvent] = []

    @property
    def selection(self) -> Tuple[Coordinate, ...]:
        return self.state.selection

    @property
    def found(self) -> FrozenSet[str]:
        return self.state.found

    @property
    def celebrate(self) -> bool:
        return self.state.celebrate

    def tap(self, row: int, col: int) -> TapResult:
        result = tap(self.state, (row, col))
        self.state = result.state
        self.history.append(result.event)
        if result.event is TapEvent.FOUND:
            LOGGER.info("Found %s (%s/%s)", result.word, len(self.found), len(self.state.placed_words))
        elif result.event is TapEvent.COMPLETED:
            LOGGER.info("Found %s; all %s words found", result.word, len(self.state.placed_words))
        return result

    def reset(self) -> None:
        self.state = reset(self.state)
