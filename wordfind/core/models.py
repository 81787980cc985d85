"""Data models supporting the word find generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, MutableSequence, Protocol, Sequence, Tuple, TypeVar

from .constants import Bounds, Direction


Coordinate = Tuple[int, int]

T = TypeVar("T")


class RandomSource(Protocol):
    """Subset of :class:`random.Random` the generator draws from."""

    def randrange(self, stop: int) -> int:
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...

    def shuffle(self, x: MutableSequence[Any]) -> None:
        ...


@dataclass(frozen=True)
class Theme:
    """A named collection of candidate words."""

    name: str
    words: Tuple[str, ...] = ()


@dataclass(frozen=True)
class WordPlacement:
    """A word committed to the grid along one direction."""

    word: str
    start_row: int
    start_col: int
    direction: Direction

    @property
    def cells(self) -> List[Coordinate]:
        dr, dc = self.direction.step
        return [
            (self.start_row + dr * i, self.start_col + dc * i)
            for i in range(len(self.word))
        ]

    @property
    def end(self) -> Coordinate:
        return self.cells[-1]


@dataclass(frozen=True)
class Grid:
    """Fully populated, read-only letter grid."""

    rows: Tuple[Tuple[str, ...], ...]

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=len(self.rows), cols=len(self.rows[0]) if self.rows else 0)

    def letter(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def read(self, cells: Sequence[Coordinate]) -> str:
        return "".join(self.rows[row][col] for row, col in cells)

    def to_jsonable(self) -> List[str]:
        return ["".join(row) for row in self.rows]


@dataclass(frozen=True)
class PuzzleState:
    """Solving state of one puzzle session.

    ``found`` is always a subset of ``placed_words`` and ``celebrate`` is set
    once every placed word has been found.
    """

    grid: Grid
    placed_words: Tuple[str, ...]
    selection: Tuple[Coordinate, ...] = ()
    found: FrozenSet[str] = field(default_factory=frozenset)
    celebrate: bool = False

    @property
    def candidate(self) -> str:
        return self.grid.read(self.selection)

    @property
    def remaining(self) -> List[str]:
        return [word for word in self.placed_words if word not in self.found]
