import random
import unittest

from wordfind.core.constants import ALPHABET, Direction
from wordfind.core.models import Theme
from wordfind.engine.generator import GeneratorConfig, PuzzleGenerator
from wordfind.engine.grid import GridBuilder


class ScriptedRandom:
    """Random source replaying fixed directions and start cells."""

    def __init__(self, directions=(), positions=(), letter="X") -> None:
        self.directions = list(directions)
        self.positions = list(positions)
        self.letter = letter

    def choice(self, seq):
        if isinstance(seq[0], Direction):
            return self.directions.pop(0)
        return self.letter

    def randrange(self, stop):
        value = self.positions.pop(0)
        assert 0 <= value < stop
        return value

    def shuffle(self, x) -> None:
        pass


def generate(words, rng, rows=3, cols=3, max_tries=100):
    config = GeneratorConfig(rows=rows, cols=cols, max_tries=max_tries)
    return PuzzleGenerator(config, rng=rng).generate(Theme(name="Test", words=tuple(words)))


class GridBuilderTests(unittest.TestCase):
    def test_fits_rejects_out_of_bounds_end(self) -> None:
        builder = GridBuilder(random.Random(0), rows=3, cols=3)
        self.assertFalse(builder.fits("CAT", 0, 1, Direction.EAST))
        self.assertFalse(builder.fits("CAT", 1, 1, Direction.NORTH_WEST))
        self.assertTrue(builder.fits("CAT", 2, 2, Direction.NORTH_WEST))

    def test_fits_allows_matching_overlap_only(self) -> None:
        builder = GridBuilder(random.Random(0), rows=3, cols=3)
        builder.place("CAT", 0, 0, Direction.EAST)
        self.assertTrue(builder.fits("TOE", 0, 2, Direction.SOUTH))
        self.assertFalse(builder.fits("DOG", 0, 0, Direction.SOUTH))

    def test_freeze_requires_full_grid(self) -> None:
        builder = GridBuilder(random.Random(0), rows=2, cols=2)
        builder.place("AB", 0, 0, Direction.EAST)
        with self.assertRaises(ValueError):
            builder.freeze()
        builder.fill_empty()
        grid = builder.freeze()
        self.assertEqual(grid.rows[0], ("A", "B"))
        self.assertTrue(all(letter in ALPHABET for row in grid.rows for letter in row))

    def test_rejects_non_positive_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            GridBuilder(random.Random(0), rows=0, cols=5)


class ScriptedPlacementTests(unittest.TestCase):
    def test_exact_grid_for_scripted_source(self) -> None:
        puzzle = generate(["cat"], ScriptedRandom([Direction.SOUTH], [0, 1]))
        self.assertEqual(puzzle.grid.to_jsonable(), ["XCX", "XAX", "XTX"])
        self.assertEqual(puzzle.placed_words, ["CAT"])
        placement = puzzle.placements[0]
        self.assertEqual((placement.start_row, placement.start_col), (0, 1))
        self.assertEqual(placement.end, (2, 1))

    def test_out_of_bounds_attempt_is_retried(self) -> None:
        rng = ScriptedRandom([Direction.EAST, Direction.EAST], [0, 2, 1, 0])
        puzzle = generate(["CAT"], rng)
        self.assertEqual(puzzle.grid.to_jsonable(), ["XXX", "CAT", "XXX"])

    def test_conflicting_attempt_is_retried(self) -> None:
        rng = ScriptedRandom(
            [Direction.EAST, Direction.SOUTH, Direction.EAST],
            [0, 0, 0, 0, 2, 0],
        )
        puzzle = generate(["CAT", "DOG"], rng)
        self.assertEqual(puzzle.grid.to_jsonable(), ["CAT", "XXX", "DOG"])
        self.assertEqual(puzzle.placed_words, ["CAT", "DOG"])

    def test_matching_overlap_is_committed(self) -> None:
        rng = ScriptedRandom([Direction.EAST, Direction.SOUTH], [0, 0, 0, 2])
        puzzle = generate(["CAT", "TOE"], rng)
        self.assertEqual(puzzle.grid.to_jsonable(), ["CAT", "XXO", "XXE"])

    def test_word_is_dropped_after_max_tries(self) -> None:
        rng = ScriptedRandom([Direction.EAST, Direction.SOUTH], [0, 0, 0, 0])
        puzzle = generate(["LONG"], rng, max_tries=2)
        self.assertEqual(puzzle.placed_words, [])
        self.assertEqual(puzzle.dropped_words, ["LONG"])
        self.assertEqual(puzzle.grid.to_jsonable(), ["XXX", "XXX", "XXX"])
        self.assertEqual(rng.directions, [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
