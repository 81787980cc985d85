import unittest

from wordfind.core.constants import Direction
from wordfind.core.models import Grid, WordPlacement
from wordfind.engine.validator import PuzzleValidator


def make_grid(rows):
    return Grid(rows=tuple(tuple(row) for row in rows))


class PuzzleValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = PuzzleValidator()
        self.grid = make_grid(["CAT", "XXO", "XXE"])
        self.cat = WordPlacement("CAT", 0, 0, Direction.EAST)
        self.toe = WordPlacement("TOE", 0, 2, Direction.SOUTH)

    def test_valid_puzzle_passes(self) -> None:
        result = self.validator.validate(self.grid, [self.cat, self.toe])
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_reversed_reading_is_valid(self) -> None:
        tac = WordPlacement("TAC", 0, 2, Direction.WEST)
        self.assertTrue(self.validator.validate(self.grid, [tac]).ok)

    def test_rejects_lowercase_or_blank_cells(self) -> None:
        result = self.validator.validate(make_grid(["CAt", "XXX"]), [])
        self.assertFalse(result.ok)
        self.assertIn("(0,2)", result.messages[0])

    def test_rejects_placement_that_does_not_read_back(self) -> None:
        dog = WordPlacement("DOG", 0, 0, Direction.SOUTH)
        result = self.validator.validate(self.grid, [dog])
        self.assertFalse(result.ok)
        self.assertIn("DOG", result.messages[0])

    def test_rejects_placement_outside_grid(self) -> None:
        result = self.validator.validate(self.grid, [WordPlacement("CAT", 2, 2, Direction.EAST)])
        self.assertFalse(result.ok)
        self.assertIn("outside", result.messages[0])

    def test_rejects_duplicate_words(self) -> None:
        result = self.validator.validate(self.grid, [self.cat, self.cat])
        self.assertFalse(result.ok)
        self.assertIn("Duplicate", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
