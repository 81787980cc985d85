import io
import json
import tempfile
import unittest
from pathlib import Path

from main import main, play
from wordfind.core.constants import Direction
from wordfind.core.models import Grid, Theme, WordPlacement
from wordfind.engine.generator import Puzzle
from wordfind.engine.tracker import TapEvent


def make_puzzle():
    grid = Grid(rows=tuple(tuple(row) for row in ["ZCAT", "DOGX"]))
    placements = [
        WordPlacement("CAT", 0, 1, Direction.EAST),
        WordPlacement("DOG", 1, 0, Direction.EAST),
    ]
    return Puzzle(theme=Theme(name="Pets", words=("CAT", "DOG")), grid=grid, placements=placements)


class PlayTests(unittest.TestCase):
    def test_scripted_session_wins(self) -> None:
        out = io.StringIO()
        lines = ["0 0", "", "0 1", "0 2", "0 3", "reset", "1,0", "1 1", "1 2", "0 1"]
        tracker = play(make_puzzle(), lines, out)
        text = out.getvalue()
        self.assertTrue(tracker.celebrate)
        self.assertIn("No word starts with 'Z'", text)
        self.assertIn("Found CAT!", text)
        self.assertEqual(text.count("Theme: Pets"), 2)
        self.assertIn(" Z  c  a  t ", text)
        self.assertIn("Puzzle complete", text)
        self.assertEqual(tracker.history[-1], TapEvent.COMPLETED)
        # input after the win is not consumed as a tap
        self.assertEqual(len(tracker.history), 7)

    def test_bad_input_is_reported(self) -> None:
        out = io.StringIO()
        tracker = play(make_puzzle(), ["hello", "9 9", "quit", "0 1"], out)
        text = out.getvalue()
        self.assertIn("Enter a tap", text)
        self.assertIn("outside the 2x4 grid", text)
        self.assertEqual(tracker.history, [])


class MainTests(unittest.TestCase):
    def test_writes_json_for_fixed_day(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            main(["--day", "1", "--seed", "4", "--output", str(output)])
            doc = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(doc["theme"], "Animals")
        self.assertEqual(len(doc["grid"]), 10)
        self.assertTrue(all(len(row) == 12 for row in doc["grid"]))
        self.assertEqual(doc["seed"], 4)

    def test_named_theme_from_catalog_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            catalog = Path(tmpdir) / "themes.json"
            catalog.write_text(json.dumps([{"name": "Pets", "words": ["cat", "dog"]}]), encoding="utf-8")
            output = Path(tmpdir) / "puzzle.json"
            main(["--catalog", str(catalog), "--theme", "pets", "--seed", "1", "--output", str(output)])
            doc = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(sorted(doc["words"]), ["CAT", "DOG"])

    def test_rejects_out_of_range_day(self) -> None:
        with self.assertRaises(SystemExit):
            main(["--day", "40"])

    def test_unknown_theme_exits(self) -> None:
        with self.assertRaises(SystemExit):
            main(["--theme", "Dinosaurs"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
