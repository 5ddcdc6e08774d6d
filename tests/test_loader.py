import json
import tempfile
import unittest
from pathlib import Path

from wordpuzzle.core.constants import Direction
from wordpuzzle.core.exceptions import PuzzleFormatError
from wordpuzzle.data.loader import load_puzzle, puzzle_from_payload

from puzzle_factory import tree_payload, tree_puzzle


class LoaderTests(unittest.TestCase):
    def test_payload_round_trip(self) -> None:
        puzzle = puzzle_from_payload(tree_payload())
        self.assertEqual(puzzle, tree_puzzle())

    def test_parses_cells_and_words(self) -> None:
        puzzle = puzzle_from_payload(tree_payload())
        self.assertEqual(puzzle.grid_size, 5)
        self.assertEqual(puzzle.total_words, 5)
        cell = puzzle.cell(0, 0)
        self.assertEqual(cell.letter, "사")
        self.assertEqual(cell.across_number, 1)
        self.assertEqual(cell.down_number, 1)
        self.assertTrue(puzzle.cell(2, 2).is_blank)
        word = puzzle.find_word(2, Direction.DOWN)
        assert word is not None
        self.assertEqual(word.text, "나비")
        self.assertEqual(word.definition, "나비 뜻")

    def test_total_words_defaults_to_word_count(self) -> None:
        payload = tree_payload()
        del payload["totalWords"]
        self.assertEqual(puzzle_from_payload(payload).total_words, 5)

    def test_lowercase_direction_accepted(self) -> None:
        payload = tree_payload()
        payload["acrossWords"][0]["direction"] = "across"
        puzzle = puzzle_from_payload(payload)
        self.assertEqual(puzzle.across_words[0].direction, Direction.ACROSS)

    def test_missing_grid_size(self) -> None:
        payload = tree_payload()
        del payload["gridSize"]
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_grid_shape_mismatch(self) -> None:
        payload = tree_payload()
        payload["grid"][1].pop()
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_blank_cell_with_letter(self) -> None:
        payload = tree_payload()
        payload["grid"][2][2]["letter"] = "가"
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_letter_conflict(self) -> None:
        payload = tree_payload()
        payload["acrossWords"][0]["word"] = "사과나비"
        with self.assertRaises(PuzzleFormatError) as ctx:
            puzzle_from_payload(payload)
        self.assertIn("Letter conflict", str(ctx.exception))

    def test_word_outside_grid(self) -> None:
        payload = tree_payload()
        payload["acrossWords"][2]["startCol"] = 4
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_word_in_wrong_list(self) -> None:
        payload = tree_payload()
        payload["downWords"].append(payload["acrossWords"][0])
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_unknown_direction(self) -> None:
        payload = tree_payload()
        payload["downWords"][0]["direction"] = "DIAGONAL"
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_non_object_payload(self) -> None:
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload([])  # type: ignore[arg-type]

    def test_load_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "puzzle.json"
            path.write_text(json.dumps(tree_payload(), ensure_ascii=False), encoding="utf-8")
            self.assertEqual(load_puzzle(path), tree_puzzle())

    def test_load_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(PuzzleFormatError):
                load_puzzle(path)


    def test_non_string_word_text(self) -> None:
        payload = tree_payload()
        payload["acrossWords"][0]["word"] = 1234
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_non_string_definition(self) -> None:
        payload = tree_payload()
        payload["downWords"][0]["definition"] = ["사람"]
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_non_integer_cell_number(self) -> None:
        for key in ("acrossNumber", "downNumber"):
            payload = tree_payload()
            payload["grid"][0][0][key] = "1"
            with self.subTest(key=key), self.assertRaises(PuzzleFormatError):
                puzzle_from_payload(payload)

    def test_non_string_cell_letter(self) -> None:
        payload = tree_payload()
        payload["grid"][0][0]["letter"] = 7
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_payload(payload)

    def test_load_non_utf8_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "corrupt.json"
            path.write_bytes(b"\xff\xfe{")
            with self.assertRaises(PuzzleFormatError):
                load_puzzle(path)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
