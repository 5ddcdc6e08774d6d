import unittest
from unittest.mock import MagicMock

from wordpuzzle.core.constants import Direction
from wordpuzzle.core.models import Position
from wordpuzzle.engine.session import PuzzleSession

from puzzle_factory import apple_puzzle, tree_puzzle


def fill_word(session, word):
    for index, (row, col) in enumerate(word.cells):
        session.handle_input(row, col, word.text[index])


class SessionViewTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = tree_puzzle()
        self.session = PuzzleSession(self.puzzle)

    def test_highlight_follows_selected_word(self) -> None:
        self.session.handle_cell_click(0, 0)
        self.assertTrue(self.session.is_highlighted(0, 3))
        self.assertFalse(self.session.is_highlighted(1, 0))
        self.session.handle_cell_click(0, 0)
        self.assertTrue(self.session.is_highlighted(1, 0))
        self.assertFalse(self.session.is_highlighted(0, 3))

    def test_clicks_outside_grid_keep_session_idle(self) -> None:
        session = PuzzleSession(apple_puzzle())
        session.handle_cell_click(-3, 0)
        session.handle_cell_click(3, 0)
        self.assertIsNone(session.selected_cell)
        self.assertIsNone(session.selected_word)

    def test_highlight_stays_with_word_while_panning(self) -> None:
        self.session.handle_cell_click(0, 1)
        self.session.handle_arrow_key("ArrowLeft")
        self.session.handle_arrow_key("ArrowDown")
        self.assertEqual(self.session.selected_cell, Position(1, 0))
        self.assertFalse(self.session.is_highlighted(1, 0))
        self.assertTrue(self.session.is_highlighted(0, 1))

    def test_cell_view(self) -> None:
        self.session.handle_cell_click(0, 1)
        self.session.handle_input(0, 1, "고")
        view = self.session.cell_view(0, 1)
        self.assertTrue(view.selected)
        self.assertTrue(view.highlighted)
        self.assertEqual(view.value, "고")
        self.assertIs(view.correct, False)

        start = self.session.cell_view(0, 0)
        self.assertEqual(start.across_number, 1)
        self.assertEqual(start.down_number, 1)
        self.assertIsNone(start.correct)

    def test_blank_cell_view(self) -> None:
        view = self.session.cell_view(2, 2)
        self.assertTrue(view.blank)
        self.assertFalse(view.highlighted)
        self.assertIsNone(view.correct)

    def test_click_word_number(self) -> None:
        self.session.click_word_number(0, 0, Direction.DOWN)
        assert self.session.selected_word is not None
        self.assertEqual(self.session.selected_word.text, "사람")

    def test_hint_entries_mark_selection_and_chosung(self) -> None:
        word = self.puzzle.find_word(5, Direction.ACROSS)
        assert word is not None
        self.session.select_word_from_hint(word)
        self.session.hint_panel.toggle_chosung(word)
        entries = {(e.direction, e.number): e for e in self.session.hint_entries()}
        selected = entries[(Direction.ACROSS, 5)]
        self.assertTrue(selected.selected)
        self.assertEqual(selected.chosung, "ㄱㅇㅇ")
        self.assertFalse(entries[(Direction.ACROSS, 1)].selected)
        self.assertIsNone(entries[(Direction.ACROSS, 1)].chosung)

    def test_reset(self) -> None:
        self.session.handle_cell_click(0, 0)
        self.session.handle_input(0, 0, "사")
        self.session.reset()
        self.assertIsNone(self.session.selected_cell)
        self.assertEqual(self.session.user_inputs[0][0], "")


class SessionNotificationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = apple_puzzle()
        self.session = PuzzleSession(self.puzzle)
        self.completed = MagicMock()
        self.session.on_complete = self.completed

    def solve(self) -> None:
        for word in self.puzzle.words:
            fill_word(self.session, word)

    def test_completion_fires_once_when_solved(self) -> None:
        self.solve()
        self.assertTrue(self.session.is_complete)
        self.assertEqual(self.completed.call_count, 1)
        # Re-entering a correct value keeps the puzzle complete without re-firing.
        self.session.handle_input(0, 1, "과")
        self.assertEqual(self.completed.call_count, 1)

    def test_completion_refires_after_edit_away_and_back(self) -> None:
        self.solve()
        self.session.handle_input(1, 0, "")
        self.assertFalse(self.session.is_complete)
        self.session.handle_input(1, 0, "람")
        self.assertEqual(self.completed.call_count, 2)

    def test_completion_through_overflow(self) -> None:
        self.session.handle_input(1, 0, "람")
        self.session.handle_cell_click(0, 0)
        self.session.handle_composition_start()
        self.session.handle_composition_end(0, 0, "사과")
        self.assertEqual(self.session.selected_cell, Position(0, 1))
        self.completed.assert_called_once_with()

    def test_partial_fill_does_not_complete(self) -> None:
        self.session.handle_input(0, 0, "사")
        self.completed.assert_not_called()

    def test_word_select_notification(self) -> None:
        listener = MagicMock()
        self.session.on_word_select = listener
        self.session.handle_cell_click(0, 0)
        self.session.handle_cell_click(0, 0)
        directions = [call.args[0].direction for call in listener.call_args_list]
        self.assertEqual(directions, [Direction.ACROSS, Direction.DOWN])

    def test_word_select_notification_on_hint(self) -> None:
        listener = MagicMock()
        self.session.on_word_select = listener
        word = self.puzzle.find_word(1, Direction.DOWN)
        self.session.select_word_from_hint(word)
        listener.assert_called_once_with(word)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
