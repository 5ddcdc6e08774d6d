"""Selection state machine for the puzzle grid."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from ..core.constants import ARROW_STEPS, Direction
from ..core.models import Position, Puzzle, Word
from ..utils.logger import get_logger
from .resolver import find_word_at_cell, word_starting_at


LOGGER = get_logger(__name__)


class PuzzleNavigator:
    """Owns the selected cell and the selected word.

    The navigator is idle until the first click or hint selection. Clicks
    resolve the active word (toggling direction on a re-click), arrow keys pan
    the cell freely without touching the word, and next/previous moves stay
    inside the active word's span.
    """

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self._selected_cell: Optional[Position] = None
        self._selected_word: Optional[Word] = None
        self.on_word_select: Optional[Callable[[Optional[Word]], None]] = None

    @property
    def selected_cell(self) -> Optional[Position]:
        return self._selected_cell

    @property
    def selected_word(self) -> Optional[Word]:
        return self._selected_word

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def handle_cell_click(self, row: int, col: int) -> None:
        if not self._is_open(row, col):
            LOGGER.debug("Ignoring click on blank or off-grid cell (%s,%s)", row, col)
            return

        is_same_cell = self._selected_cell == (row, col)
        current_direction = None
        if is_same_cell and self._selected_word is not None:
            current_direction = self._selected_word.direction

        word = find_word_at_cell(
            row,
            col,
            self.puzzle.across_words,
            self.puzzle.down_words,
            current_direction,
        )
        self._select(Position(row, col), word)

    def handle_arrow_key(self, key: str) -> None:
        if self._selected_cell is None:
            return
        step = ARROW_STEPS.get(key)
        if step is None:
            return

        row, col = self._selected_cell
        new_row, new_col = row + step[0], col + step[1]
        if not self._is_open(new_row, new_col):
            LOGGER.debug("Arrow %s from (%s,%s) blocked", key, row, col)
            return
        # Panning leaves the selected word alone.
        self._selected_cell = Position(new_row, new_col)

    def next_cell(self, row: int, col: int) -> Optional[Position]:
        """Return the cell after ``(row, col)`` within the selected word, if any."""

        return self._step_within_word(row, col, 1)

    def prev_cell(self, row: int, col: int) -> Optional[Position]:
        return self._step_within_word(row, col, -1)

    def move_to_next_cell(self) -> None:
        if self._selected_cell is None or self._selected_word is None:
            return
        target = self.next_cell(*self._selected_cell)
        if target is not None:
            self._selected_cell = target

    def move_to_prev_cell(self) -> None:
        if self._selected_cell is None or self._selected_word is None:
            return
        target = self.prev_cell(*self._selected_cell)
        if target is not None:
            self._selected_cell = target

    def select_word_from_hint(self, word: Word) -> None:
        self._select(word.start, word)

    def select_word_at_number(self, row: int, col: int, direction: Direction) -> None:
        """Select the ``direction`` word whose printed number sits at ``(row, col)``."""

        words = self.puzzle.across_words if direction == Direction.ACROSS else self.puzzle.down_words
        word = word_starting_at(row, col, words)
        if word is None:
            LOGGER.debug("No %s word starts at (%s,%s)", direction.value, row, col)
            return
        self._select(Position(row, col), word)

    # ------------------------------------------------------------------
    # Direct setters (no invariant checks)
    # ------------------------------------------------------------------
    def set_selected_cell(self, cell: Optional[Tuple[int, int]]) -> None:
        self._selected_cell = Position(*cell) if cell is not None else None

    def set_selected_word(self, word: Optional[Word]) -> None:
        previous = self._selected_word
        self._selected_word = word
        self._notify_if_changed(previous)

    def reset(self) -> None:
        self._select(None, None)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _select(self, cell: Optional[Position], word: Optional[Word]) -> None:
        previous = self._selected_word
        self._selected_cell = cell
        self._selected_word = word
        self._notify_if_changed(previous)

    def _notify_if_changed(self, previous: Optional[Word]) -> None:
        if previous != self._selected_word and self.on_word_select is not None:
            self.on_word_select(self._selected_word)

    def _is_open(self, row: int, col: int) -> bool:
        return self.puzzle.in_bounds(row, col) and not self.puzzle.is_blank(row, col)

    def _step_within_word(self, row: int, col: int, delta: int) -> Optional[Position]:
        word = self._selected_word
        if word is None:
            return None

        dr, dc = word.direction.step
        target_row, target_col = row + dr * delta, col + dc * delta
        if word.direction == Direction.ACROSS:
            offset = target_col - word.start_col
        else:
            offset = target_row - word.start_row
        # Only the boundary in the direction of travel is checked; after
        # arrow panning the cell may sit outside the (stale) word.
        if (delta > 0 and offset >= word.length) or (delta < 0 and offset < 0):
            LOGGER.debug("Stopping at edge of word %s (%s)", word.number, word.direction.value)
            return None
        if not self._is_open(target_row, target_col):
            return None
        return Position(target_row, target_col)
