"""Input reconciliation: turn raw keystrokes and IME events into cell commits.

Korean input arrives through two mutually exclusive channels. Plain input
events carry the raw field value on every change; while an IME composition is
running those values are provisional, so they are ignored and the final text
is taken from the composition-end event instead. Either way each cell keeps a
single character. When a commit carries two or more characters (fast typing,
paste, a composition that spilled into the next syllable), the first stays in
the current cell and the remainder moves to the next cell of the selected
word, which also becomes the selected cell. The remainder is not split again.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.constants import ARROW_STEPS, BACKSPACE_KEY, SPACE_KEY
from ..core.models import Puzzle
from ..utils.logger import get_logger
from .navigation import PuzzleNavigator


LOGGER = get_logger(__name__)


class PuzzleInput:
    """Owns the per-cell input buffer."""

    def __init__(self, puzzle: Puzzle, navigator: PuzzleNavigator) -> None:
        self.puzzle = puzzle
        self.navigator = navigator
        self.is_composing = False
        self._user_inputs: List[List[str]] = self._empty_buffer()

    @property
    def user_inputs(self) -> List[List[str]]:
        return self._user_inputs

    def value_at(self, row: int, col: int) -> str:
        return self._user_inputs[row][col]

    def update_user_input(self, row: int, col: int, value: str) -> None:
        if not self._is_writable(row, col):
            LOGGER.debug("Refusing to write %r into (%s,%s)", value, row, col)
            return
        self._user_inputs[row][col] = value

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def handle_input(self, row: int, col: int, value: str) -> str:
        """Handle a raw value change on the field of ``(row, col)``.

        Returns the text the field should display afterwards.
        """

        if not self._is_writable(row, col):
            LOGGER.debug("Input %r at blank or off-grid cell (%s,%s) ignored", value, row, col)
            return ""
        if self.is_composing:
            LOGGER.debug("Input %r at (%s,%s) deferred to composition end", value, row, col)
            return value

        value = value or ""
        if len(value) >= 2:
            return self._commit_with_overflow(row, col, value)
        self.update_user_input(row, col, value)
        return value

    def handle_composition_start(self) -> None:
        self.is_composing = True

    def handle_composition_end(self, row: int, col: int, value: str) -> str:
        """Commit the final composed text of ``(row, col)``.

        Returns the text the field should display afterwards.
        """

        if not self.is_composing:
            LOGGER.debug("Composition end at (%s,%s) without a composition; ignored", row, col)
            return self._user_inputs[row][col] if self._is_writable(row, col) else ""
        self.is_composing = False
        if not self._is_writable(row, col):
            LOGGER.debug("Composition %r at blank or off-grid cell (%s,%s) dropped", value, row, col)
            return ""

        if not value:
            return ""
        if len(value) >= 2:
            return self._commit_with_overflow(row, col, value)
        self.update_user_input(row, col, value)
        return value

    def handle_key_down(self, key: str, row: int, col: int, live_value: Optional[str] = None) -> bool:
        """Handle navigation keys pressed on the field of ``(row, col)``.

        ``live_value`` is what the field shows right now; it defaults to the
        buffered value. Returns True when the platform default action should
        be suppressed.
        """

        if key == SPACE_KEY:
            self.navigator.move_to_next_cell()
            return True
        if key == BACKSPACE_KEY:
            current = live_value
            if current is None:
                current = self._user_inputs[row][col] if self.puzzle.in_bounds(row, col) else ""
            if not current:
                self.navigator.move_to_prev_cell()
            # A non-empty field clears itself; the following input event syncs the buffer.
            return False
        if key in ARROW_STEPS:
            self.navigator.handle_arrow_key(key)
        return False

    def reset(self) -> None:
        self.is_composing = False
        self._user_inputs = self._empty_buffer()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _commit_with_overflow(self, row: int, col: int, value: str) -> str:
        first, rest = value[0], value[1:]
        self.update_user_input(row, col, first)

        target = self.navigator.next_cell(row, col)
        if target is None:
            LOGGER.debug("Dropping overflow %r at end of word from (%s,%s)", rest, row, col)
            return first
        self.navigator.set_selected_cell(target)
        self.update_user_input(target.row, target.col, rest)
        return first

    def _is_writable(self, row: int, col: int) -> bool:
        return self.puzzle.in_bounds(row, col) and not self.puzzle.is_blank(row, col)

    def _empty_buffer(self) -> List[List[str]]:
        size = self.puzzle.grid_size
        return [["" for _ in range(size)] for _ in range(size)]
