"""Session object tying navigation, input and derived views together.

One :class:`PuzzleSession` is created per loaded puzzle and discarded when the
puzzle is replaced. Every user event goes through a session method, which
delegates to the navigator or the input engine and then re-evaluates
completion. Views (highlight, correctness, completion) are computed from the
current state on every read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..core.constants import Direction
from ..core.models import Position, Puzzle, Word
from ..utils.logger import get_logger
from .evaluation import check_cell_correct, check_puzzle_completion
from .hints import HintEntry, HintPanel
from .input import PuzzleInput
from .navigation import PuzzleNavigator
from .resolver import is_cell_in_word


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class CellView:
    """Presentation state of one cell."""

    row: int
    col: int
    blank: bool
    value: str
    selected: bool
    highlighted: bool
    correct: Optional[bool]
    across_number: Optional[int] = None
    down_number: Optional[int] = None


class PuzzleSession:
    """Interactive state for a single puzzle."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self.navigator = PuzzleNavigator(puzzle)
        self.input = PuzzleInput(puzzle, self.navigator)
        self.hint_panel = HintPanel(puzzle)
        self.on_complete: Optional[Callable[[], None]] = None
        self.on_word_select: Optional[Callable[[Optional[Word]], None]] = None
        self._was_complete = False
        self.navigator.on_word_select = self._word_selected

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def selected_cell(self) -> Optional[Position]:
        return self.navigator.selected_cell

    @property
    def selected_word(self) -> Optional[Word]:
        return self.navigator.selected_word

    @property
    def user_inputs(self) -> List[List[str]]:
        return self.input.user_inputs

    @property
    def is_composing(self) -> bool:
        return self.input.is_composing

    @property
    def is_complete(self) -> bool:
        return check_puzzle_completion(self.input.user_inputs, self.puzzle.grid)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def handle_cell_click(self, row: int, col: int) -> None:
        self.navigator.handle_cell_click(row, col)

    def handle_arrow_key(self, key: str) -> None:
        self.navigator.handle_arrow_key(key)

    def move_to_next_cell(self) -> None:
        self.navigator.move_to_next_cell()

    def move_to_prev_cell(self) -> None:
        self.navigator.move_to_prev_cell()

    def select_word_from_hint(self, word: Word) -> None:
        self.navigator.select_word_from_hint(word)

    def click_word_number(self, row: int, col: int, direction: Direction) -> None:
        self.navigator.select_word_at_number(row, col, direction)

    def set_selected_cell(self, cell: Optional[Tuple[int, int]]) -> None:
        self.navigator.set_selected_cell(cell)

    def set_selected_word(self, word: Optional[Word]) -> None:
        self.navigator.set_selected_word(word)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def update_user_input(self, row: int, col: int, value: str) -> None:
        self.input.update_user_input(row, col, value)
        self._refresh_completion()

    def handle_input(self, row: int, col: int, value: str) -> str:
        shown = self.input.handle_input(row, col, value)
        self._refresh_completion()
        return shown

    def handle_composition_start(self) -> None:
        self.input.handle_composition_start()

    def handle_composition_end(self, row: int, col: int, value: str) -> str:
        shown = self.input.handle_composition_end(row, col, value)
        self._refresh_completion()
        return shown

    def handle_key_down(self, key: str, row: int, col: int, live_value: Optional[str] = None) -> bool:
        return self.input.handle_key_down(key, row, col, live_value)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    def is_highlighted(self, row: int, col: int) -> bool:
        return is_cell_in_word(row, col, self.navigator.selected_word)

    def cell_correctness(self, row: int, col: int) -> Optional[bool]:
        return check_cell_correct(self.input.value_at(row, col), self.puzzle.cell(row, col).letter)

    def cell_view(self, row: int, col: int) -> CellView:
        cell = self.puzzle.cell(row, col)
        if cell.is_blank:
            return CellView(row=row, col=col, blank=True, value="", selected=False,
                            highlighted=False, correct=None)
        return CellView(
            row=row,
            col=col,
            blank=False,
            value=self.input.value_at(row, col),
            selected=self.navigator.selected_cell == (row, col),
            highlighted=self.is_highlighted(row, col),
            correct=self.cell_correctness(row, col),
            across_number=cell.across_number,
            down_number=cell.down_number,
        )

    def hint_entries(self) -> List[HintEntry]:
        return self.hint_panel.entries(self.navigator.selected_word)

    def reset(self) -> None:
        self.navigator.reset()
        self.input.reset()
        self.hint_panel.reset()
        self._was_complete = False

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    def _refresh_completion(self) -> None:
        complete = self.is_complete
        if complete and not self._was_complete:
            LOGGER.info("Puzzle completed")
            if self.on_complete is not None:
                self.on_complete()
        self._was_complete = complete

    def _word_selected(self, word: Optional[Word]) -> None:
        if self.on_word_select is not None:
            self.on_word_select(word)
