"""Resolve which word a grid cell belongs to."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.constants import Direction
from ..core.models import Word


def find_word_at_cell(
    row: int,
    col: int,
    across_words: Sequence[Word],
    down_words: Sequence[Word],
    current_direction: Optional[Direction] = None,
) -> Optional[Word]:
    """Return the active word for ``(row, col)``.

    ``current_direction`` is the direction of the word that was active when
    the same cell was clicked again. When given, the word running the other
    way wins if one exists, so repeated clicks on an intersection alternate
    between across and down.

    Without a toggle request, a cell that starts exactly one of its two words
    selects that word; otherwise across wins over down. Returns ``None`` when
    no word covers the cell.
    """

    across_word: Optional[Word] = None
    down_word: Optional[Word] = None
    is_across_start = False
    is_down_start = False

    for word in across_words:
        if row == word.start_row and word.start_col <= col < word.start_col + word.length:
            across_word = word
            is_across_start = col == word.start_col
            break

    for word in down_words:
        if col == word.start_col and word.start_row <= row < word.start_row + word.length:
            down_word = word
            is_down_start = row == word.start_row
            break

    if current_direction == Direction.ACROSS and down_word:
        return down_word
    if current_direction == Direction.DOWN and across_word:
        return across_word

    if is_down_start and not is_across_start and down_word:
        return down_word
    if is_across_start and not is_down_start and across_word:
        return across_word

    return across_word or down_word


def is_cell_in_word(row: int, col: int, word: Optional[Word]) -> bool:
    """Return True if ``(row, col)`` lies within ``word``'s span."""

    if word is None:
        return False
    return word.contains(row, col)


def word_starting_at(row: int, col: int, words: Iterable[Word]) -> Optional[Word]:
    for word in words:
        if word.start_row == row and word.start_col == col:
            return word
    return None
