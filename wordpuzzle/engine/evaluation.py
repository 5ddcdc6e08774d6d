"""Correctness and completion checks over the input buffer."""

from __future__ import annotations

from typing import Optional, Sequence

from ..core.models import Cell


def check_cell_correct(user_input: str, answer: Optional[str]) -> Optional[bool]:
    """Compare a cell's input against its answer.

    Returns ``None`` when the cell has no answer or nothing (besides
    whitespace) was entered, otherwise whether the trimmed input matches.
    """

    if answer is None:
        return None
    trimmed = (user_input or "").strip()
    if not trimmed:
        return None
    return trimmed == answer


def check_puzzle_completion(
    user_inputs: Sequence[Sequence[str]],
    grid: Sequence[Sequence[Cell]],
) -> bool:
    """Return True when every lettered cell holds exactly its answer.

    An untouched buffer never counts as complete: at least one lettered cell
    must carry input. Blank cells are ignored whatever they hold.
    """

    has_any_input = False
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell.is_blank or cell.letter is None:
                continue
            user_input = _buffered(user_inputs, r, c)
            if user_input:
                has_any_input = True
            if user_input != cell.letter:
                return False
    return has_any_input


def _buffered(user_inputs: Sequence[Sequence[str]], row: int, col: int) -> str:
    if row >= len(user_inputs) or col >= len(user_inputs[row]):
        return ""
    return user_inputs[row][col] or ""
