"""Pretty-print helpers for puzzle sessions."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..engine.session import CellView, PuzzleSession


BLANK_SYMBOL = "##"
EMPTY_SYMBOL = "."


def cell_symbol(view: CellView) -> str:
    if view.blank:
        return BLANK_SYMBOL
    text = view.value or EMPTY_SYMBOL
    if view.selected:
        return f"[{text}]"
    if view.highlighted:
        return f"({text})"
    if view.correct is False:
        return f"!{text}"
    return text


def format_board(session: PuzzleSession) -> str:
    size = session.puzzle.grid_size
    header_cells = [f"{c:>4}" for c in range(size)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (4 * size))
    for r in range(size):
        row_render = "".join(f"{cell_symbol(session.cell_view(r, c)):>4}" for c in range(size))
        lines.append(f"{r:>2} |{row_render}")
    return "\n".join(lines)


def format_hints(session: PuzzleSession) -> str:
    lines = []
    for direction, title in ((Direction.ACROSS, "Across"), (Direction.DOWN, "Down")):
        lines.append(f"--- {title} ---")
        for entry in session.hint_entries():
            if entry.direction != direction:
                continue
            marker = ">" if entry.selected else " "
            line = f"{marker} {entry.number:>2}. {entry.definition}"
            if entry.chosung:
                line += f"  [{entry.chosung}]"
            lines.append(line)
    return "\n".join(lines)


def print_session(session: PuzzleSession, *, label: str | None = None, stream=None) -> None:
    """Print the board followed by the hint list."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(session), file=stream)
    print(file=stream)
    print(format_hints(session), file=stream)
