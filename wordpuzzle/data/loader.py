"""Build :class:`Puzzle` objects from backend payloads.

The backend answers ``/puzzle/generate`` with a camelCase JSON document::

    {
      "gridSize": 15,
      "grid": [[{"row", "col", "letter", "isBlank", "acrossNumber", "downNumber"}, ...], ...],
      "acrossWords": [{"number", "word", "definition", "startRow", "startCol", "direction"}, ...],
      "downWords": [...],
      "totalWords": 10
    }

The loader converts it into immutable model objects and checks the grid/word
integrity rules once, so the interaction engine can trust its input.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..core.constants import Direction
from ..core.exceptions import PuzzleFormatError
from ..core.models import Cell, Puzzle, Word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def load_puzzle(path: Path | str) -> Puzzle:
    """Read a puzzle payload from a UTF-8 JSON file."""

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise PuzzleFormatError(f"Puzzle file {path} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PuzzleFormatError(f"Puzzle file {path} is not valid JSON: {exc}") from exc
    puzzle = puzzle_from_payload(payload)
    LOGGER.info("Loaded %sx%s puzzle with %s words from %s",
                puzzle.grid_size, puzzle.grid_size, len(puzzle.words), path)
    return puzzle


def puzzle_from_payload(payload: Mapping[str, Any]) -> Puzzle:
    """Convert a backend payload into a validated :class:`Puzzle`."""

    if not isinstance(payload, Mapping):
        raise PuzzleFormatError("Puzzle payload must be a JSON object")

    grid_size = _require(payload, "gridSize")
    if not isinstance(grid_size, int) or grid_size <= 0:
        raise PuzzleFormatError(f"Invalid gridSize: {grid_size!r}")

    grid = _parse_grid(_require(payload, "grid"), grid_size)
    across_words = [_parse_word(raw) for raw in payload.get("acrossWords") or []]
    down_words = [_parse_word(raw) for raw in payload.get("downWords") or []]
    total_words = payload.get("totalWords")
    if total_words is None:
        total_words = len(across_words) + len(down_words)

    puzzle = Puzzle(
        grid_size=grid_size,
        grid=grid,
        across_words=across_words,
        down_words=down_words,
        total_words=total_words,
    )
    _check_word_lists(puzzle)
    _check_words_match_grid(puzzle)
    return puzzle


def _require(raw: Mapping[str, Any], key: str) -> Any:
    if key not in raw:
        raise PuzzleFormatError(f"Missing required key '{key}'")
    return raw[key]


def _parse_grid(raw_grid: Any, grid_size: int) -> List[List[Cell]]:
    if not isinstance(raw_grid, list) or len(raw_grid) != grid_size:
        raise PuzzleFormatError(f"Grid must have {grid_size} rows")

    grid: List[List[Cell]] = []
    for r, raw_row in enumerate(raw_grid):
        if not isinstance(raw_row, list) or len(raw_row) != grid_size:
            raise PuzzleFormatError(f"Grid row {r} must have {grid_size} cells")
        row: List[Cell] = []
        for c, raw_cell in enumerate(raw_row):
            row.append(_parse_cell(raw_cell, r, c))
        grid.append(row)
    return grid


def _parse_cell(raw: Dict[str, Any], row: int, col: int) -> Cell:
    if not isinstance(raw, Mapping):
        raise PuzzleFormatError(f"Grid cell ({row},{col}) must be an object")
    letter = raw.get("letter") or None
    if letter is not None and not isinstance(letter, str):
        raise PuzzleFormatError(f"Cell ({row},{col}) letter must be a string: {letter!r}")
    # Row/col are positional; the payload copies are informative only.
    cell = Cell(
        row=row,
        col=col,
        letter=letter,
        is_blank=bool(raw.get("isBlank", False)),
        across_number=_optional_number(raw, "acrossNumber", row, col),
        down_number=_optional_number(raw, "downNumber", row, col),
    )
    if cell.is_blank and (
        cell.letter is not None or cell.across_number is not None or cell.down_number is not None
    ):
        raise PuzzleFormatError(f"Blank cell at ({row},{col}) carries a letter or word number")
    if cell.letter is not None and len(cell.letter) != 1:
        raise PuzzleFormatError(f"Cell ({row},{col}) letter must be a single character: {cell.letter!r}")
    return cell


def _optional_number(raw: Mapping[str, Any], key: str, row: int, col: int) -> Optional[int]:
    value = raw.get(key)
    if value is None:
        return None
    # bool is an int subclass but never a word number.
    if isinstance(value, bool) or not isinstance(value, int):
        raise PuzzleFormatError(f"Cell ({row},{col}) {key} must be an integer: {value!r}")
    return value


def _parse_word(raw: Dict[str, Any]) -> Word:
    if not isinstance(raw, Mapping):
        raise PuzzleFormatError("Word entries must be objects")
    try:
        direction = Direction(str(_require(raw, "direction")).upper())
    except ValueError as exc:
        raise PuzzleFormatError(f"Unknown word direction: {raw.get('direction')!r}") from exc
    text = _require(raw, "word")
    if not isinstance(text, str) or not text:
        raise PuzzleFormatError(f"Word text must be a non-empty string: {text!r}")
    definition = raw.get("definition") or ""
    if not isinstance(definition, str):
        raise PuzzleFormatError(f"Word '{text}' has a non-string definition: {definition!r}")
    try:
        number = int(_require(raw, "number"))
        start_row = int(_require(raw, "startRow"))
        start_col = int(_require(raw, "startCol"))
    except (TypeError, ValueError) as exc:
        raise PuzzleFormatError(f"Word '{text}' has a non-integer number or start: {exc}") from exc
    return Word(
        number=number,
        text=text,
        definition=definition,
        start_row=start_row,
        start_col=start_col,
        direction=direction,
    )


def _check_word_lists(puzzle: Puzzle) -> None:
    for word in puzzle.across_words:
        if word.direction != Direction.ACROSS:
            raise PuzzleFormatError(f"Word {word.number} '{word.text}' listed as across but runs {word.direction.value}")
    for word in puzzle.down_words:
        if word.direction != Direction.DOWN:
            raise PuzzleFormatError(f"Word {word.number} '{word.text}' listed as down but runs {word.direction.value}")


def _check_words_match_grid(puzzle: Puzzle) -> None:
    for word in puzzle.words:
        for index, (row, col) in enumerate(word.cells):
            if not puzzle.in_bounds(row, col):
                raise PuzzleFormatError(f"Word '{word.text}' extends outside the grid at ({row},{col})")
            cell = puzzle.cell(row, col)
            if cell.is_blank:
                raise PuzzleFormatError(f"Word '{word.text}' overlaps blank cell ({row},{col})")
            if cell.letter != word.text[index]:
                raise PuzzleFormatError(
                    f"Letter conflict at ({row},{col}): grid has {cell.letter!r}, "
                    f"word '{word.text}' expects {word.text[index]!r}"
                )


__all__ = ["load_puzzle", "puzzle_from_payload"]
