"""Data models for the puzzle grid and its words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

from .constants import Bounds, Direction


class Position(NamedTuple):
    """A ``(row, col)`` coordinate on the grid."""

    row: int
    col: int


@dataclass(frozen=True)
class Cell:
    """Represents a grid cell with its answer glyph and word numbers."""

    row: int
    col: int
    letter: Optional[str] = None
    is_blank: bool = False
    across_number: Optional[int] = None
    down_number: Optional[int] = None

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


@dataclass(frozen=True)
class Word:
    """A placed word with its definition."""

    number: int
    text: str
    definition: str
    start_row: int
    start_col: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def start(self) -> Position:
        return Position(self.start_row, self.start_col)

    @property
    def cells(self) -> List[Position]:
        dr, dc = self.direction.step
        return [
            Position(self.start_row + dr * i, self.start_col + dc * i)
            for i in range(self.length)
        ]

    def contains(self, row: int, col: int) -> bool:
        if self.direction == Direction.ACROSS:
            return row == self.start_row and self.start_col <= col < self.start_col + self.length
        return col == self.start_col and self.start_row <= row < self.start_row + self.length


@dataclass(frozen=True)
class Puzzle:
    """A loaded puzzle: square grid plus across/down word lists.

    Instances are treated as read-only for the whole session; the engine
    components share a single instance.
    """

    grid_size: int
    grid: List[List[Cell]]
    across_words: List[Word] = field(default_factory=list)
    down_words: List[Word] = field(default_factory=list)
    total_words: int = 0

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.grid_size, cols=self.grid_size)

    @property
    def words(self) -> List[Word]:
        return [*self.across_words, *self.down_words]

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def is_blank(self, row: int, col: int) -> bool:
        return self.grid[row][col].is_blank

    def find_word(self, number: int, direction: Direction) -> Optional[Word]:
        words = self.across_words if direction == Direction.ACROSS else self.down_words
        for word in words:
            if word.number == number:
                return word
        return None

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> dict:
        return {
            "gridSize": self.grid_size,
            "grid": [
                [
                    {
                        "row": cell.row,
                        "col": cell.col,
                        "letter": cell.letter,
                        "isBlank": cell.is_blank,
                        "acrossNumber": cell.across_number,
                        "downNumber": cell.down_number,
                    }
                    for cell in row
                ]
                for row in self.grid
            ],
            "acrossWords": [_word_jsonable(word) for word in self.across_words],
            "downWords": [_word_jsonable(word) for word in self.down_words],
            "totalWords": self.total_words,
        }


def _word_jsonable(word: Word) -> dict:
    return {
        "number": word.number,
        "word": word.text,
        "definition": word.definition,
        "startRow": word.start_row,
        "startCol": word.start_col,
        "direction": word.direction.value,
    }
