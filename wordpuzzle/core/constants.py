"""Shared constants and enumerations for the puzzle player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        """Unit ``(row, col)`` step along this direction."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)


ARROW_STEPS: Dict[str, Tuple[int, int]] = {
    "ArrowUp": (-1, 0),
    "ArrowDown": (1, 0),
    "ArrowLeft": (0, -1),
    "ArrowRight": (0, 1),
}

SPACE_KEY = " "
BACKSPACE_KEY = "Backspace"

MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 30
MIN_WORD_COUNT = 3
MAX_WORD_COUNT = 50


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
