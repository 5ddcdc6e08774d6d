"""Interaction engine for Korean crossword puzzles.

This package exposes the public API surface via:

- ``wordpuzzle.engine.session.PuzzleSession``: selection, input and completion for one puzzle.
- ``wordpuzzle.data.loader`` helpers: turn backend payloads into ``Puzzle`` objects.
- ``wordpuzzle.io.puzzle_client.PuzzleClient``: fetches freshly generated puzzles.
"""

from .core.constants import Direction
from .core.models import Cell, Position, Puzzle, Word
from .data.loader import load_puzzle, puzzle_from_payload
from .engine.session import PuzzleSession
from .io.puzzle_client import PuzzleClient

__all__ = [
    "Cell",
    "Direction",
    "Position",
    "Puzzle",
    "PuzzleClient",
    "PuzzleSession",
    "Word",
    "load_puzzle",
    "puzzle_from_payload",
]

__version__ = "0.1.0"
