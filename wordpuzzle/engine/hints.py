"""Hint panel state: definition list with optional chosung reveals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..core.constants import Direction
from ..core.models import Puzzle, Word
from ..data.chosung import get_chosung


@dataclass(frozen=True)
class HintEntry:
    word: Word
    chosung: Optional[str]
    selected: bool

    @property
    def number(self) -> int:
        return self.word.number

    @property
    def direction(self) -> Direction:
        return self.word.direction

    @property
    def definition(self) -> str:
        return self.word.definition


class HintPanel:
    """Lists the clues and remembers which chosung hints are revealed."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self._revealed: Set[Tuple[Direction, int]] = set()

    def toggle_chosung(self, word: Word) -> bool:
        """Flip the chosung reveal for ``word`` and return the new state."""

        key = (word.direction, word.number)
        if key in self._revealed:
            self._revealed.discard(key)
            return False
        self._revealed.add(key)
        return True

    def is_revealed(self, word: Word) -> bool:
        return (word.direction, word.number) in self._revealed

    def entries(self, selected_word: Optional[Word] = None) -> List[HintEntry]:
        result: List[HintEntry] = []
        for word in self.puzzle.words:
            selected = (
                selected_word is not None
                and selected_word.number == word.number
                and selected_word.direction == word.direction
            )
            chosung = get_chosung(word.text) if self.is_revealed(word) else None
            result.append(HintEntry(word=word, chosung=chosung, selected=selected))
        return result

    def reset(self) -> None:
        self._revealed.clear()
