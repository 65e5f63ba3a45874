"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class LetterMark(Enum):
    """Per-letter evaluation result, ordered by keyboard priority."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"

    @property
    def priority(self) -> int:
        return _MARK_PRIORITY[self]


_MARK_PRIORITY = {
    LetterMark.UNUSED: 0,
    LetterMark.ABSENT: 1,
    LetterMark.PRESENT: 2,
    LetterMark.CORRECT: 3,
}


def best_mark(current: LetterMark, new: LetterMark) -> LetterMark:
    """Return whichever mark has the higher keyboard priority."""
    return new if new.priority > current.priority else current


class RoundStatus(Enum):
    """Round lifecycle. WON and LOST are terminal."""
    ONGOING = "ONGOING"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class GuessResult:
    """A submitted guess and its per-letter marks."""
    word: str
    marks: tuple

    def mark_at(self, index: int) -> LetterMark:
        if 0 <= index < len(self.marks):
            return self.marks[index]
        return LetterMark.UNUSED

    def to_pairs(self) -> List[List[str]]:
        return [[letter, mark.value] for letter, mark in zip(self.word, self.marks)]


@dataclass
class GameState:
    """Client-facing round snapshot. Animal details only appear once the round is over."""
    game_id: str
    word_length: int
    current_attempt: int
    max_attempts: int
    current_guess: str
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[List[str]]]
    keyboard: Dict[str, str]
    answer: Optional[str] = None
    fun_fact: Optional[str] = None
    endangered_reason: Optional[str] = None
    totals: Dict[str, int] = field(default_factory=dict)
