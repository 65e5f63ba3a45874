"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm and keyboard aggregation.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from ..models.game import LetterMark, best_mark


def evaluate_guess(secret: str, guess: str) -> List[LetterMark]:
    """
    Classify every letter of ``guess`` against ``secret``.

    Exact position matches are marked first and consume the secret's letter
    budget; remaining letters are PRESENT only while budget is left, so
    surplus repeats come back ABSENT from left to right.

    Both words must be uppercase and of equal length.
    """
    remaining = Counter(secret)
    marks: List[Optional[LetterMark]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            marks[i] = LetterMark.CORRECT
            remaining[letter] -= 1

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if marks[i] is not None:
            continue
        if remaining[letter] > 0:
            marks[i] = LetterMark.PRESENT
            remaining[letter] -= 1
        else:
            marks[i] = LetterMark.ABSENT

    return marks


def merge_keyboard(keyboard: Dict[str, LetterMark], guess: str, marks: Sequence[LetterMark]) -> None:
    """Upgrade keyboard marks in place. A letter's mark never goes down."""
    for letter, mark in zip(guess, marks):
        keyboard[letter] = best_mark(keyboard.get(letter, LetterMark.UNUSED), mark)
