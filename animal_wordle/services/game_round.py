"""
Game Round

State machine for a single playthrough: letter entry, guess submission,
keyboard tracking and the ONGOING -> WON/LOST transition.
"""

from typing import Dict, List, Optional

from ..config.game_settings import ALPHABET, MAX_ATTEMPTS
from ..models.game import GuessResult, LetterMark, RoundStatus
from .evaluator import evaluate_guess, merge_keyboard


class Round:
    """
    One round against a fixed secret.

    Invalid operations (appending past the word length, deleting from an
    empty buffer, submitting a short guess, anything after the round ended)
    are no-ops that report failure through their return value.
    """

    def __init__(self, secret: str, max_attempts: int = MAX_ATTEMPTS):
        self._secret = secret.upper()
        self._max_attempts = max_attempts
        self._buffer = ""
        self._history: List[GuessResult] = []
        self._status = RoundStatus.ONGOING
        self._keyboard: Dict[str, LetterMark] = {letter: LetterMark.UNUSED for letter in ALPHABET}

    @staticmethod
    def is_valid_letter(letter: str) -> bool:
        return isinstance(letter, str) and len(letter) == 1 and letter.isascii() and letter.isalpha()

    def append_letter(self, letter: str) -> bool:
        if len(self._buffer) < len(self._secret) and not self.is_over:
            self._buffer += letter.upper()
            return True
        return False

    def delete_letter(self) -> bool:
        if self._buffer:
            self._buffer = self._buffer[:-1]
            return True
        return False

    def can_submit(self) -> bool:
        return len(self._buffer) == len(self._secret) and not self.is_over

    def submit(self) -> Optional[GuessResult]:
        """Evaluate the buffered guess, or return None when it cannot be submitted."""
        if not self.can_submit():
            return None

        guess = self._buffer
        result = GuessResult(word=guess, marks=tuple(evaluate_guess(self._secret, guess)))

        self._history.append(result)
        merge_keyboard(self._keyboard, guess, result.marks)
        self._buffer = ""

        # A winning final attempt counts as a win
        if guess == self._secret:
            self._status = RoundStatus.WON
        elif len(self._history) >= self._max_attempts:
            self._status = RoundStatus.LOST

        return result

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def word_length(self) -> int:
        return len(self._secret)

    @property
    def current_guess(self) -> str:
        return self._buffer

    @property
    def current_attempt(self) -> int:
        return len(self._history)

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def status(self) -> RoundStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is not RoundStatus.ONGOING

    @property
    def won(self) -> bool:
        return self._status is RoundStatus.WON

    @property
    def guesses(self) -> List[GuessResult]:
        return list(self._history)

    @property
    def keyboard(self) -> Dict[str, LetterMark]:
        return dict(self._keyboard)
