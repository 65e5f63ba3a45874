"""
Game Service

Manages live rounds by game id, picks secrets from the word store and
records finished rounds in the stats store.
"""

import random
import time
import uuid
from dataclasses import asdict
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..config.game_settings import MAX_ATTEMPTS
from ..db.database import create_session_factory
from ..models.animal import Animal, Outcome
from ..models.game import GameState, GuessResult
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_name
from .game_round import Round
from .hint_service import HintService
from .stats_store import StatsStore
from .word_store import WordStore

ENTER_KEYS = {"ENTER", "RETURN"}
DELETE_KEYS = {"DEL", "DELETE", "BACKSPACE"}

GAME_OVER_HINT = "Game is over!"

# Finished rounds are kept this long for state reads, then evicted
FINISHED_GAME_TTL_SECONDS = 3600


class GameService:
    """
    Core game service managing multiple rounds.

    This class handles:
    - Round management with unique game IDs
    - Secret selection through an injected random source
    - Letter entry, deletion and guess submission
    - Recording each finished round exactly once
    - Game state snapshots that hide the answer until the round ends
    """

    def __init__(self,
                 word_store: WordStore,
                 stats_store: StatsStore,
                 hint_service: Optional[HintService] = None,
                 rng: Optional[random.Random] = None,
                 max_attempts: int = MAX_ATTEMPTS,
                 finished_ttl: float = FINISHED_GAME_TTL_SECONDS,
                 clock=time.monotonic):
        self.word_store = word_store
        self.stats_store = stats_store
        self.hint_service = hint_service
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.finished_ttl = finished_ttl
        self.clock = clock
        self.games: Dict[str, Dict] = {}

    def create_new_game(self, animal_name: Optional[str] = None) -> Optional[str]:
        """
        Creates a new round with a random or named animal.

        Args:
            animal_name: Specific animal to play; random when omitted

        Returns:
            str: Unique game ID, or None when no animal could be selected
        """
        if animal_name:
            animal = self.word_store.get_by_name(animal_name)
        else:
            animal = self.word_store.get_random_entry(self.rng)

        if animal is None:
            return None

        self.cleanup_finished_games()

        game_id = str(uuid.uuid4())
        self.games[game_id] = {
            "animal": animal,
            "round": Round(animal.name, self.max_attempts),
            "recorded": False,
            "finished_at": None,
        }
        return game_id

    def cleanup_finished_games(self) -> int:
        """
        Evicts rounds that ended more than ``finished_ttl`` seconds ago.

        Rounds whose result has not been stored yet are kept.

        Returns:
            int: Number of rounds evicted
        """
        now = self.clock()
        expired = [
            game_id for game_id, game in self.games.items()
            if game["recorded"] and game["finished_at"] is not None
            and now - game["finished_at"] >= self.finished_ttl
        ]
        for game_id in expired:
            del self.games[game_id]

        if expired:
            game_logger.logger.info(f"GameService: evicted {len(expired)} finished games")
        return len(expired)

    def has_game(self, game_id: str) -> bool:
        return game_id in self.games

    def get_round(self, game_id: str) -> Optional[Round]:
        game = self.games.get(game_id)
        return game["round"] if game else None

    def get_animal(self, game_id: str) -> Optional[Animal]:
        game = self.games.get(game_id)
        return game["animal"] if game else None

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current state for a round (without revealing the answer
        unless the round is over).
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        game_round: Round = game["round"]
        animal: Animal = game["animal"]

        if game_round.is_over and not game["recorded"]:
            self._record_outcome(game_id)

        state = GameState(
            game_id=game_id,
            word_length=game_round.word_length,
            current_attempt=game_round.current_attempt,
            max_attempts=game_round.max_attempts,
            current_guess=game_round.current_guess,
            status=game_round.status.value,
            game_over=game_round.is_over,
            won=game_round.won,
            guesses=[result.word for result in game_round.guesses],
            guess_results=[result.to_pairs() for result in game_round.guesses],
            keyboard={letter: mark.value for letter, mark in game_round.keyboard.items()},
            totals=asdict(self.stats_store.get_global_totals()),
        )

        if game_round.is_over:
            state.answer = animal.name
            state.fun_fact = animal.fun_fact
            state.endangered_reason = animal.endangered_reason

        return state

    def type_letter(self, game_id: str, letter: str) -> bool:
        game_round = self.get_round(game_id)
        if game_round is None or not Round.is_valid_letter(letter):
            return False
        return game_round.append_letter(letter)

    def delete_letter(self, game_id: str) -> bool:
        game_round = self.get_round(game_id)
        if game_round is None:
            return False
        return game_round.delete_letter()

    def can_submit(self, game_id: str) -> bool:
        game_round = self.get_round(game_id)
        return game_round is not None and game_round.can_submit()

    def submit_guess(self, game_id: str) -> Optional[GuessResult]:
        """Submit the buffered letters; None when the round cannot accept a guess."""
        game_round = self.get_round(game_id)
        if game_round is None:
            return None

        result = game_round.submit()
        if result is not None and game_round.is_over:
            self._record_outcome(game_id)
        return result

    def submit_word(self, game_id: str, word: str) -> Optional[GuessResult]:
        """
        Replace the buffer with a whole word and submit it.

        The buffer is left untouched when ``word`` has the wrong length or
        contains non-letters.
        """
        game_round = self.get_round(game_id)
        word = normalize_name(word)
        if game_round is None or game_round.is_over:
            return None
        if len(word) != game_round.word_length or not all(Round.is_valid_letter(c) for c in word):
            return None

        while game_round.delete_letter():
            pass
        for letter in word:
            game_round.append_letter(letter)
        return self.submit_guess(game_id)

    def press_key(self, game_id: str, key: str) -> bool:
        """
        Apply a keyboard key: ENTER submits, DEL/BACKSPACE deletes, a single
        letter is typed. Keys are ignored once the round is over.

        Returns:
            bool: True when the key changed the round
        """
        game_round = self.get_round(game_id)
        if game_round is None or game_round.is_over or not isinstance(key, str):
            return False

        normalized = key.strip().upper()
        if normalized in ENTER_KEYS:
            return self.submit_guess(game_id) is not None
        if normalized in DELETE_KEYS:
            return self.delete_letter(game_id)
        if len(normalized) == 1:
            return self.type_letter(game_id, normalized)
        return False

    def get_hint(self, game_id: str) -> Optional[str]:
        """Hint for the round's animal; None for an unknown game."""
        game = self.games.get(game_id)
        if game is None:
            return None
        if game["round"].is_over:
            return GAME_OVER_HINT
        if self.hint_service is None:
            return None
        return self.hint_service.get_hint(game["animal"].name)

    def _record_outcome(self, game_id: str) -> None:
        game = self.games[game_id]
        if game["recorded"]:
            return

        game_round: Round = game["round"]
        if game["finished_at"] is None:
            game["finished_at"] = self.clock()

        outcome = Outcome.WIN if game_round.won else Outcome.LOSS
        try:
            self.stats_store.record_result(game["animal"].name, outcome)
        except SQLAlchemyError as e:
            # Left unrecorded; the next state read retries the write
            game_logger.logger.error(f"GameService: failed to record {outcome.value} for game {game_id}: {e}")
            return
        game["recorded"] = True

        game_logger.log_game_event(
            game_id, 'game_won' if game_round.won else 'game_lost', 'system',
            attempts_used=game_round.current_attempt, target_word=game_round.secret
        )

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a round from memory.

        Returns:
            bool: True if the game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class, hint_service: Optional[HintService] = None) -> GameService:
    """Initialize the global game service, its database and seed data."""
    global _game_service

    engine, session_factory = create_session_factory(config_class.DATABASE_URL)
    word_store = WordStore(engine, session_factory)
    stats_store = StatsStore(engine, session_factory)
    word_store.initialize()
    stats_store.initialize()

    _game_service = GameService(
        word_store,
        stats_store,
        hint_service=hint_service,
        rng=random.Random(config_class.RANDOM_SEED),
    )
    return _game_service
