"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate_guess, merge_keyboard
from .game_round import Round
from .word_store import WordStore
from .stats_store import StatsStore
from .hint_service import HintService, get_hint_service, initialize_hint_service
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'evaluate_guess', 'merge_keyboard', 'Round',
    'WordStore', 'StatsStore',
    'HintService', 'get_hint_service', 'initialize_hint_service',
    'GameService', 'get_game_service', 'initialize_game_service'
]
