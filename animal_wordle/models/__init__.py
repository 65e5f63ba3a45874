"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GuessResult, LetterMark, RoundStatus, best_mark
from .animal import Animal, Outcome, Totals

__all__ = ['GameState', 'GuessResult', 'LetterMark', 'RoundStatus', 'best_mark',
           'Animal', 'Outcome', 'Totals']
