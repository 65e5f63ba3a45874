"""
Animal and Statistics Data Models

Plain data carriers returned by the word and stats stores.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Animal:
    """An endangered animal whose name is the secret word."""
    name: str
    fun_fact: str
    endangered_reason: str


class Outcome(Enum):
    WIN = "win"
    LOSS = "loss"


@dataclass
class Totals:
    """Win/loss counters."""
    wins: int = 0
    losses: int = 0
