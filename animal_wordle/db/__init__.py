"""
Database Package

SQLAlchemy models and session helpers for the local SQLite store.
"""

from .database import create_session_factory, init_database
from .models import AnimalRecord, Base, GameStats, GlobalStats

__all__ = ['create_session_factory', 'init_database',
           'AnimalRecord', 'Base', 'GameStats', 'GlobalStats']
