"""
Database models for the animal word list and win/loss statistics.
"""
from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class AnimalRecord(Base):
    """Seeded endangered animal; ``name`` doubles as the secret word."""
    __tablename__ = 'animals'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(10), unique=True, nullable=False)
    fun_fact = Column(Text, nullable=False)
    endangered_reason = Column(Text, nullable=False)

    def __repr__(self):
        return f"<AnimalRecord(id={self.id}, name='{self.name}')>"


class GameStats(Base):
    """Per-animal win/loss counters."""
    __tablename__ = 'game_stats'

    id = Column(Integer, primary_key=True, autoincrement=True)
    animal_name = Column(String(10), unique=True, nullable=False)
    wins = Column(Integer, nullable=False, default=0)
    losses = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<GameStats(animal_name='{self.animal_name}', wins={self.wins}, losses={self.losses})>"


class GlobalStats(Base):
    """Single-row table holding overall totals."""
    __tablename__ = 'global_stats'
    __table_args__ = (CheckConstraint('id = 1', name='single_row'),)

    id = Column(Integer, primary_key=True)
    total_wins = Column(Integer, nullable=False, default=0)
    total_losses = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<GlobalStats(total_wins={self.total_wins}, total_losses={self.total_losses})>"
