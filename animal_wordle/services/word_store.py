"""
Word Store

Serves endangered animals from the local SQLite database. The name of each
animal is a secret word; the fun fact and endangered reason are revealed when
a round ends.
"""

import random
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from ..config.game_settings import ANIMAL_LIST
from ..db.database import init_database
from ..db.models import AnimalRecord, GameStats
from ..models.animal import Animal
from ..utils.game_logger import game_logger


def _to_animal(record: AnimalRecord) -> Animal:
    return Animal(name=record.name, fun_fact=record.fun_fact, endangered_reason=record.endangered_reason)


class WordStore:
    """Read access to the animal table, seeded on first start."""

    def __init__(self, engine, session_factory, seed_animals: Optional[List[Dict[str, str]]] = None):
        self.engine = engine
        self.session_factory = session_factory
        self.seed_animals = ANIMAL_LIST if seed_animals is None else seed_animals

    def initialize(self) -> int:
        """
        Create tables and insert the seed animals when the table is empty.

        Returns:
            int: Number of animals inserted
        """
        init_database(self.engine)

        with self.session_factory() as session:
            count = session.scalar(select(func.count()).select_from(AnimalRecord))
            if count:
                return 0

            try:
                for entry in self.seed_animals:
                    session.add(AnimalRecord(**entry))
                    session.add(GameStats(animal_name=entry['name'], wins=0, losses=0))
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                game_logger.logger.error(f"Error initializing animal data: {e}")
                raise

        game_logger.logger.info(f"Animal data initialized in database ({len(self.seed_animals)} animals)")
        return len(self.seed_animals)

    def get_random_entry(self, rng: random.Random) -> Optional[Animal]:
        """Pick an animal with the caller's random source; None when the table is empty."""
        animals = self.get_all()
        if not animals:
            return None
        return rng.choice(animals)

    def get_by_name(self, name: str) -> Optional[Animal]:
        if not name:
            return None
        with self.session_factory() as session:
            record = session.scalar(select(AnimalRecord).where(AnimalRecord.name == name.strip().upper()))
            return _to_animal(record) if record else None

    def get_all(self) -> List[Animal]:
        # Ordered by id so seeded selection is reproducible
        with self.session_factory() as session:
            records = session.scalars(select(AnimalRecord).order_by(AnimalRecord.id)).all()
            return [_to_animal(record) for record in records]
