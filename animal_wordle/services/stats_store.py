"""
Stats Store

Win/loss counters per animal plus overall totals, kept in SQLite.
"""

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError

from ..db.database import init_database
from ..db.models import GameStats, GlobalStats
from ..models.animal import Outcome, Totals
from ..utils.game_logger import game_logger


class StatsStore:
    """Counter updates happen only after a round reaches a terminal state."""

    def __init__(self, engine, session_factory):
        self.engine = engine
        self.session_factory = session_factory

    def initialize(self) -> None:
        init_database(self.engine)
        with self.session_factory() as session:
            if session.get(GlobalStats, 1) is None:
                session.add(GlobalStats(id=1, total_wins=0, total_losses=0))
                session.commit()

    def _global_row(self, session) -> GlobalStats:
        row = session.get(GlobalStats, 1)
        if row is None:
            row = GlobalStats(id=1, total_wins=0, total_losses=0)
            session.add(row)
        return row

    def record_result(self, key: str, outcome: Outcome) -> None:
        """Increment the global and per-key counter for ``outcome`` in one transaction."""
        key = key.strip().upper()
        with self.session_factory() as session:
            try:
                global_row = self._global_row(session)
                row = session.scalar(select(GameStats).where(GameStats.animal_name == key))
                if row is None:
                    row = GameStats(animal_name=key, wins=0, losses=0)
                    session.add(row)

                if outcome is Outcome.WIN:
                    global_row.total_wins = (global_row.total_wins or 0) + 1
                    row.wins = (row.wins or 0) + 1
                else:
                    global_row.total_losses = (global_row.total_losses or 0) + 1
                    row.losses = (row.losses or 0) + 1

                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                game_logger.logger.error(f"Error saving {outcome.value} for {key}: {e}")
                raise

        game_logger.logger.info(f"{outcome.value.capitalize()} recorded for {key}")

    def get_totals(self, key: str) -> Totals:
        with self.session_factory() as session:
            row = session.scalar(select(GameStats).where(GameStats.animal_name == key.strip().upper()))
            if row is None:
                return Totals()
            return Totals(wins=row.wins or 0, losses=row.losses or 0)

    def get_global_totals(self) -> Totals:
        with self.session_factory() as session:
            row = session.get(GlobalStats, 1)
            if row is None:
                return Totals()
            return Totals(wins=row.total_wins or 0, losses=row.total_losses or 0)

    def get_all_totals(self) -> dict:
        with self.session_factory() as session:
            rows = session.scalars(select(GameStats).order_by(GameStats.animal_name)).all()
            return {row.animal_name: Totals(wins=row.wins or 0, losses=row.losses or 0) for row in rows}

    def reset_all(self) -> None:
        with self.session_factory() as session:
            try:
                self._global_row(session)
                session.execute(update(GlobalStats).values(total_wins=0, total_losses=0))
                session.execute(update(GameStats).values(wins=0, losses=0))
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                game_logger.logger.error(f"Error resetting scores: {e}")
                raise

        game_logger.logger.info("All scores reset.")
