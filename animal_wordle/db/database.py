"""
Database connection and session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base


def create_session_factory(database_url):
    """
    Build an engine and session factory for ``database_url``.

    In-memory SQLite shares one connection so every session sees the same tables.
    """
    engine_kwargs = {'echo': False}
    if database_url.startswith('sqlite'):
        engine_kwargs['connect_args'] = {'check_same_thread': False}
        if ':memory:' in database_url or database_url in ('sqlite://', 'sqlite:///'):
            engine_kwargs['poolclass'] = StaticPool

    engine = create_engine(database_url, **engine_kwargs)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return engine, session_factory


def init_database(engine):
    """Initialize database tables."""
    Base.metadata.create_all(engine)
