"""Shared fixtures: temporary SQLite stores, a stub hint service and a test app."""

from __future__ import annotations

import os
import random
import tempfile

# Keep test logs out of the working tree; must run before animal_wordle is imported.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="animal_wordle_logs_"))

import pytest

from animal_wordle import create_app
from animal_wordle.config import TestingConfig
from animal_wordle.db.database import create_session_factory
from animal_wordle.services import game_service as game_service_module
from animal_wordle.services import hint_service as hint_service_module
from animal_wordle.services.game_service import GameService, initialize_game_service
from animal_wordle.services.hint_service import HintService, initialize_hint_service
from animal_wordle.services.stats_store import StatsStore
from animal_wordle.services.word_store import WordStore


class StubHintService(HintService):
    """Hint service that never touches the network."""

    def __init__(self, hint: str = "💡 Hint: Diet: Carnivore", configured: bool = True):
        super().__init__(api_url="http://animals.test", api_key="k" * 20 if configured else "", rng=random.Random(0))
        self.hint = hint
        self.requested: list[str] = []

    def get_hint(self, animal_name: str) -> str:
        self.requested.append(animal_name)
        return self.hint if self.is_configured() else self.fallback_hint()


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'wordle_test.db'}"


@pytest.fixture
def stores(database_url):
    engine, session_factory = create_session_factory(database_url)
    word_store = WordStore(engine, session_factory)
    stats_store = StatsStore(engine, session_factory)
    word_store.initialize()
    stats_store.initialize()
    yield word_store, stats_store
    engine.dispose()


@pytest.fixture
def stub_hint_class():
    return StubHintService


@pytest.fixture
def stub_hints() -> StubHintService:
    return StubHintService()


@pytest.fixture
def game_service(stores, stub_hints) -> GameService:
    word_store, stats_store = stores
    return GameService(word_store, stats_store, hint_service=stub_hints, rng=random.Random(7))


@pytest.fixture
def test_config(database_url):
    class _Config(TestingConfig):
        DATABASE_URL = database_url

    return _Config


@pytest.fixture
def app_and_socketio(test_config, monkeypatch):
    monkeypatch.setattr(game_service_module, "_game_service", None)
    monkeypatch.setattr(hint_service_module, "_hint_service", None)

    hint_service = initialize_hint_service(test_config)
    service = initialize_game_service(test_config, hint_service)
    app, socketio = create_app(test_config)
    yield app, socketio
    service.word_store.engine.dispose()


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()
