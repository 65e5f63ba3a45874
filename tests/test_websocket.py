"""WebSocket key input and hint delivery through Flask-SocketIO's test client."""

from __future__ import annotations

import pytest

from animal_wordle.services import hint_service as hint_service_module
from animal_wordle.services.game_service import get_game_service


def _events(socket_client, name: str) -> list[dict]:
    return [event["args"][0] for event in socket_client.get_received() if event["name"] == name]


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    client = socketio.test_client(app)
    assert client.is_connected()
    yield client
    if client.is_connected():
        client.disconnect()


def test_join_game_sends_state(socket_client) -> None:
    game_id = get_game_service().create_new_game("LEMUR")

    socket_client.emit("join_game", {"game_id": game_id})
    updates = _events(socket_client, "game_state_update")

    assert len(updates) == 1
    assert updates[0]["state"]["game_id"] == game_id
    assert updates[0]["state"]["answer"] is None


def test_unknown_game_emits_error(socket_client) -> None:
    socket_client.emit("key_press", {"game_id": "missing", "key": "A"})
    assert _events(socket_client, "error") == [{"error": "Game not found"}]

    socket_client.emit("join_game", {})
    assert _events(socket_client, "error") == [{"error": "Game ID is required"}]


def test_key_press_plays_round(socket_client) -> None:
    game_id = get_game_service().create_new_game("WHALE")

    socket_client.emit("key_press", {"game_id": game_id, "key": "W"})
    update = _events(socket_client, "game_state_update")[-1]
    assert update["accepted"] is True
    assert update["state"]["current_guess"] == "W"

    socket_client.emit("key_press", {"game_id": game_id, "key": "ENTER"})
    received = socket_client.get_received()
    assert {"error": "Not enough letters!"} in [e["args"][0] for e in received if e["name"] == "error"]

    for key in ["H", "A", "L", "E", "ENTER"]:
        socket_client.emit("key_press", {"game_id": game_id, "key": key})
    final = _events(socket_client, "game_state_update")[-1]["state"]
    assert final["won"] is True
    assert final["answer"] == "WHALE"


def test_request_hint_without_api_key(socket_client) -> None:
    game_id = get_game_service().create_new_game("OKAPI")

    socket_client.emit("request_hint", {"game_id": game_id})
    hints = _events(socket_client, "hint")
    assert len(hints) == 1
    assert hints[0]["configured"] is False


def test_request_hint_is_fetched_in_background(app_and_socketio, socket_client, stub_hint_class, monkeypatch) -> None:
    _, socketio = app_and_socketio
    stub = stub_hint_class(hint="💡 Hint: Found in: Africa")
    service = get_game_service()
    monkeypatch.setattr(service, "hint_service", stub)
    monkeypatch.setattr(hint_service_module, "_hint_service", stub)

    tasks = []
    monkeypatch.setattr(socketio, "start_background_task", lambda target, *args, **kwargs: tasks.append(target))

    game_id = service.create_new_game("OKAPI")
    socket_client.emit("request_hint", {"game_id": game_id})

    # Only the loading notice is sent before the task runs
    received = socket_client.get_received()
    assert [event["name"] for event in received] == ["hint_loading"]
    assert len(tasks) == 1

    tasks[0]()
    hints = _events(socket_client, "hint")
    assert hints == [{"game_id": game_id, "hint": "💡 Hint: Found in: Africa", "configured": True}]
    assert stub.requested == ["OKAPI"]


def test_request_hint_after_round_over(socket_client) -> None:
    service = get_game_service()
    game_id = service.create_new_game("SEALS")
    service.submit_word(game_id, "SEALS")

    socket_client.emit("request_hint", {"game_id": game_id})
    assert _events(socket_client, "hint") == [{"game_id": game_id, "hint": "Game is over!"}]


def test_round_deleted_during_event_reports_not_found(socket_client, monkeypatch) -> None:
    service = get_game_service()
    game_id = service.create_new_game("RHINO")
    monkeypatch.setattr(service, "get_round", lambda _game_id: None)

    socket_client.emit("key_press", {"game_id": game_id, "key": "R"})
    socket_client.emit("request_hint", {"game_id": game_id})

    received = socket_client.get_received()
    assert [event["name"] for event in received] == ["error", "error"]
    assert all(event["args"][0] == {"error": "Game not found"} for event in received)
