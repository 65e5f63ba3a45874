"""HTTP API smoke tests through Flask's test client."""

from __future__ import annotations

from sqlalchemy.exc import OperationalError

from animal_wordle.config.game_settings import ANIMAL_LIST, FALLBACK_HINT
from animal_wordle.services.game_service import get_game_service


def _new_game(client, animal: str | None = "TIGER") -> dict:
    payload = {"animal": animal} if animal else {}
    response = client.post("/api/new_game", json=payload)
    assert response.status_code == 200
    return response.get_json()


def test_new_game_returns_hidden_state(client) -> None:
    body = _new_game(client)
    state = body["state"]

    assert body["success"] is True
    assert state["game_id"] == body["game_id"]
    assert state["word_length"] == 5
    assert state["current_attempt"] == 0
    assert state["answer"] is None
    assert state["status"] == "ONGOING"


def test_new_game_without_body_picks_an_animal(client) -> None:
    response = client.post("/api/new_game")
    assert response.status_code == 200
    assert response.get_json()["state"]["word_length"] == 5


def test_new_game_unknown_animal_is_404(client) -> None:
    response = client.post("/api/new_game", json={"animal": "DODOS"})
    assert response.status_code == 404
    assert response.get_json() == {"success": False, "error": "Animal not found"}


def test_letter_entry_and_deletion(client) -> None:
    game_id = _new_game(client)["game_id"]

    for letter in "tig":
        response = client.post(f"/api/game/{game_id}/letter", json={"letter": letter})
        assert response.status_code == 200
    assert response.get_json()["state"]["current_guess"] == "TIG"

    response = client.delete(f"/api/game/{game_id}/letter")
    assert response.get_json()["state"]["current_guess"] == "TI"

    response = client.post(f"/api/game/{game_id}/letter", json={"letter": "9"})
    assert response.status_code == 400


def test_delete_from_empty_buffer_is_rejected(client) -> None:
    game_id = _new_game(client)["game_id"]
    response = client.delete(f"/api/game/{game_id}/letter")
    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_enter_with_short_guess_reports_not_enough_letters(client) -> None:
    game_id = _new_game(client)["game_id"]
    client.post(f"/api/game/{game_id}/key", json={"key": "T"})

    response = client.post(f"/api/game/{game_id}/key", json={"key": "ENTER"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Not enough letters!"

    response = client.post(f"/api/game/{game_id}/guess")
    assert response.status_code == 400
    assert response.get_json()["error"] == "Not enough letters!"


def test_key_presses_play_a_round(client) -> None:
    game_id = _new_game(client)["game_id"]
    for key in ["T", "I", "G", "E", "R", "ENTER"]:
        response = client.post(f"/api/game/{game_id}/key", json={"key": key})
        assert response.status_code == 200
        assert response.get_json()["accepted"] is True

    state = response.get_json()["state"]
    assert state["won"] is True
    assert state["answer"] == "TIGER"


def test_full_word_guess_and_stats(client) -> None:
    game_id = _new_game(client, "PANDA")["game_id"]

    response = client.post(f"/api/game/{game_id}/guess", json={"guess": "aaaaa"})
    assert response.status_code == 200
    assert response.get_json()["result"] == [
        ["A", "ABSENT"], ["A", "CORRECT"], ["A", "ABSENT"], ["A", "ABSENT"], ["A", "CORRECT"]
    ]

    response = client.post(f"/api/game/{game_id}/guess", json={"guess": "PANDA"})
    state = response.get_json()["state"]
    assert state["game_over"] is True
    assert state["won"] is True
    assert state["totals"] == {"wins": 1, "losses": 0}

    response = client.post(f"/api/game/{game_id}/guess", json={"guess": "PANDA"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Game is already over"

    stats = client.get("/api/stats").get_json()
    assert stats["totals"] == {"wins": 1, "losses": 0}
    assert stats["animals"]["PANDA"] == {"wins": 1, "losses": 0}

    animal_stats = client.get("/api/stats/panda").get_json()
    assert animal_stats["animal"] == "PANDA"
    assert animal_stats["totals"] == {"wins": 1, "losses": 0}


def test_guess_validation(client) -> None:
    game_id = _new_game(client)["game_id"]

    response = client.post(f"/api/game/{game_id}/guess", json={"guess": "CAT"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Guess must be exactly 5 letters"

    response = client.post(f"/api/game/{game_id}/guess", json={"guess": "T1GER"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Guess must contain only letters"


def test_reset_stats(client) -> None:
    game_id = _new_game(client)["game_id"]
    client.post(f"/api/game/{game_id}/guess", json={"guess": "TIGER"})

    response = client.post("/api/stats/reset")
    assert response.status_code == 200
    assert response.get_json()["totals"] == {"wins": 0, "losses": 0}
    assert client.get("/api/stats/TIGER").get_json()["totals"] == {"wins": 0, "losses": 0}


def test_unknown_game_is_404(client) -> None:
    for method, path in [
        ("get", "/api/game/nope/state"),
        ("post", "/api/game/nope/letter"),
        ("delete", "/api/game/nope/letter"),
        ("post", "/api/game/nope/key"),
        ("post", "/api/game/nope/guess"),
        ("get", "/api/game/nope/hint"),
        ("delete", "/api/game/nope"),
    ]:
        response = getattr(client, method)(path, json={})
        assert response.status_code == 404, path
        assert response.get_json()["error"] == "Game not found"


def test_hint_without_api_key_falls_back(client) -> None:
    game_id = _new_game(client)["game_id"]
    body = client.get(f"/api/game/{game_id}/hint").get_json()
    assert body == {"success": True, "hint": FALLBACK_HINT, "configured": False}


def test_delete_game(client) -> None:
    game_id = _new_game(client)["game_id"]
    assert client.delete(f"/api/game/{game_id}").get_json() == {"success": True}
    assert client.get(f"/api/game/{game_id}/state").status_code == 404


def test_animals_and_health(client) -> None:
    animals = client.get("/api/animals").get_json()["animals"]
    assert animals == [entry["name"] for entry in ANIMAL_LIST]

    _new_game(client)
    health = client.get("/api/health").get_json()
    assert health["status"] == "healthy"
    assert health["active_games"] == 1
    assert health["hints_configured"] is False


def test_winning_guess_survives_failed_stats_write(client, monkeypatch) -> None:
    stats_store = get_game_service().stats_store
    real_record = stats_store.record_result

    def locked(key, outcome):
        raise OperationalError("UPDATE game_stats", {}, Exception("database is locked"))

    monkeypatch.setattr(stats_store, "record_result", locked)
    game_id = _new_game(client)["game_id"]
    response = client.post(f"/api/game/{game_id}/guess", json={"guess": "TIGER"})
    assert response.status_code == 200
    assert response.get_json()["state"]["won"] is True

    monkeypatch.setattr(stats_store, "record_result", real_record)
    state = client.get(f"/api/game/{game_id}/state").get_json()["state"]
    assert state["totals"] == {"wins": 1, "losses": 0}
    assert client.get("/api/stats/TIGER").get_json()["totals"] == {"wins": 1, "losses": 0}
