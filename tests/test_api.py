"""Tests for the FastAPI tic-tac-toe interface."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tictactoe.ui import app


client = TestClient(app)


def test_create_game_and_play_against_ai():
    response = client.post("/api/game", json={"mode": "pvc-human-first", "level": "deep"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["state"] == "ongoing"
    assert payload["currentPlayer"] == {"name": "Player", "mark": "O", "engine": False}
    assert payload["moveLog"] == []
    assert len(payload["availableMoves"]) == 9

    game_id = payload["id"]
    move_response = client.post(
        f"/api/game/{game_id}/move", json={"row": 1, "column": 1}
    )
    assert move_response.status_code == 200
    state = move_response.json()
    assert state["board"][1][1] == "O"
    assert [entry["mark"] for entry in state["moveLog"]] == ["O", "X"]
    assert state["currentPlayer"]["mark"] == "O"
    assert len(state["availableMoves"]) == 7

    follow_up = client.get(f"/api/game/{game_id}")
    assert follow_up.status_code == 200
    assert follow_up.json()["moveLog"] == state["moveLog"]


def test_computer_first_opens_on_creation():
    response = client.post(
        "/api/game", json={"mode": "pvc-computer-first", "level": "shallow"}
    )
    assert response.status_code == 200
    payload = response.json()
    assert len(payload["moveLog"]) == 1
    assert payload["moveLog"][0]["player"] == "AI"
    assert payload["currentPlayer"]["mark"] == "X"


def test_occupied_cell_rejected():
    game_id = client.post("/api/game", json={"mode": "pvp"}).json()["id"]
    assert client.post(f"/api/game/{game_id}/move", json={"row": 0, "column": 0}).status_code == 200

    duplicate = client.post(f"/api/game/{game_id}/move", json={"row": 0, "column": 0})
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"]


def test_win_is_reported_and_further_moves_rejected():
    game_id = client.post("/api/game", json={"mode": "pvp"}).json()["id"]
    for row, column in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        state = client.post(
            f"/api/game/{game_id}/move", json={"row": row, "column": column}
        ).json()
    assert state["state"] == "win"
    assert state["winner"] == "O"
    late = client.post(f"/api/game/{game_id}/move", json={"row": 2, "column": 2})
    assert late.status_code == 400


def test_out_of_range_move_rejected():
    game_id = client.post("/api/game", json={"mode": "pvp"}).json()["id"]
    response = client.post(f"/api/game/{game_id}/move", json={"row": 3, "column": 0})
    assert response.status_code == 422


def test_rejects_unsupported_level():
    response = client.post("/api/game", json={"level": "impossible"})
    assert response.status_code == 422


def test_evaluation_lists_scored_moves():
    game_id = client.post("/api/game", json={"mode": "pvp"}).json()["id"]
    for row, column in [(2, 0), (1, 0), (2, 1), (1, 1)]:
        client.post(f"/api/game/{game_id}/move", json={"row": row, "column": column})
    response = client.get(f"/api/game/{game_id}/evaluation")
    assert response.status_code == 200
    scores = {(e["row"], e["column"]): e["score"] for e in response.json()}
    assert scores == {(0, 0): -1, (0, 1): -1, (0, 2): -1, (1, 2): 0, (2, 2): 1}


def test_restart_and_change_level():
    game_id = client.post(
        "/api/game", json={"mode": "pvc-human-first", "level": "deep"}
    ).json()["id"]

    level = client.put(f"/api/game/{game_id}/level", json={"level": "medium"})
    assert level.status_code == 200
    assert level.json()["level"] == "medium"

    client.post(f"/api/game/{game_id}/move", json={"row": 0, "column": 0})
    restarted = client.post(
        f"/api/game/{game_id}/restart", json={"mode": "pvp"}
    ).json()
    assert restarted["mode"] == "pvp"
    assert restarted["level"] == "medium"
    assert all(cell == "" for row in restarted["board"] for cell in row)
    assert restarted["currentPlayer"]["name"] == "Player 1"


def test_missing_game_returns_404():
    assert client.get("/api/game/missing").status_code == 404


def test_every_level_alias_is_accepted():
    for name in ("shallow", "Easy", "medium", "DEEP", "hard"):
        response = client.post("/api/game", json={"mode": "pvp", "level": name})
        assert response.status_code == 200
