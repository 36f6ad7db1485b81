import json

import pytest
from fastapi.testclient import TestClient

from rainbow_snake.config import Settings
from rainbow_snake.main import create_app


@pytest.fixture
def client(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"snakeHighScore": "42"}))
    app = create_app(Settings(store_path=str(path)))
    return TestClient(app)


def receive_until(ws, msg_type, limit=100):
    for _ in range(limit):
        message = ws.receive()
        if message.get("text"):
            data = json.loads(message["text"])
            if data["type"] == msg_type:
                return data
    raise AssertionError(f"no {msg_type} message received")


def receive_frame(ws, limit=100):
    for _ in range(limit):
        message = ws.receive()
        if message.get("bytes"):
            return message["bytes"]
    raise AssertionError("no frame received")


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "gameCanvas" in res.text


def test_client_script_served(client):
    res = client.get("/static/client.js")
    assert res.status_code == 200


def test_high_score_endpoint(client):
    assert client.get("/api/high-score").json() == {"high_score": 42}


def test_welcome_describes_board(client):
    with client.websocket_connect("/ws") as ws:
        welcome = ws.receive_json()
        assert welcome == {
            "type": "welcome",
            "grid": [20, 20],
            "canvas": [400, 400],
            "cell_size": 20,
            "high_score": 42,
        }


def test_start_streams_frames(client):
    with client.websocket_connect("/ws") as ws:
        ws.receive_json()
        ws.send_json({"type": "start"})
        frame = receive_frame(ws)
        assert frame.startswith(b"\x89PNG")
        state = receive_until(ws, "state")
        assert state["phase"] == "running"
        assert state["score"] == 0
        assert state["level"] == 1
        assert state["high_score"] == 42
        # ticks keep coming
        assert receive_frame(ws).startswith(b"\x89PNG")


def test_pause_and_boost_keys(client):
    with client.websocket_connect("/ws") as ws:
        ws.receive_json()
        ws.send_json({"type": "start"})
        ws.send_json({"type": "key", "key": "p"})
        assert receive_until(ws, "pause_state") == {"type": "pause_state", "paused": True}
        ws.send_json({"type": "key", "key": "p"})
        assert receive_until(ws, "pause_state") == {"type": "pause_state", "paused": False}
        ws.send_json({"type": "key", "key": " "})
        state = receive_until(ws, "state")
        while not state["boost"]:
            state = receive_until(ws, "state")
        assert state["interval"] == 50


def test_garbage_messages_are_ignored(client):
    with client.websocket_connect("/ws") as ws:
        ws.receive_json()
        ws.send_text("not json")
        ws.send_json(["list"])
        ws.send_json({"type": "nope"})
        ws.send_json({"type": "key", "key": 5})
        ws.send_json({"type": "touchmove", "x": "a", "y": 1})
        ws.send_json({"type": "start"})
        assert receive_frame(ws).startswith(b"\x89PNG")


def test_import_does_not_read_environment(monkeypatch):
    import importlib

    import rainbow_snake.main as main

    monkeypatch.setenv("SNAKE_PORT", "not-a-port")
    importlib.reload(main)
    assert not hasattr(main, "app")


def test_client_shows_pause_and_needs_no_sound_files(client):
    page = client.get("/").text
    assert "pauseDisplay" in page
    assert "/static/sounds" not in page
    assert "pause_state" in client.get("/static/client.js").text
