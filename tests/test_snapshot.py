"""Tests for session snapshots."""

import json

import pytest

from grid_snake.direction import Direction
from grid_snake.snake import AdvanceResult
from grid_snake.snapshot import SessionState, Snapshot


def _snap(**overrides) -> Snapshot:
    fields = {
        "body": ((5, 10), (4, 10), (3, 10)),
        "food": (10, 10),
        "facing": Direction.RIGHT,
        "score": 30,
        "high_score": 50,
        "state": SessionState.RUNNING,
        "tick": 7,
        "grid_width": 20,
        "grid_height": 20,
    }
    fields.update(overrides)
    return Snapshot(**fields)


class TestSnapshotStatus:
    @pytest.mark.parametrize(
        ("state", "text"),
        [
            (SessionState.IDLE, "Press SPACE to start"),
            (SessionState.RUNNING, "Game Running"),
            (SessionState.PAUSED, "Game Paused"),
            (SessionState.OVER, "Game Over! Final Score: 30"),
        ],
    )
    def test_status_text(self, state, text):
        assert _snap(state=state).status_text == text


class TestSnapshotEyes:
    def test_facing_right(self):
        eyes = _snap().eyes(20)
        assert eyes == ((112, 204, 4, 4), (112, 212, 4, 4))

    def test_facing_up(self):
        eyes = _snap(facing=Direction.UP).eyes(20)
        assert eyes == ((104, 204, 4, 4), (112, 204, 4, 4))

    def test_facing_down(self):
        eyes = _snap(facing=Direction.DOWN).eyes(20)
        assert eyes == ((104, 212, 4, 4), (112, 212, 4, 4))

    def test_facing_left(self):
        eyes = _snap(facing=Direction.LEFT).eyes(20)
        assert eyes == ((104, 204, 4, 4), (104, 212, 4, 4))


class TestSnapshotSerialization:
    def test_to_dict(self):
        d = _snap(last_result=AdvanceResult.MOVED).to_dict()
        assert d["body"] == [[5, 10], [4, 10], [3, 10]]
        assert d["food"] == [10, 10]
        assert d["facing"] == "right"
        assert d["state"] == "running"
        assert d["status"] == "Game Running"
        assert d["last_result"] == "moved"
        assert d["grid"] == {"width": 20, "height": 20}

    def test_json_serializable(self):
        serialized = json.dumps(_snap(food=None).to_dict())
        assert '"food": null' in serialized

    def test_frozen(self):
        snap = _snap()
        with pytest.raises(AttributeError):
            snap.score = 0
