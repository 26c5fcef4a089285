"""Tests for the game configuration dataclass."""

import json

import pytest

from grid_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.pixel_width == 400
        assert cfg.cell_size == 20
        assert cfg.tick_interval_ms == 200
        assert cfg.tick_interval == 0.2
        assert cfg.food_reward == 10
        assert cfg.initial_body == ((5, 10), (4, 10), (3, 10))
        assert cfg.initial_direction == "right"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cell_size": 0},
            {"cell_size": -20},
            {"pixel_width": 0},
            {"tick_interval_ms": 0},
            {"food_reward": 0},
            {"initial_body": ()},
            {"initial_direction": "north"},
        ],
    )
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_to_dict_serializable(self):
        serialized = json.dumps(GameConfig().to_dict())
        assert isinstance(serialized, str)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(
            cell_size=10, tick_interval_ms=150, seed=9,
            initial_body=((3, 3), (2, 3)),
        )
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()
        assert GameConfig.load(path) == cfg

    def test_load_rejects_unknown_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"cell_size": 10, "speed": 3}))
        with pytest.raises(ValueError, match="Unknown config keys.*speed"):
            GameConfig.load(path)

    def test_load_rejects_non_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps([1, 2]))
        with pytest.raises(ValueError, match="JSON object"):
            GameConfig.load(path)
