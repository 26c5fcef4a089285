"""Grid Snake — single-player snake game core."""

from grid_snake.config import GameConfig
from grid_snake.direction import Direction, DirectionController
from grid_snake.food import FoodSpawner
from grid_snake.grid import Grid
from grid_snake.session import GameSession
from grid_snake.snake import AdvanceResult, SnakeEngine
from grid_snake.snapshot import SessionState, Snapshot

__all__ = [
    "AdvanceResult",
    "Direction",
    "DirectionController",
    "FoodSpawner",
    "GameConfig",
    "GameSession",
    "Grid",
    "SessionState",
    "SnakeEngine",
    "Snapshot",
]
