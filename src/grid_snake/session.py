"""Top-level game state machine composing grid, snake, food and scoring."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.direction import Direction, DirectionController
from grid_snake.food import FoodSpawner
from grid_snake.grid import Cell, Grid
from grid_snake.highscore import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore
from grid_snake.scheduler import ManualScheduler, TickScheduler
from grid_snake.snake import AdvanceResult, SnakeEngine
from grid_snake.snapshot import SessionState, Snapshot

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[Snapshot], object]


class GameSession:
    """Single-player snake session.

    The session owns all mutable game state. A scheduler calls :meth:`tick`
    at the configured interval while the session is running; every other
    operation is safe to call at any time and is a no-op when it does not
    apply to the current state. All calls must come from one thread or
    event loop.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        scheduler: TickScheduler | None = None,
        high_scores: HighScoreStore | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(
            pixel_width=self.config.pixel_width,
            pixel_height=self.config.pixel_height,
            cell_size=self.config.cell_size,
        )
        for cell in self.config.initial_body:
            if not self.grid.in_bounds(cell):
                raise ValueError(f"Initial snake cell {cell} lies outside {self.grid}.")

        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        if high_scores is None:
            high_scores = (
                JsonHighScoreStore(self.config.high_score_path)
                if self.config.high_score_path
                else MemoryHighScoreStore()
            )
        self.high_scores = high_scores
        self.food_spawner = FoodSpawner(
            rng if rng is not None else np.random.default_rng(self.config.seed),
        )
        self._initial_direction = Direction.parse(self.config.initial_direction)
        self.directions = DirectionController(self._initial_direction)

        self.high_score = max(int(self.high_scores.get_high_score()), 0)
        self._listeners: list[SnapshotListener] = []
        self._set_defaults()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _set_defaults(self) -> None:
        self.state = SessionState.IDLE
        self.snake = SnakeEngine(self.config.initial_body, self._initial_direction)
        self.directions.reset()
        self.score = 0
        self.tick_count = 0
        self.last_result: AdvanceResult | None = None
        self.food: Cell | None = self.food_spawner.spawn(self.snake.body, self.grid)

    def start(self) -> bool:
        """Begin ticking from ``idle`` (or from ``over``, after a reset).

        Returns True when the session started.
        """
        if self.state in (SessionState.RUNNING, SessionState.PAUSED):
            return False
        if self.state == SessionState.OVER:
            self.scheduler.stop()
            self._set_defaults()
        self.state = SessionState.RUNNING
        self.scheduler.start(self.tick, self.config.tick_interval)
        logger.info("Session started (interval=%dms).", self.config.tick_interval_ms)
        self._publish()
        return True

    def pause(self) -> bool:
        if self.state != SessionState.RUNNING:
            return False
        self.state = SessionState.PAUSED
        self.scheduler.stop()
        logger.info("Session paused at tick %d.", self.tick_count)
        self._publish()
        return True

    def resume(self) -> bool:
        if self.state != SessionState.PAUSED:
            return False
        self.state = SessionState.RUNNING
        self.scheduler.start(self.tick, self.config.tick_interval)
        logger.info("Session resumed at tick %d.", self.tick_count)
        self._publish()
        return True

    def toggle_pause(self) -> bool:
        """Pause a running session or resume a paused one."""
        if self.state == SessionState.RUNNING:
            return self.pause()
        return self.resume()

    def press_space(self) -> bool:
        """Start when not running, otherwise toggle pause."""
        if self.state in (SessionState.IDLE, SessionState.OVER):
            return self.start()
        return self.toggle_pause()

    def reset(self) -> None:
        """Cancel scheduling and return to ready-to-start defaults.

        The high score survives.
        """
        self.scheduler.stop()
        self._set_defaults()
        logger.info("Session reset.")
        self._publish()

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def request_direction(self, direction: Direction) -> bool:
        """Forward a direction request to the controller."""
        return self.directions.request_change(direction)

    def tick(self) -> AdvanceResult | None:
        """Advance the game by one step.

        Returns the movement outcome, or ``None`` when not running.
        """
        if self.state != SessionState.RUNNING:
            return None

        direction = self.directions.commit()
        result = self.snake.advance(direction, self.food, self.grid)
        self.tick_count += 1
        self.last_result = result

        try:
            if result == AdvanceResult.COLLIDED:
                self._game_over()
            elif result == AdvanceResult.ATE_FOOD:
                self._eat()
            else:
                logger.debug("Tick %d: head at %s.", self.tick_count, self.snake.head)
        except Exception:
            logger.exception("Tick %d failed; ending game.", self.tick_count)
            self._game_over()
            raise

        self._publish()
        return result

    def _eat(self) -> None:
        self.score += self.config.food_reward
        self.food = self.food_spawner.spawn(self.snake.body, self.grid)

        if self.score > self.high_score:
            self.high_score = self.score
            logger.info("New high score: %d.", self.high_score)
            try:
                self.high_scores.set_high_score(self.high_score)
            except OSError:
                logger.exception("Failed to persist high score %d.", self.high_score)

        if self.food is None:
            # The snake fills the whole board; there is nowhere left to go.
            logger.info("Board filled at tick %d.", self.tick_count)
            self._game_over()

    def _game_over(self) -> None:
        self.state = SessionState.OVER
        self.scheduler.stop()
        logger.info(
            "Game over at tick %d with score %d.", self.tick_count, self.score,
        )

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Return a read-only view of the current state."""
        return Snapshot(
            body=tuple(self.snake.body),
            food=self.food,
            facing=self.snake.facing,
            score=self.score,
            high_score=self.high_score,
            state=self.state,
            tick=self.tick_count,
            grid_width=self.grid.width,
            grid_height=self.grid.height,
            last_result=self.last_result,
        )

    def subscribe(self, listener: SnapshotListener) -> None:
        """Register *listener* and hand it the current snapshot."""
        self._listeners.append(listener)
        listener(self.snapshot())

    def unsubscribe(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _publish(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception("Snapshot listener %r failed.", listener)
