"""Periodic tick drivers for a game session.

The session never sleeps itself; it hands a callback to a scheduler and
asks it to stop again on pause, reset or game over.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], object]


class TickScheduler(Protocol):
    """Calls a callback at a fixed period until stopped."""

    @property
    def running(self) -> bool: ...

    def start(self, callback: TickCallback, interval: float) -> None: ...

    def stop(self) -> None: ...


class ManualScheduler:
    """Virtual-clock scheduler driven explicitly by :meth:`advance`.

    Lets tests and headless runs step a session deterministically without
    real time passing.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._callback: TickCallback | None = None
        self._interval = 0.0
        self._next_due = 0.0
        self.fired = 0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback, interval: float) -> None:
        if interval <= 0:
            raise ValueError("Tick interval must be positive.")
        self._callback = callback
        self._interval = interval
        self._next_due = self.now + interval

    def stop(self) -> None:
        self._callback = None

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every tick that falls due.

        Returns the number of callbacks fired. A callback that stops the
        scheduler prevents any later tick in the same window.
        """
        target = self.now + seconds
        fired = 0
        while self._callback is not None and self._next_due <= target:
            self._fire()
            fired += 1
        self.now = max(self.now, target)
        return fired

    def advance_ticks(self, count: int) -> int:
        """Fire up to *count* ticks, stopping early if the scheduler stops."""
        fired = 0
        for _ in range(count):
            if self._callback is None:
                break
            self._fire()
            fired += 1
        return fired

    def _fire(self) -> None:
        self.now = self._next_due
        self._next_due += self._interval
        self.fired += 1
        callback = self._callback
        callback()


class AsyncioScheduler:
    """Runs the callback from a single ``asyncio`` task.

    Must be started from inside a running event loop. ``stop`` cancels the
    task immediately, so no tick fires after it returns.
    """

    def __init__(self) -> None:
        self._task: asyncio.Task | None = None
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, callback: TickCallback, interval: float) -> None:
        if interval <= 0:
            raise ValueError("Tick interval must be positive.")
        self.stop()
        self._generation += 1
        self._task = asyncio.get_running_loop().create_task(
            self._loop(callback, interval, self._generation),
        )

    def stop(self) -> None:
        # Bumping the generation also guards a loop that is past its sleep.
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _loop(
        self, callback: TickCallback, interval: float, generation: int,
    ) -> None:
        try:
            while generation == self._generation:
                await asyncio.sleep(interval)
                if generation != self._generation:
                    break
                callback()
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
        except Exception:
            logger.exception("Tick loop error.")

    async def aclose(self) -> None:
        """Stop and wait for the tick task to finish."""
        task = self._task
        self.stop()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
