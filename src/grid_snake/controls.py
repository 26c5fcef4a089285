"""Translate key presses and button clicks into session calls."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grid_snake.direction import Direction
from grid_snake.snapshot import SessionState

if TYPE_CHECKING:
    from grid_snake.session import GameSession

logger = logging.getLogger(__name__)

_ARROW_KEYS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}

_SPACE_KEYS = frozenset({"Space", " ", "space"})

_DIRECTION_BUTTONS: dict[str, Direction] = {
    d.label: d for d in Direction
}


def handle_key(session: GameSession, key: str) -> bool:
    """Apply a keyboard key to *session*.

    Arrow keys only steer a running, unpaused game; space starts an idle or
    finished game and toggles pause otherwise. Unknown keys are ignored.
    Returns True when the key changed something.
    """
    if key in _SPACE_KEYS:
        return session.press_space()

    direction = _ARROW_KEYS.get(key)
    if direction is None:
        logger.debug("Ignoring unmapped key %r.", key)
        return False
    if session.state != SessionState.RUNNING:
        return False
    return session.request_direction(direction)


def handle_button(session: GameSession, button: str) -> bool:
    """Apply an on-screen button to *session*.

    Direction buttons reach the controller in any state.
    """
    name = button.strip().lower()
    direction = _DIRECTION_BUTTONS.get(name)
    if direction is not None:
        return session.request_direction(direction)
    if name == "pause":
        return session.toggle_pause()
    if name == "restart":
        session.reset()
        return True
    logger.debug("Ignoring unknown button %r.", button)
    return False
