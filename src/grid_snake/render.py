"""Plain-text renderer for session snapshots."""

from __future__ import annotations

import numpy as np

from grid_snake.snapshot import Snapshot

EMPTY = "."
BODY = "o"
HEAD = "H"
FOOD = "*"


def render_text(snapshot: Snapshot) -> str:
    """Draw *snapshot* as rows of characters followed by a score line."""
    board = np.full((snapshot.grid_height, snapshot.grid_width), EMPTY, dtype="<U1")

    if snapshot.food is not None:
        fx, fy = snapshot.food
        board[fy, fx] = FOOD
    for x, y in snapshot.body[1:]:
        if 0 <= x < snapshot.grid_width and 0 <= y < snapshot.grid_height:
            board[y, x] = BODY
    hx, hy = snapshot.head
    board[hy, hx] = HEAD

    rows = ["".join(row) for row in board.tolist()]
    rows.append(
        f"Score: {snapshot.score}  High Score: {snapshot.high_score}  "
        f"{snapshot.status_text}",
    )
    return "\n".join(rows)
