"""Session ownership and snapshot fan-out for connected clients."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from grid_snake.config import GameConfig
from grid_snake.controls import handle_button, handle_key
from grid_snake.direction import Direction
from grid_snake.highscore import HighScoreStore
from grid_snake.scheduler import AsyncioScheduler
from grid_snake.session import GameSession
from grid_snake.snapshot import Snapshot

logger = logging.getLogger(__name__)

# Frames buffered per client before the oldest is dropped.
_CLIENT_QUEUE_SIZE = 32

_ACTIONS = ("start", "pause", "resume", "reset")


def encode(snapshot: Snapshot) -> str:
    return json.dumps(snapshot.to_dict(), separators=(",", ":"))


@dataclass(eq=False)
class ClientFeed:
    """A connected socket and the frames waiting to be sent to it."""

    websocket: WebSocket
    queue: asyncio.Queue = field(
        default_factory=lambda: asyncio.Queue(maxsize=_CLIENT_QUEUE_SIZE),
    )

    def push(self, payload: str) -> None:
        if self.queue.full():
            self.queue.get_nowait()
        self.queue.put_nowait(payload)


class SessionHost:
    """Owns one :class:`GameSession` ticking on the running event loop.

    Session calls are synchronous and all happen on the loop thread, so they
    never interleave with a tick.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        high_scores: HighScoreStore | None = None,
    ) -> None:
        self.scheduler = AsyncioScheduler()
        self.session = GameSession(
            config, scheduler=self.scheduler, high_scores=high_scores,
        )
        self._clients: list[ClientFeed] = []
        self._latest = encode(self.session.snapshot())
        self.session.subscribe(self._on_snapshot)

    @property
    def client_count(self) -> int:
        return len(self._clients)

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        self._latest = encode(snapshot)
        for client in self._clients:
            client.push(self._latest)

    def connect(self, websocket: WebSocket) -> ClientFeed:
        """Register a client; its queue starts with the current frame."""
        client = ClientFeed(websocket)
        client.push(self._latest)
        self._clients.append(client)
        logger.info("Client connected (%d total).", len(self._clients))
        return client

    def disconnect(self, client: ClientFeed) -> None:
        if client in self._clients:
            self._clients.remove(client)
            logger.info("Client disconnected (%d left).", len(self._clients))

    def apply_action(self, action: str) -> bool:
        """Run a named lifecycle action. Raises ``ValueError`` if unknown."""
        if action not in _ACTIONS:
            raise ValueError(f"Unknown action: {action!r}")
        if action == "reset":
            self.session.reset()
            return True
        return getattr(self.session, action)()

    def apply_message(self, msg: dict) -> bool:
        """Apply one client control message.

        Recognised fields, checked in order: ``direction``, ``key``,
        ``button``, ``action``. Returns False for anything unusable.
        """
        direction = msg.get("direction")
        if isinstance(direction, str):
            try:
                return self.session.request_direction(Direction.parse(direction))
            except ValueError:
                return False

        key = msg.get("key")
        if isinstance(key, str):
            return handle_key(self.session, key)

        button = msg.get("button")
        if isinstance(button, str):
            return handle_button(self.session, button)

        action = msg.get("action")
        if isinstance(action, str):
            try:
                return self.apply_action(action)
            except ValueError:
                return False
        return False

    async def cleanup(self) -> None:
        """Stop ticking and close any live client sockets."""
        await self.scheduler.aclose()
        for client in list(self._clients):
            ws = client.websocket
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1001, reason="Server shutting down.")
            except Exception:
                logger.warning("Failed closing client socket during cleanup.")
        self._clients.clear()
        logger.info("SessionHost cleanup complete.")
