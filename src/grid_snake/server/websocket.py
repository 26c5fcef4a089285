"""WebSocket handler for real-time play."""

from __future__ import annotations

import asyncio
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from grid_snake.server.host import SessionHost

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_host(ws: WebSocket) -> SessionHost:
    return ws.app.state.host


async def _pump(websocket: WebSocket, queue: asyncio.Queue[str]) -> None:
    """Forward queued snapshot frames to the client."""
    while True:
        payload = await queue.get()
        await websocket.send_text(payload)


@ws_router.websocket("/session/play")
async def play(websocket: WebSocket) -> None:
    """Receive control messages, stream a snapshot after every change."""
    host = _get_host(websocket)
    await websocket.accept()
    client = host.connect(websocket)
    sender = asyncio.create_task(_pump(websocket, client.queue))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue
            host.apply_message(msg)
    except WebSocketDisconnect:
        logger.info("Player disconnected.")
    finally:
        host.disconnect(client)
        sender.cancel()
        try:
            await sender
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.warning("Frame sender failed for a closed client.")
