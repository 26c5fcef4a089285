"""REST API route handlers for session control."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from grid_snake.controls import handle_button, handle_key
from grid_snake.direction import Direction
from grid_snake.server.host import SessionHost
from grid_snake.server.models import (
    ActionResponse,
    DirectionRequest,
    ErrorResponse,
    InputRequest,
)

router = APIRouter(prefix="/session", tags=["session"])


def _get_host(request: Request) -> SessionHost:
    return request.app.state.host


def _response(host: SessionHost, changed: bool) -> ActionResponse:
    session = host.session
    return ActionResponse(
        changed=changed,
        state=session.state,
        score=session.score,
        high_score=session.high_score,
    )


@router.get("")
async def get_session(request: Request) -> dict:
    """Return the current snapshot."""
    return _get_host(request).session.snapshot().to_dict()


@router.post("/direction")
async def change_direction(
    body: DirectionRequest, request: Request,
) -> ActionResponse:
    """Request a direction change for the next tick."""
    host = _get_host(request)
    try:
        direction = Direction.parse(body.direction)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _response(host, host.session.request_direction(direction))


@router.post("/input")
async def send_input(body: InputRequest, request: Request) -> ActionResponse:
    """Apply a key press or button click."""
    host = _get_host(request)
    if body.key is not None:
        changed = handle_key(host.session, body.key)
    elif body.button is not None:
        changed = handle_button(host.session, body.button)
    else:
        raise HTTPException(status_code=422, detail="Provide 'key' or 'button'.")
    return _response(host, changed)


@router.post("/{action}", responses={404: {"model": ErrorResponse}})
async def run_action(action: str, request: Request) -> ActionResponse:
    """Start, pause, resume or reset the session."""
    host = _get_host(request)
    try:
        changed = host.apply_action(action)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _response(host, changed)
