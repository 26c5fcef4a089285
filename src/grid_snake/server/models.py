"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from grid_snake.snapshot import SessionState


class DirectionRequest(BaseModel):
    """Request body for POST /session/direction."""

    direction: str = Field(min_length=1, max_length=16)


class InputRequest(BaseModel):
    """Request body for POST /session/input; exactly one field is used."""

    key: str | None = Field(default=None, max_length=32)
    button: str | None = Field(default=None, max_length=32)


class ActionResponse(BaseModel):
    """Outcome of a control call."""

    changed: bool
    state: SessionState
    score: int
    high_score: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
