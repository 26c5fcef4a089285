"""REST API endpoint tests."""

from __future__ import annotations

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from grid_snake.config import GameConfig
from grid_snake.server.app import create_app
from grid_snake.server.host import SessionHost

BASE = "http://test"


@pytest.fixture()
def app():
    application = create_app()
    application.state.host = SessionHost(GameConfig(seed=0))
    return application


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c
    await app.state.host.cleanup()


class TestGetSession:
    @pytest.mark.asyncio
    async def test_initial_snapshot(self, client):
        resp = await client.get("/session")
        assert resp.status_code == 200
        data = resp.json()
        assert data["state"] == "idle"
        assert data["body"] == [[5, 10], [4, 10], [3, 10]]
        assert data["score"] == 0
        assert data["food"] is not None
        assert data["grid"] == {"width": 20, "height": 20}


class TestLifecycleActions:
    @pytest.mark.asyncio
    async def test_start(self, client):
        resp = await client.post("/session/start")
        assert resp.status_code == 200
        assert resp.json() == {
            "changed": True, "state": "running", "score": 0, "high_score": 0,
        }

    @pytest.mark.asyncio
    async def test_start_twice(self, client):
        await client.post("/session/start")
        resp = await client.post("/session/start")
        assert resp.json()["changed"] is False

    @pytest.mark.asyncio
    async def test_pause_resume(self, client):
        await client.post("/session/start")
        resp = await client.post("/session/pause")
        assert resp.json()["state"] == "paused"
        resp = await client.post("/session/resume")
        assert resp.json()["state"] == "running"

    @pytest.mark.asyncio
    async def test_pause_when_idle_is_noop(self, client):
        resp = await client.post("/session/pause")
        assert resp.status_code == 200
        assert resp.json() == {
            "changed": False, "state": "idle", "score": 0, "high_score": 0,
        }

    @pytest.mark.asyncio
    async def test_reset(self, client, app):
        await client.post("/session/start")
        resp = await client.post("/session/reset")
        assert resp.json()["state"] == "idle"
        assert not app.state.host.scheduler.running

    @pytest.mark.asyncio
    async def test_unknown_action(self, client):
        resp = await client.post("/session/explode")
        assert resp.status_code == 404


class TestDirection:
    @pytest.mark.asyncio
    async def test_accepted(self, client, app):
        resp = await client.post("/session/direction", json={"direction": "up"})
        assert resp.status_code == 200
        assert resp.json()["changed"] is True
        assert app.state.host.session.directions.pending.label == "up"

    @pytest.mark.asyncio
    async def test_reverse_rejected(self, client):
        resp = await client.post("/session/direction", json={"direction": "left"})
        assert resp.status_code == 200
        assert resp.json()["changed"] is False

    @pytest.mark.asyncio
    async def test_unknown_direction(self, client):
        resp = await client.post(
            "/session/direction", json={"direction": "sideways"},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_direction(self, client):
        resp = await client.post("/session/direction", json={})
        assert resp.status_code == 422


class TestInput:
    @pytest.mark.asyncio
    async def test_space_key(self, client):
        resp = await client.post("/session/input", json={"key": "Space"})
        assert resp.json()["state"] == "running"
        resp = await client.post("/session/input", json={"key": "Space"})
        assert resp.json()["state"] == "paused"

    @pytest.mark.asyncio
    async def test_restart_button(self, client):
        await client.post("/session/start")
        resp = await client.post("/session/input", json={"button": "restart"})
        assert resp.json() == {
            "changed": True, "state": "idle", "score": 0, "high_score": 0,
        }

    @pytest.mark.asyncio
    async def test_empty_input(self, client):
        resp = await client.post("/session/input", json={})
        assert resp.status_code == 422


class TestLiveTicking:
    @pytest.mark.asyncio
    async def test_runs_into_wall(self, client, app):
        app.state.host = SessionHost(GameConfig(tick_interval_ms=10, seed=0))
        await client.post("/session/start")
        for _ in range(100):
            await asyncio.sleep(0.02)
            if (await client.get("/session")).json()["state"] == "over":
                break
        data = (await client.get("/session")).json()
        assert data["state"] == "over"
        assert data["last_result"] == "collided"
        assert data["body"][0][0] == 19
        assert not app.state.host.scheduler.running
