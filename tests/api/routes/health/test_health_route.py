"""Testes dos probes de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from api.routes.health.router import readiness_check
from app.infra.notifications import MemoryNotificationChannel
from utils.errors import StoreUnavailableError


def _request(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def test_health_reports_service(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["X-Correlation-Id"]


def test_ready_with_memory_store(client: TestClient) -> None:
    body = client.get("/ready").json()

    assert body["status"] == "ready"
    assert body["store"]["ok"] is True
    assert body["guesses_locked"] is False
    assert body["realtime_subscribers"] == 0


@pytest.mark.anyio
async def test_not_ready_without_container() -> None:
    response = await readiness_check(_request(SimpleNamespace()))
    payload = json.loads(response.body)

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["store"]["reason"] == "not_configured"
    assert payload["guesses_locked"] is None


@pytest.mark.anyio
async def test_not_ready_when_store_fails() -> None:
    store = MagicMock()
    store.list_categories.side_effect = StoreUnavailableError("redis down")
    gate = MagicMock()
    gate.get_status.return_value = True
    container = SimpleNamespace(
        catalog_store=store, gate=gate, channel=MemoryNotificationChannel()
    )

    response = await readiness_check(_request(SimpleNamespace(container=container)))
    payload = json.loads(response.body)

    assert response.status_code == 503
    assert payload["store"] == {"ok": False, "latency_ms": None, "reason": "StoreUnavailableError"}
    assert payload["guesses_locked"] is True
    assert payload["realtime_subscribers"] is None
