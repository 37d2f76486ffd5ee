"""Probes de liveness (/health) e readiness (/ready)."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Literal

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.infra.notifications import WebSocketNotificationChannel
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from app.bootstrap import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter()

STORE_PROBE_TIMEOUT_SECONDS = 2.0


class LivenessResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    service: str
    checked_at: datetime


class StoreProbe(BaseModel):
    ok: bool
    latency_ms: float | None = None
    reason: str | None = None


class ReadinessResponse(BaseModel):
    status: Literal["ready", "not_ready"]
    store: StoreProbe
    guesses_locked: bool | None = None
    realtime_subscribers: int | None = None
    checked_at: datetime


@router.get("/health", response_model=LivenessResponse)
async def health_check(request: Request) -> LivenessResponse:
    return LivenessResponse(
        service=getattr(request.app.state, "service_name", "palpitheion"),
        checked_at=datetime.now(UTC),
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> JSONResponse:
    """Pronto quando o store de catálogo/palpites responde dentro do timeout.

    O estado do gate e o número de assinantes do feed vão junto como
    informação operacional; não afetam o resultado.
    """
    container: AppContainer | None = getattr(request.app.state, "container", None)
    if container is None:
        probe = StoreProbe(ok=False, reason="not_configured")
    else:
        probe = await _probe_store(container)

    body = ReadinessResponse(
        status="ready" if probe.ok else "not_ready",
        store=probe,
        checked_at=datetime.now(UTC),
    )
    if container is not None:
        body.guesses_locked = container.gate.get_status()
        if isinstance(container.channel, WebSocketNotificationChannel):
            body.realtime_subscribers = container.channel.subscriber_count

    return JSONResponse(
        content=body.model_dump(mode="json"),
        status_code=status.HTTP_200_OK if probe.ok else status.HTTP_503_SERVICE_UNAVAILABLE,
    )


async def _probe_store(container: AppContainer) -> StoreProbe:
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(
            asyncio.to_thread(container.catalog_store.list_categories),
            timeout=STORE_PROBE_TIMEOUT_SECONDS,
        )
    except TimeoutError:
        logger.warning("store_probe_timeout")
        return StoreProbe(ok=False, reason="timeout")
    except InfrastructureError as exc:
        logger.warning("store_probe_failed", extra={"error_type": type(exc).__name__})
        return StoreProbe(ok=False, reason=type(exc).__name__)
    return StoreProbe(ok=True, latency_ms=round((time.perf_counter() - started_at) * 1000, 2))
