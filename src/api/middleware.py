"""Middleware HTTP de correlation_id.

Lê `X-Correlation-Id` (ou gera um novo), disponibiliza via ContextVar para
os logs da requisição e devolve o valor no header da resposta.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.observability import correlation_scope

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-Id"


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        started_at = time.perf_counter()
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        logger.info(
            "http_request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
        return response
