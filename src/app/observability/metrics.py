"""Métricas via structured logging.

Métricas são registradas como logs estruturados (`metric_*`) e agregadas
fora do processo a partir do stream de logs.

Uso:
    start = time.perf_counter()
    board = engine.leaderboard()
    record_latency("scoring_engine", "leaderboard", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "scoring_engine")
        operation: Nome da operação (ex: "leaderboard", "score_for_user")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (padrão: o do contexto atual)
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_count(
    component: str,
    name: str,
    value: int,
    correlation_id: str | None = None,
) -> None:
    """Registra contagem pontual (ex: palpites avaliados em um cálculo).

    Args:
        component: Nome do componente
        name: Nome do contador
        value: Valor observado
        correlation_id: ID de correlação (padrão: o do contexto atual)
    """
    logger.info(
        "metric_count",
        extra={
            "metric_type": "count",
            "component": component,
            "metric_name": name,
            "value": value,
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )
