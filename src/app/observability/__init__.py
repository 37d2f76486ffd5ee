"""Observabilidade: correlation_id e métricas emitidas como logs."""

from app.observability.correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    normalize_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_count, record_latency

__all__ = [
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "normalize_correlation_id",
    "record_count",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
