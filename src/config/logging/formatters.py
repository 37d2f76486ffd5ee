"""Formatter JSON (python-json-logger) com campos padronizados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa dos campos obrigatórios no output
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "2026-03-01 20:00:00,000", "level": "INFO",
         "logger": "app.services.visibility_gate", "message": "guess_status_toggled",
         "correlation_id": "abc-123", "service": "palpitheion", "locked": true}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
