"""Filters de logging: contexto da requisição e redação de credenciais."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[redacted]"

# Campos de `extra` que nunca chegam ao stream
SENSITIVE_FIELDS = frozenset({"password", "token", "authorization", "jwt_secret"})


class CorrelationIdFilter(logging.Filter):
    """Anota cada record com `correlation_id` e `service`.

    Um `correlation_id` passado explicitamente em `extra` tem precedência
    sobre o do contexto.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._getter() if self._getter else ""
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui o valor de campos sensíveis de `extra` por `[redacted]`."""

    def __init__(self, fields: Iterable[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for field in self._fields & record.__dict__.keys():
            setattr(record, field, REDACTED)
        return True
