"""correlation_id por requisição, guardado em ContextVar.

O middleware HTTP abre um escopo por requisição; logs, métricas e
handlers de erro leem o valor corrente sem recebê-lo por parâmetro.

Uso:
    with correlation_scope(request.headers.get("X-Correlation-Id")) as cid:
        response = await call_next(request)
        response.headers["X-Correlation-Id"] = cid
"""

from __future__ import annotations

import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

# IDs vindos do cliente são ecoados em header e gravados em log
_ACCEPTED_ID = re.compile(r"^[A-Za-z0-9._:\-]{1,128}$")

_correlation_id: ContextVar[str] = ContextVar("palpitheion_correlation_id", default="")


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


def normalize_correlation_id(candidate: str | None) -> str:
    """Aceita o ID do cliente se for seguro; caso contrário gera um novo."""
    if candidate and _ACCEPTED_ID.match(candidate):
        return candidate
    return generate_correlation_id()


def get_correlation_id() -> str:
    """correlation_id corrente ou "" fora de uma requisição."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    return _correlation_id.set(normalize_correlation_id(correlation_id))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior ao sair."""
    token = set_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)
