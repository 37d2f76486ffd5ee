"""Tradução de exceções de domínio/infra para respostas HTTP.

Corpo padrão: {"error": "<kind>", "detail": "<mensagem>"}.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from utils.errors import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    InfrastructureError,
    NotFoundError,
    PalpitheionError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[PalpitheionError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for(exc: PalpitheionError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


def _error_body(kind: str, detail: str) -> dict[str, str]:
    return {"error": kind, "detail": detail}


async def _domain_error_handler(request: Request, exc: PalpitheionError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(
        "request_rejected",
        extra={"path": request.url.path, "error": exc.kind, "status_code": status_code},
    )
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.kind, exc.message),
        headers=headers,
    )


async def _infrastructure_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "infrastructure_error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=_error_body("service_unavailable", "Serviço temporariamente indisponível."),
    )


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = [".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(ValidationError.kind, f"Campos inválidos: {', '.join(fields)}"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os handlers de erro na aplicação."""
    app.add_exception_handler(PalpitheionError, _domain_error_handler)
    app.add_exception_handler(InfrastructureError, _infrastructure_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
