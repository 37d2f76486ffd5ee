"""Entrypoint da aplicação Palpitheion.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.middleware import correlation_id_middleware
from api.routes import create_api_router
from app.bootstrap import (
    close_redis_clients,
    get_container,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap import AppContainer

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Seed das roles e do usuário admin

    Shutdown:
    - Fecha clientes Redis (o gate não é persistido)
    """
    service_name = app.state.service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()

    container: AppContainer = app.state.container
    container.auth.seed(container.admin_username, container.admin_password)

    yield

    close_redis_clients()
    logger.info("app_shutting_down", extra={"service": service_name})


def create_app(container: AppContainer | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        container: Container pronto (testes); padrão: `get_container()`

    Returns:
        Aplicação FastAPI configurada.
    """
    base = get_base_settings()
    fastapi_app = FastAPI(
        title="Palpitheion",
        description="Bolão de premiações: categorias, indicados, palpites e ranking",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.container = container if container is not None else get_container()
    fastapi_app.state.service_name = base.service_name

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(base.cors_allow_origins),
        allow_credentials="*" not in base.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": base.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("app_dev_server_starting")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
