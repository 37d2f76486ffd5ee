"""Agregador de rotas: registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.auth.router import router as auth_router
from api.routes.categories.router import router as categories_router
from api.routes.guess_status.router import router as guess_status_router
from api.routes.health.router import router as health_router
from api.routes.nominees.router import router as nominees_router
from api.routes.realtime.router import router as realtime_router
from api.routes.users.router import router as users_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
    api_router.include_router(guess_status_router, prefix="/guess-status", tags=["guess-status"])
    api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
    api_router.include_router(nominees_router, prefix="/nominees", tags=["nominees"])
    api_router.include_router(users_router, prefix="/users", tags=["users"])

    # WebSocket (/ws/guess-status)
    api_router.include_router(realtime_router, tags=["realtime"])

    return api_router
