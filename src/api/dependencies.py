"""Dependências FastAPI: container, usuário autenticado e role Admin."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.bootstrap.dependencies import AppContainer
from app.services import Principal
from utils.errors import AuthenticationError, ForbiddenError

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_container(request: Request) -> AppContainer:
    """Container montado no startup (`app.state.container`)."""
    return request.app.state.container


Container = Annotated[AppContainer, Depends(get_app_container)]


def current_user(
    container: Container,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Principal:
    """Resolve o usuário do header `Authorization: Bearer <token>`.

    Raises:
        AuthenticationError: Header ausente ou token inválido.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Token de acesso ausente")
    return container.auth.authenticate(credentials.credentials)


CurrentUser = Annotated[Principal, Depends(current_user)]


def require_admin(principal: CurrentUser) -> Principal:
    """Exige role Admin.

    Raises:
        ForbiddenError: Usuário sem role Admin.
    """
    if not principal.is_admin:
        raise ForbiddenError("Operação restrita a administradores.")
    return principal


AdminUser = Annotated[Principal, Depends(require_admin)]
