"""Endpoints de autenticação.

- POST /auth/login: credenciais -> token
- POST /auth/register: cria usuário com role padrão -> token
"""

from __future__ import annotations

from fastapi import APIRouter, status

from api.dependencies import Container
from api.schemas import AuthResponse, CredentialsRequest

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
def login(body: CredentialsRequest, container: Container) -> AuthResponse:
    return AuthResponse.from_session(container.auth.login(body.user_name, body.password))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(body: CredentialsRequest, container: Container) -> AuthResponse:
    return AuthResponse.from_session(container.auth.register(body.user_name, body.password))
