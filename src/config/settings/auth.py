"""Settings de autenticação: assinatura de tokens e seed do admin."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

# Usado apenas em development/test quando JWT_SECRET não é definido
DEV_JWT_SECRET = "palpitheion-dev-secret"
MIN_SECRET_LENGTH = 32


@dataclass(frozen=True)
class AuthSettings:
    """Configurações de autenticação.

    Attributes:
        jwt_secret: Chave HMAC de assinatura dos tokens
        jwt_issuer: Claim `iss` (opcional)
        jwt_audience: Claim `aud` (opcional)
        jwt_expiration_days: Validade do token em dias
        admin_username: Usuário admin criado no startup (opcional)
        admin_password: Senha do admin (opcional)
    """

    jwt_secret: str = ""
    jwt_issuer: str = ""
    jwt_audience: str = ""
    jwt_expiration_days: int = 1
    admin_username: str = ""
    admin_password: str = ""

    @property
    def token_expiration(self) -> timedelta:
        return timedelta(days=self.jwt_expiration_days)

    def signing_secret(self, base: BaseSettings) -> str:
        """Segredo efetivo; cai no segredo de dev apenas em ambiente local."""
        if self.jwt_secret:
            return self.jwt_secret
        return DEV_JWT_SECRET if base.is_development else ""

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de autenticação.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not base.is_development:
            if not self.jwt_secret:
                errors.append("JWT_SECRET obrigatório em staging/production")
            elif len(self.jwt_secret) < MIN_SECRET_LENGTH:
                errors.append(f"JWT_SECRET deve ter ao menos {MIN_SECRET_LENGTH} caracteres")

        if self.jwt_expiration_days <= 0:
            errors.append("JWT_EXPIRATION_DAYS deve ser > 0")

        if bool(self.admin_username) != bool(self.admin_password):
            errors.append("ADMIN_USERNAME e ADMIN_PASSWORD devem ser definidos juntos")

        return errors


def _load_auth_from_env() -> AuthSettings:
    """Carrega AuthSettings de variáveis de ambiente."""
    return AuthSettings(
        jwt_secret=os.getenv("JWT_SECRET", ""),
        jwt_issuer=os.getenv("JWT_ISSUER", ""),
        jwt_audience=os.getenv("JWT_AUDIENCE", ""),
        jwt_expiration_days=int(os.getenv("JWT_EXPIRATION_DAYS", "1")),
        admin_username=os.getenv("ADMIN_USERNAME", ""),
        admin_password=os.getenv("ADMIN_PASSWORD", ""),
    )


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Retorna instância cacheada de AuthSettings."""
    return _load_auth_from_env()
