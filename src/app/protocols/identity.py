"""Protocolos do provedor de identidade e do emissor de tokens.

O core trata User como par opaco (id, nome); armazenamento de senha e
formato do token ficam por conta das implementações.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from app.domain.models import User

ROLE_ADMIN = "Admin"
ROLE_USER = "Usuario"
DEFAULT_ROLES = (ROLE_ADMIN, ROLE_USER)


@dataclass(frozen=True, slots=True)
class IdentityResult:
    """Resultado de operações do provedor de identidade."""

    succeeded: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
    user: User | None = None

    @classmethod
    def ok(cls, user: User | None = None) -> IdentityResult:
        return cls(succeeded=True, user=user)

    @classmethod
    def failed(cls, *errors: str) -> IdentityResult:
        return cls(succeeded=False, errors=tuple(errors))


class IdentityProviderProtocol(ABC):
    """Contrato do provedor de identidade (usuários, senhas e roles)."""

    @abstractmethod
    def find_user_by_name(self, name: str) -> User | None: ...

    @abstractmethod
    def find_user_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    def list_users(self) -> list[User]: ...

    @abstractmethod
    def verify_password(self, user: User, password: str) -> bool: ...

    @abstractmethod
    def create_user(self, name: str, password: str) -> IdentityResult: ...

    @abstractmethod
    def ensure_role(self, role: str) -> None:
        """Cria a role se ainda não existir."""

    @abstractmethod
    def get_roles(self, user: User) -> list[str]: ...

    @abstractmethod
    def add_to_role(self, user: User, role: str) -> IdentityResult: ...


class TokenIssuerProtocol(ABC):
    """Contrato do emissor de tokens de acesso."""

    @abstractmethod
    def issue_token(self, user: User, roles: list[str]) -> str: ...

    @abstractmethod
    def verify_token(self, token: str) -> dict[str, Any]:
        """Valida o token e retorna as claims.

        Raises:
            AuthenticationError: Token inválido, expirado ou adulterado.
        """
