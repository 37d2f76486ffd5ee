"""Fronteira de autenticação: login, registro, seed do admin e tokens.

Sem IO direto: usa os protocolos de identidade e de emissão de token.
Nunca loga senhas nem tokens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.models import User
from app.protocols.identity import DEFAULT_ROLES, ROLE_ADMIN, ROLE_USER
from utils.errors import AuthenticationError, ConflictError, ValidationError

if TYPE_CHECKING:
    from app.protocols.identity import IdentityProviderProtocol, TokenIssuerProtocol

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid user or password"


@dataclass(frozen=True, slots=True)
class AuthSession:
    """Resposta de login/registro."""

    token: str
    user_name: str
    roles: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Principal:
    """Usuário autenticado extraído de um token válido."""

    user: User
    roles: tuple[str, ...]

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles


class AuthService:
    """Casos de uso de autenticação."""

    def __init__(self, identity: IdentityProviderProtocol, tokens: TokenIssuerProtocol) -> None:
        self._identity = identity
        self._tokens = tokens

    def _session(self, user: User) -> AuthSession:
        roles = self._identity.get_roles(user)
        return AuthSession(
            token=self._tokens.issue_token(user, roles),
            user_name=user.name,
            roles=tuple(roles),
        )

    def login(self, name: str, password: str) -> AuthSession:
        """Valida credenciais e emite token.

        Raises:
            AuthenticationError: Usuário inexistente ou senha incorreta
                (mesma mensagem para ambos).
        """
        user = self._identity.find_user_by_name(name or "")
        if user is None or not self._identity.verify_password(user, password or ""):
            logger.info("login_failed")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("login_succeeded", extra={"user_id": user.id})
        return self._session(user)

    def register(self, name: str, password: str) -> AuthSession:
        """Cria usuário com a role padrão e emite token.

        Falha ao atribuir a role padrão não aborta o registro: é logada
        como warning e o usuário segue sem role.

        Raises:
            ConflictError: Nome já em uso.
            ValidationError: Nome vazio ou senha fraca.
        """
        if name and self._identity.find_user_by_name(name) is not None:
            raise ConflictError("Nome de usuário já está em uso.")

        result = self._identity.create_user(name or "", password or "")
        if not result.succeeded or result.user is None:
            if name and self._identity.find_user_by_name(name) is not None:
                raise ConflictError("Nome de usuário já está em uso.")
            raise ValidationError(" ".join(result.errors) or "Dados de registro inválidos.")

        user = result.user
        role_result = self._identity.add_to_role(user, ROLE_USER)
        if not role_result.succeeded:
            logger.warning(
                "default_role_assignment_failed",
                extra={"user_id": user.id, "role": ROLE_USER, "errors": list(role_result.errors)},
            )

        logger.info("user_registered", extra={"user_id": user.id})
        return self._session(user)

    def seed(self, admin_name: str | None = None, admin_password: str | None = None) -> User | None:
        """Garante as roles padrão e, se configurado, o usuário admin."""
        for role in DEFAULT_ROLES:
            self._identity.ensure_role(role)

        if not admin_name or not admin_password:
            logger.info("admin_seed_skipped")
            return None

        admin = self._identity.find_user_by_name(admin_name)
        if admin is None:
            result = self._identity.create_user(admin_name, admin_password)
            if not result.succeeded or result.user is None:
                msg = f"Falha ao criar admin: {' '.join(result.errors)}"
                raise ValidationError(msg)
            admin = result.user

        if ROLE_ADMIN not in self._identity.get_roles(admin):
            self._identity.add_to_role(admin, ROLE_ADMIN)

        logger.info("admin_seeded", extra={"user_id": admin.id})
        return admin

    def authenticate(self, token: str) -> Principal:
        """Valida o token e resolve o usuário.

        Raises:
            AuthenticationError: Token inválido ou usuário removido.
        """
        claims = self._tokens.verify_token(token)
        user = self._identity.find_user_by_id(str(claims["uid"]))
        if user is None:
            raise AuthenticationError("Usuário do token não existe")
        roles = claims.get("roles") or []
        return Principal(user=user, roles=tuple(str(role) for role in roles))
