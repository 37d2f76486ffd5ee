"""Provedor de identidade em memória: usuários, senhas (scrypt) e roles.

ATENÇÃO: Sem persistência entre reinícios. Em staging/production o
container usa `RedisIdentityProvider`.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field

from app.domain.models import User
from app.infra.crypto import hash_password, verify_password
from app.infra.identity.credentials import (
    MIN_PASSWORD_LENGTH,
    credential_errors,
    name_taken_error,
    normalize_name,
)
from app.protocols.identity import IdentityProviderProtocol, IdentityResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _UserRecord:
    user: User
    password_hash: str
    roles: set[str] = field(default_factory=set)


class MemoryIdentityProvider(IdentityProviderProtocol):
    """Provedor de identidade em memória (apenas dev/test)."""

    def __init__(self, min_password_length: int = MIN_PASSWORD_LENGTH) -> None:
        self._lock = threading.RLock()
        self._records: dict[str, _UserRecord] = {}  # user_id -> record
        self._ids_by_name: dict[str, str] = {}  # nome normalizado -> user_id
        self._roles: set[str] = set()
        self._min_password_length = min_password_length

    def find_user_by_name(self, name: str) -> User | None:
        with self._lock:
            user_id = self._ids_by_name.get(normalize_name(name))
            return self._records[user_id].user if user_id else None

    def find_user_by_id(self, user_id: str) -> User | None:
        with self._lock:
            record = self._records.get(user_id)
            return record.user if record else None

    def list_users(self) -> list[User]:
        with self._lock:
            return sorted((r.user for r in self._records.values()), key=lambda u: u.name.casefold())

    def verify_password(self, user: User, password: str) -> bool:
        with self._lock:
            record = self._records.get(user.id)
        if record is None:
            return False
        return verify_password(password, record.password_hash)

    def create_user(self, name: str, password: str) -> IdentityResult:
        clean_name = name.strip()
        errors = credential_errors(clean_name, password, self._min_password_length)
        if errors:
            return IdentityResult.failed(*errors)

        password_hash = hash_password(password)
        with self._lock:
            if normalize_name(clean_name) in self._ids_by_name:
                return IdentityResult.failed(name_taken_error(clean_name))
            user = User(id=str(uuid.uuid4()), name=clean_name)
            self._records[user.id] = _UserRecord(user=user, password_hash=password_hash)
            self._ids_by_name[normalize_name(clean_name)] = user.id

        logger.info("user_created", extra={"user_id": user.id})
        return IdentityResult.ok(user)

    def ensure_role(self, role: str) -> None:
        with self._lock:
            self._roles.add(role)

    def get_roles(self, user: User) -> list[str]:
        with self._lock:
            record = self._records.get(user.id)
            return sorted(record.roles) if record else []

    def add_to_role(self, user: User, role: str) -> IdentityResult:
        with self._lock:
            if role not in self._roles:
                return IdentityResult.failed(f"Role '{role}' não existe.")
            record = self._records.get(user.id)
            if record is None:
                return IdentityResult.failed("Usuário não encontrado.")
            record.roles.add(role)
        return IdentityResult.ok(user)
