"""Provedor de identidade em Redis: usuários, senhas (scrypt) e roles.

Chaves:
    {prefix}:users       hash  user_id -> {"id", "name", "password_hash", "roles"}
    {prefix}:user_names  hash  nome normalizado -> user_id
    {prefix}:roles       set   roles existentes

Cadastro e atribuição de role rodam em transação otimista (WATCH/MULTI/EXEC):
dois registros concorrentes com o mesmo nome não passam, mesmo entre réplicas.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import TYPE_CHECKING, Any

from app.domain.models import User
from app.infra.crypto import hash_password, verify_password
from app.infra.identity.credentials import (
    MIN_PASSWORD_LENGTH,
    credential_errors,
    name_taken_error,
    normalize_name,
)
from app.infra.stores.redis_base import DEFAULT_KEY_PREFIX, RedisKeyspace
from app.protocols.identity import IdentityProviderProtocol, IdentityResult

if TYPE_CHECKING:
    from redis import Redis
    from redis.client import Pipeline

logger = logging.getLogger(__name__)

USERS = "users"
USER_NAMES = "user_names"
ROLES = "roles"


def _decode(raw: bytes | str) -> str:
    return raw.decode("utf-8") if isinstance(raw, bytes) else raw


def _user(record: dict[str, Any]) -> User:
    return User(id=record["id"], name=record["name"])


class RedisIdentityProvider(RedisKeyspace, IdentityProviderProtocol):
    """Usuários e roles persistidos em Redis (staging/production)."""

    def __init__(
        self,
        redis_client: Redis[bytes],
        key_prefix: str = DEFAULT_KEY_PREFIX,
        min_password_length: int = MIN_PASSWORD_LENGTH,
    ) -> None:
        super().__init__(redis_client, key_prefix)
        self._min_password_length = min_password_length

    def _record(self, client: Any, user_id: str) -> dict[str, Any] | None:
        raw = client.hget(self._key(USERS), user_id)
        return json.loads(raw) if raw is not None else None

    def find_user_by_name(self, name: str) -> User | None:
        raw_id = self._call(
            "find_user_by_name",
            lambda: self._redis.hget(self._key(USER_NAMES), normalize_name(name)),
        )
        return self.find_user_by_id(_decode(raw_id)) if raw_id is not None else None

    def find_user_by_id(self, user_id: str) -> User | None:
        record = self._call("find_user_by_id", lambda: self._record(self._redis, user_id))
        return _user(record) if record is not None else None

    def list_users(self) -> list[User]:
        raw = self._call("list_users", lambda: self._redis.hgetall(self._key(USERS))) or {}
        users = [_user(json.loads(value)) for value in raw.values()]
        return sorted(users, key=lambda u: u.name.casefold())

    def verify_password(self, user: User, password: str) -> bool:
        record = self._call("verify_password", lambda: self._record(self._redis, user.id))
        if record is None:
            return False
        return verify_password(password, record["password_hash"])

    def create_user(self, name: str, password: str) -> IdentityResult:
        clean_name = name.strip()
        errors = credential_errors(clean_name, password, self._min_password_length)
        if errors:
            return IdentityResult.failed(*errors)

        user = User(id=str(uuid.uuid4()), name=clean_name)
        record = {
            "id": user.id,
            "name": user.name,
            "password_hash": hash_password(password),
            "roles": [],
        }
        name_key = normalize_name(clean_name)

        def _create(pipe: Pipeline) -> bool:
            if pipe.hexists(self._key(USER_NAMES), name_key):
                return False
            pipe.multi()
            pipe.hset(self._key(USERS), user.id, json.dumps(record, ensure_ascii=False))
            pipe.hset(self._key(USER_NAMES), name_key, user.id)
            return True

        if not self._transaction("create_user", _create, USER_NAMES):
            return IdentityResult.failed(name_taken_error(clean_name))

        logger.info("user_created", extra={"user_id": user.id})
        return IdentityResult.ok(user)

    def ensure_role(self, role: str) -> None:
        self._call("ensure_role", lambda: self._redis.sadd(self._key(ROLES), role))

    def get_roles(self, user: User) -> list[str]:
        record = self._call("get_roles", lambda: self._record(self._redis, user.id))
        return sorted(record["roles"]) if record is not None else []

    def add_to_role(self, user: User, role: str) -> IdentityResult:
        def _add(pipe: Pipeline) -> str | None:
            if not pipe.sismember(self._key(ROLES), role):
                return f"Role '{role}' não existe."
            record = self._record(pipe, user.id)
            if record is None:
                return "Usuário não encontrado."
            if role not in record["roles"]:
                record["roles"] = sorted({*record["roles"], role})
                pipe.multi()
                pipe.hset(self._key(USERS), user.id, json.dumps(record, ensure_ascii=False))
            return None

        error = self._transaction("add_to_role", _add, ROLES, USERS)
        if error is not None:
            return IdentityResult.failed(error)
        return IdentityResult.ok(user)
