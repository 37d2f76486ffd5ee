"""Testes do RedisIdentityProvider com mock."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from app.infra.identity import RedisIdentityProvider
from app.protocols.identity import ROLE_ADMIN, ROLE_USER
from utils.errors import StoreUnavailableError

PREFIX = "palpitheion"
USERS = f"{PREFIX}:users"
USER_NAMES = f"{PREFIX}:user_names"
ROLES = f"{PREFIX}:roles"


def _mock_redis() -> tuple[MagicMock, dict[str, dict[str, bytes]], set[str]]:
    """Cliente e pipeline mockados sobre hashes/set em memória."""
    hashes: dict[str, dict[str, bytes]] = {}
    roles: set[str] = set()

    def hset(key: str, field: str, value: str) -> int:
        hashes.setdefault(key, {})[field] = value.encode("utf-8")
        return 1

    pipe = MagicMock()
    pipe.hget.side_effect = lambda key, field: hashes.get(key, {}).get(field)
    pipe.hexists.side_effect = lambda key, field: field in hashes.get(key, {})
    pipe.hset.side_effect = hset
    pipe.sismember.side_effect = lambda key, member: key == ROLES and member in roles

    redis_client = MagicMock()
    redis_client.hget.side_effect = pipe.hget.side_effect
    redis_client.hgetall.side_effect = lambda key: dict(hashes.get(key, {}))
    redis_client.sadd.side_effect = lambda key, member: roles.add(member)
    redis_client.transaction.side_effect = (
        lambda func, *keys, value_from_callable=False: func(pipe)
    )
    return redis_client, hashes, roles


class TestRedisIdentityProvider:
    """Usuários, senhas e roles persistidos em Redis."""

    def test_create_and_find_case_insensitive(self) -> None:
        redis_client, hashes, _ = _mock_redis()
        provider = RedisIdentityProvider(redis_client)

        result = provider.create_user("  Maria ", "senha123")

        assert result.succeeded is True
        assert result.user is not None
        assert hashes[USER_NAMES]["maria"] == result.user.id.encode("utf-8")
        stored = json.loads(hashes[USERS][result.user.id])
        assert stored["name"] == "Maria"
        assert stored["password_hash"].startswith("scrypt$")
        assert provider.find_user_by_name("MARIA") == result.user
        assert provider.find_user_by_id(result.user.id) == result.user

    def test_create_watches_name_index(self) -> None:
        redis_client, _, _ = _mock_redis()

        RedisIdentityProvider(redis_client, key_prefix="bolao").create_user("ana", "senha123")

        args, kwargs = redis_client.transaction.call_args
        assert args[1:] == ("bolao:user_names",)
        assert kwargs == {"value_from_callable": True}

    def test_duplicate_name_fails_without_writes(self) -> None:
        redis_client, hashes, _ = _mock_redis()
        provider = RedisIdentityProvider(redis_client)
        provider.create_user("maria", "senha123")

        result = provider.create_user("Maria", "outra123")

        assert result.succeeded is False
        assert "já está em uso" in result.errors[0]
        assert len(hashes[USERS]) == 1

    def test_invalid_credentials_skip_redis(self) -> None:
        redis_client, _, _ = _mock_redis()

        result = RedisIdentityProvider(redis_client).create_user(" ", "123")

        assert result.succeeded is False
        assert len(result.errors) == 2
        redis_client.transaction.assert_not_called()

    def test_verify_password(self) -> None:
        redis_client, _, _ = _mock_redis()
        provider = RedisIdentityProvider(redis_client)
        user = provider.create_user("joao", "senha123").user
        assert user is not None

        assert provider.verify_password(user, "senha123") is True
        assert provider.verify_password(user, "errada") is False

    def test_add_to_role_requires_existing_role(self) -> None:
        redis_client, _, roles = _mock_redis()
        provider = RedisIdentityProvider(redis_client)
        user = provider.create_user("ana", "senha123").user
        assert user is not None

        assert provider.add_to_role(user, ROLE_USER).succeeded is False

        provider.ensure_role(ROLE_USER)
        provider.ensure_role(ROLE_ADMIN)
        assert roles == {ROLE_USER, ROLE_ADMIN}
        assert provider.add_to_role(user, ROLE_USER).succeeded is True
        assert provider.add_to_role(user, ROLE_ADMIN).succeeded is True
        assert provider.add_to_role(user, ROLE_ADMIN).succeeded is True
        assert provider.get_roles(user) == [ROLE_ADMIN, ROLE_USER]

    def test_list_users_sorted_by_name(self) -> None:
        redis_client, _, _ = _mock_redis()
        provider = RedisIdentityProvider(redis_client)
        for name in ("carla", "Bruno", "ana"):
            provider.create_user(name, "senha123")

        assert [u.name for u in provider.list_users()] == ["ana", "Bruno", "carla"]

    def test_unknown_user_lookups(self) -> None:
        redis_client, _, _ = _mock_redis()
        provider = RedisIdentityProvider(redis_client)

        assert provider.find_user_by_name("ninguem") is None
        assert provider.find_user_by_id("nao-existe") is None

    def test_redis_error_becomes_store_unavailable(self) -> None:
        redis_client = MagicMock()
        redis_client.hget.side_effect = RedisConnectionError("down")

        with pytest.raises(StoreUnavailableError, match="find_user_by_name"):
            RedisIdentityProvider(redis_client).find_user_by_name("maria")
