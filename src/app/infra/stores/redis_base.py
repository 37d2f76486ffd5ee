"""Base dos repositórios Redis: namespace de chaves e erros de conexão."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from redis.exceptions import RedisError

from utils.errors import StoreUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable

    from redis import Redis
    from redis.client import Pipeline

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "palpitheion"

T = TypeVar("T")


class RedisKeyspace:
    """Cliente Redis + prefixo de chaves compartilhado pelos repositórios.

    Args:
        redis_client: Cliente Redis síncrono
        key_prefix: Namespace das chaves
    """

    def __init__(self, redis_client: Redis[bytes], key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, name: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}:{name}"

    def _call(self, operation: str, command: Callable[[], T]) -> T:
        try:
            return command()
        except RedisError as exc:
            logger.warning(
                "redis_store_unavailable",
                extra={"operation": operation, "error_type": type(exc).__name__},
            )
            raise StoreUnavailableError(f"Falha ao executar {operation} no Redis") from exc

    def _transaction(self, operation: str, func: Callable[[Pipeline], T], *names: str) -> T:
        """Executa `func` sob WATCH das chaves e retorna seu valor."""
        watched = [self._key(name) for name in names]
        return self._call(
            operation,
            lambda: self._redis.transaction(func, *watched, value_from_callable=True),
        )
