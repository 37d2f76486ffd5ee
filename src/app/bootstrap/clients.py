"""Clientes Redis compartilhados pelo processo (um por URL)."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

import redis

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

REDIS_SOCKET_TIMEOUT_SECONDS = 5.0
REDIS_HEALTH_CHECK_INTERVAL_SECONDS = 30

_clients: dict[str, Redis[bytes]] = {}
_clients_lock = threading.Lock()


def create_redis_client(redis_url: str) -> Redis[bytes]:
    """Retorna o cliente Redis da URL, criando-o no primeiro uso.

    Raises:
        ValueError: URL vazia.
    """
    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    with _clients_lock:
        client = _clients.get(redis_url)
        if client is None:
            client = redis.from_url(
                redis_url,
                decode_responses=False,
                socket_timeout=REDIS_SOCKET_TIMEOUT_SECONDS,
                socket_connect_timeout=REDIS_SOCKET_TIMEOUT_SECONDS,
                health_check_interval=REDIS_HEALTH_CHECK_INTERVAL_SECONDS,
                retry_on_timeout=True,
                client_name="palpitheion",
            )
            _clients[redis_url] = client
            host = client.connection_pool.connection_kwargs.get("host", "unknown")
            logger.info("redis_client_created", extra={"host": host})
    return client


def close_redis_clients() -> int:
    """Fecha os clientes abertos (shutdown). Retorna quantos foram fechados."""
    with _clients_lock:
        clients = list(_clients.values())
        _clients.clear()

    for client in clients:
        try:
            client.close()
        except redis.RedisError as exc:
            logger.warning("redis_client_close_failed", extra={"error_type": type(exc).__name__})
    if clients:
        logger.info("redis_clients_closed", extra={"count": len(clients)})
    return len(clients)
