"""Settings de persistência do catálogo e dos palpites."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StoreBackend = Literal["memory", "redis"]

DEFAULT_KEY_PREFIX = "palpitheion"


@dataclass(frozen=True)
class StorageSettings:
    """Configurações de persistência.

    Attributes:
        backend: Backend dos stores (memory|redis)
        redis_url: URL de conexão Redis
        redis_key_prefix: Namespace das chaves no Redis
    """

    backend: StoreBackend = "memory"
    redis_url: str = ""
    redis_key_prefix: str = DEFAULT_KEY_PREFIX

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de persistência.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in {"memory", "redis"}:
            errors.append(f"STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append("STORE_BACKEND=memory proibido em staging/production. Use Redis.")

        if self.backend == "redis" and not self.redis_url:
            errors.append("STORE_BACKEND=redis requer REDIS_URL configurado")

        if not self.redis_key_prefix:
            errors.append("REDIS_KEY_PREFIX não pode ser vazio")

        return errors


def _load_storage_from_env() -> StorageSettings:
    """Carrega StorageSettings de variáveis de ambiente."""
    backend_str = os.getenv("STORE_BACKEND", "memory").lower()
    backend: StoreBackend = backend_str if backend_str in ("memory", "redis") else "memory"
    return StorageSettings(
        backend=backend,
        redis_url=os.getenv("REDIS_URL", ""),
        redis_key_prefix=os.getenv("REDIS_KEY_PREFIX", DEFAULT_KEY_PREFIX),
    )


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Retorna instância cacheada de StorageSettings."""
    return _load_storage_from_env()
