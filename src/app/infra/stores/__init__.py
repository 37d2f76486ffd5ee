"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: catálogo e palpites em memória (desenvolvimento/testes)
    - redis_stores: catálogo e palpites em Redis (staging/production)
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryPalpiteStore
from app.infra.stores.redis_stores import RedisPalpiteStore

__all__ = [
    "MemoryPalpiteStore",
    "RedisPalpiteStore",
]
