"""Provedores de identidade."""

from app.infra.identity.memory_identity import MIN_PASSWORD_LENGTH, MemoryIdentityProvider
from app.infra.identity.redis_identity import RedisIdentityProvider

__all__ = ["MIN_PASSWORD_LENGTH", "MemoryIdentityProvider", "RedisIdentityProvider"]
