"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    InfrastructureError,
    NotFoundError,
    PalpitheionError,
    StoreUnavailableError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "ForbiddenError",
    "InfrastructureError",
    "NotFoundError",
    "PalpitheionError",
    "StoreUnavailableError",
    "ValidationError",
]
