"""Protocolos e contratos do core da aplicação."""

from .catalog_store import CatalogStoreProtocol
from .guess_store import GuessStoreProtocol
from .identity import (
    DEFAULT_ROLES,
    ROLE_ADMIN,
    ROLE_USER,
    IdentityProviderProtocol,
    IdentityResult,
    TokenIssuerProtocol,
)
from .notification import VISIBILITY_CHANGED_EVENT, NotificationChannelProtocol

__all__ = [
    "DEFAULT_ROLES",
    "ROLE_ADMIN",
    "ROLE_USER",
    "VISIBILITY_CHANGED_EVENT",
    "CatalogStoreProtocol",
    "GuessStoreProtocol",
    "IdentityProviderProtocol",
    "IdentityResult",
    "NotificationChannelProtocol",
    "TokenIssuerProtocol",
]
