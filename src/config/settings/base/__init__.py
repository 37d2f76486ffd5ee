"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.notifications import (
    NotificationSettings,
    get_notification_settings,
)
from config.settings.base.storage import (
    StorageSettings,
    StoreBackend,
    get_storage_settings,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    # Core
    "BaseSettings",
    # Types
    "Environment",
    # Notificações
    "NotificationSettings",
    # Persistência
    "StorageSettings",
    "StoreBackend",
    "get_base_settings",
    "get_notification_settings",
    "get_storage_settings",
]
