"""Agregador de settings do Palpitheion.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Auth settings
from config.settings.auth import AuthSettings, get_auth_settings

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    NotificationSettings,
    StorageSettings,
    StoreBackend,
    get_base_settings,
    get_notification_settings,
    get_storage_settings,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    # Auth
    "AuthSettings",
    # Base
    "BaseSettings",
    "Environment",
    "NotificationSettings",
    "StorageSettings",
    "StoreBackend",
    "get_auth_settings",
    "get_base_settings",
    "get_notification_settings",
    "get_storage_settings",
]
