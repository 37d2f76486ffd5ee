"""Settings do canal de notificação em tempo real."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class NotificationSettings:
    """Configurações do canal WebSocket.

    Attributes:
        queue_size: Limite da fila por assinante (mensagens excedentes são descartadas)
    """

    queue_size: int = 64

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.queue_size < 1:
            errors.append("NOTIFICATION_QUEUE_SIZE deve ser >= 1")
        return errors


@lru_cache(maxsize=1)
def get_notification_settings() -> NotificationSettings:
    """Retorna instância cacheada de NotificationSettings."""
    return NotificationSettings(queue_size=int(os.getenv("NOTIFICATION_QUEUE_SIZE", "64")))
