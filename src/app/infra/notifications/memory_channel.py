"""Canal de notificações em memória: registra eventos para testes."""

from __future__ import annotations

import threading
from typing import Any

from app.protocols.notification import NotificationChannelProtocol


class MemoryNotificationChannel(NotificationChannelProtocol):
    """Guarda cada broadcast na ordem recebida (apenas dev/test)."""

    def __init__(self, max_events: int = 10000) -> None:
        self._lock = threading.Lock()
        self._events: list[tuple[str, dict[str, Any]]] = []
        self._max_events = max_events

    def broadcast(self, event: str, payload: dict[str, Any]) -> None:
        with self._lock:
            self._events.append((event, dict(payload)))
            # Limita tamanho para evitar memory leak em dev
            if len(self._events) > self._max_events:
                self._events = self._events[-self._max_events :]

    def get_events(self) -> list[tuple[str, dict[str, Any]]]:
        """Retorna todos os eventos (apenas para testes)."""
        with self._lock:
            return list(self._events)
