"""Protocolo do canal de notificações em tempo real."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

VISIBILITY_CHANGED_EVENT = "VisibilityChanged"


class NotificationChannelProtocol(ABC):
    """Contrato de broadcast para todos os clientes conectados.

    `broadcast` nunca bloqueia o chamador: a entrega é best-effort e
    desacoplada do estado que originou o evento.
    """

    @abstractmethod
    def broadcast(self, event: str, payload: dict[str, Any]) -> None: ...
