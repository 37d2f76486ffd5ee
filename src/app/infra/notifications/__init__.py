"""Canais de notificação em tempo real."""

from app.infra.notifications.memory_channel import MemoryNotificationChannel
from app.infra.notifications.websocket_channel import (
    DEFAULT_QUEUE_SIZE,
    Subscription,
    WebSocketNotificationChannel,
)

__all__ = [
    "DEFAULT_QUEUE_SIZE",
    "MemoryNotificationChannel",
    "Subscription",
    "WebSocketNotificationChannel",
]
