"""Canal de notificações para clientes WebSocket.

Cada conexão assina uma fila limitada presa ao seu event loop. O broadcast
não bloqueia: agenda a entrega com `loop.call_soon_threadsafe`, cuja fila
é FIFO, então cada assinante recebe os eventos na ordem em que foram
publicados. Fila cheia descarta a mensagem (com log) em vez de travar quem
publicou.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any

from app.protocols.notification import NotificationChannelProtocol

logger = logging.getLogger(__name__)

DEFAULT_QUEUE_SIZE = 64


@dataclass(eq=False, slots=True)
class Subscription:
    """Assinatura de um cliente conectado."""

    queue: asyncio.Queue[dict[str, Any]]
    loop: asyncio.AbstractEventLoop
    subscriber_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    async def next_message(self) -> dict[str, Any]:
        """Aguarda a próxima mensagem publicada."""
        return await self.queue.get()


class WebSocketNotificationChannel(NotificationChannelProtocol):
    """Fan-out de eventos para todas as conexões WebSocket abertas.

    Args:
        queue_size: Limite de mensagens pendentes por assinante
    """

    def __init__(self, queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        self._queue_size = queue_size
        self._lock = threading.Lock()
        self._subscriptions: set[Subscription] = set()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def subscribe(self) -> Subscription:
        """Registra assinante no event loop corrente (chamar dentro do loop)."""
        subscription = Subscription(
            queue=asyncio.Queue(maxsize=self._queue_size),
            loop=asyncio.get_running_loop(),
        )
        with self._lock:
            self._subscriptions.add(subscription)
            total = len(self._subscriptions)
        logger.info(
            "notification_subscribed",
            extra={"subscriber_id": subscription.subscriber_id, "subscribers": total},
        )
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            self._subscriptions.discard(subscription)
            total = len(self._subscriptions)
        logger.info(
            "notification_unsubscribed",
            extra={"subscriber_id": subscription.subscriber_id, "subscribers": total},
        )

    def broadcast(self, event: str, payload: dict[str, Any]) -> None:
        message = {"event": event, "payload": dict(payload)}
        with self._lock:
            subscriptions = list(self._subscriptions)

        for subscription in subscriptions:
            try:
                subscription.loop.call_soon_threadsafe(self._offer, subscription, message)
            except RuntimeError:
                # Loop encerrado: a conexão já morreu sem cancelar a assinatura
                logger.warning(
                    "notification_subscriber_gone",
                    extra={"subscriber_id": subscription.subscriber_id, "event": event},
                )
                self.unsubscribe(subscription)

        logger.debug(
            "notification_broadcast",
            extra={"event": event, "subscribers": len(subscriptions)},
        )

    @staticmethod
    def _offer(subscription: Subscription, message: dict[str, Any]) -> None:
        try:
            subscription.queue.put_nowait(message)
        except asyncio.QueueFull:
            logger.warning(
                "notification_dropped",
                extra={
                    "subscriber_id": subscription.subscriber_id,
                    "event": message.get("event"),
                    "reason": "queue_full",
                },
            )
