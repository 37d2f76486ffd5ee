"""Feed WebSocket de mudanças do gate de palpites.

Ao conectar, o cliente recebe o estado atual e, a seguir, um
`VisibilityChanged` por toggle, na ordem em que ocorreram:

    {"event": "VisibilityChanged", "payload": {"locked": true}}
"""

from __future__ import annotations

import logging

import anyio
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from app.infra.notifications import Subscription, WebSocketNotificationChannel
from app.protocols.notification import VISIBILITY_CHANGED_EVENT

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/guess-status")
async def guess_status_feed(websocket: WebSocket) -> None:
    container = websocket.app.state.container
    channel = container.channel
    if not isinstance(channel, WebSocketNotificationChannel):
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
        return

    # Assina antes do accept para não perder toggles concorrentes ao handshake
    subscription = channel.subscribe()
    try:
        await websocket.accept()
        await websocket.send_json(
            {"event": VISIBILITY_CHANGED_EVENT, "payload": {"locked": container.gate.get_status()}}
        )
        # Quem terminar primeiro (envio falhou ou cliente saiu) encerra o outro
        async with anyio.create_task_group() as task_group:

            async def forward_then_stop() -> None:
                await _forward(websocket, subscription)
                task_group.cancel_scope.cancel()

            task_group.start_soon(forward_then_stop)
            await _wait_disconnect(websocket)
            task_group.cancel_scope.cancel()
    except WebSocketDisconnect:
        pass
    finally:
        channel.unsubscribe(subscription)


async def _forward(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        message = await subscription.next_message()
        try:
            await websocket.send_json(message)
        except (WebSocketDisconnect, RuntimeError):
            logger.info(
                "notification_send_aborted",
                extra={"subscriber_id": subscription.subscriber_id},
            )
            return


async def _wait_disconnect(websocket: WebSocket) -> None:
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return
