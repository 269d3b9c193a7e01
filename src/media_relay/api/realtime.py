"""WebSocket endpoint for upload notifications."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

if TYPE_CHECKING:
    from media_relay.containers import AppContainer

router = APIRouter()


@router.websocket("/ws")
async def notifications(websocket: WebSocket) -> None:
    """Hold the socket open and deliver newImage events until it closes."""
    container: AppContainer = websocket.app.state.container
    hub = container.notification_hub
    await hub.connect(websocket)
    try:
        while True:
            # Client messages carry nothing; reading detects the disconnect.
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        hub.disconnect(websocket)
