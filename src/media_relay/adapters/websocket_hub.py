"""In-process fan-out to connected WebSocket clients."""

import asyncio
import logging
from dataclasses import dataclass, field

from fastapi import WebSocket

from media_relay.services.uploads import NotificationChannel

logger = logging.getLogger(__name__)


@dataclass
class WebSocketHub(NotificationChannel):
    """Tracks open sockets and broadcasts events to all of them.

    Delivery is at-most-once: a socket that fails to receive is dropped and
    nothing is queued for clients that connect later.
    """

    connections: set[WebSocket] = field(default_factory=set)
    send_timeout: float = 5.0

    async def connect(self, websocket: WebSocket) -> None:
        """Accept a socket and start delivering events to it."""
        await websocket.accept()
        self.connections.add(websocket)
        logger.info("Client connected", extra={"clients": len(self.connections)})

    def disconnect(self, websocket: WebSocket) -> None:
        """Stop delivering events to a socket."""
        if websocket in self.connections:
            self.connections.discard(websocket)
            logger.info(
                "Client disconnected", extra={"clients": len(self.connections)}
            )

    async def broadcast(self, event: str, payload: dict[str, str]) -> None:
        """Send an event to every connected socket concurrently.

        Each send is bounded by ``send_timeout``; sockets that stall or fail
        are dropped so one slow client cannot hold up the others.
        """
        message = {"event": event, "data": payload}
        targets = list(self.connections)
        results = await asyncio.gather(
            *(self._send(websocket, message) for websocket in targets),
            return_exceptions=True,
        )
        for websocket, result in zip(targets, results, strict=True):
            if isinstance(result, BaseException):
                logger.warning(
                    "Dropping unreachable client: %s",
                    type(result).__name__,
                    extra={"event": event},
                )
                self.disconnect(websocket)

    async def _send(self, websocket: WebSocket, message: dict[str, object]) -> None:
        await asyncio.wait_for(websocket.send_json(message), timeout=self.send_timeout)

    async def close(self) -> None:
        """Close every open socket."""
        for websocket in list(self.connections):
            try:
                await websocket.close()
            except RuntimeError:
                logger.debug("Socket already closed")
            self.disconnect(websocket)
