"""Open websocket connections of one match, used to push messages to the players."""

import logging

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self) -> None:
        self._connections: dict[str, WebSocket] = {}

    def add(self, connection_id: str, websocket: WebSocket) -> None:
        self._connections[connection_id] = websocket

    def remove(self, connection_id: str) -> None:
        self._connections.pop(connection_id, None)

    async def send(self, connection_id: str, message: BaseModel) -> None:
        websocket = self._connections.get(connection_id)
        if websocket is None:
            return
        try:
            await websocket.send_json(message.model_dump(mode="json"))
        except (WebSocketDisconnect, RuntimeError, OSError) as exc:
            # Stop talking to this client. Its own read loop will clean up the slot.
            logger.warning("Dropping connection %s after failed send: %s", connection_id, exc)
            self.remove(connection_id)

    async def broadcast(self, message: BaseModel) -> None:
        for connection_id in list(self._connections):
            await self.send(connection_id, message)
