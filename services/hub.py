from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import WebSocket

from services.results import OperationResult

logger = logging.getLogger(__name__)

GRAPE_CHANGED_EVENT: Dict[str, Any] = {"event": "GrapeChanged"}


class HubService:
    """
    Fan-out of grape change events to connected WebSocket clients.
    """

    def __init__(self):
        self._connections: List[WebSocket] = []

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        # Only accepted sockets may be sent to; an event before this point is missed
        await websocket.accept()
        self._connections.append(websocket)
        logger.info("Hub client connected (%d total)", self.connection_count)

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self._connections:
            self._connections.remove(websocket)
            logger.info("Hub client disconnected (%d total)", self.connection_count)

    async def send_grape_message(self) -> OperationResult[None]:
        """Broadcast the grape-changed event to every client."""
        # Copy: a failing client is removed while iterating
        for websocket in list(self._connections):
            try:
                await websocket.send_json(GRAPE_CHANGED_EVENT)
            except Exception as e:
                logger.warning("Dropping hub client after failed send: %s", e)
                self.disconnect(websocket)

        return OperationResult.success()
