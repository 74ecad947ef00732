from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from services.hub import HubService


def build_hub_router(hub_service: HubService) -> APIRouter:
    router = APIRouter(
        prefix="/hubs",
        tags=["Hubs"],
    )

    @router.websocket("/grapes", name="grape_hub")
    async def grape_hub(websocket: WebSocket):
        """Clients stay connected here to receive grape change events."""
        await hub_service.connect(websocket)
        try:
            # Inbound messages are ignored; this only waits for the close
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            pass
        finally:
            hub_service.disconnect(websocket)

    return router
