"""Live notification endpoint."""

from fastapi import APIRouter, Depends, WebSocket

from app.api.deps import get_connection_manager
from app.services.connection_manager import ConnectionManager

router = APIRouter()


@router.websocket("/")
async def notifications(
    websocket: WebSocket,
    manager: ConnectionManager = Depends(get_connection_manager),
) -> None:
    """
    Receive every newly created item as a JSON text message.

    Nothing is sent on connect and client messages are ignored.
    """
    await manager.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        manager.disconnect(websocket)
