"""
WebSocket endpoint for live asset updates.

WS /ws/assets/{asset_id} - the asset's snapshot after every simulation tick

The socket holds one engine subscription for its lifetime. It is
cancelled when the handler ends, whether the client closed the socket,
a send failed, or the server shut the connection down. A client that
simply goes away is noticed on the next send.
"""

import asyncio
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from api.deps import asset_to_response
from core.assets import MonitoredAsset

router = APIRouter()
logger = logging.getLogger(__name__)

# Snapshots buffered per client before the oldest are dropped
MAX_PENDING_UPDATES = 16


@router.websocket("/ws/assets/{asset_id}")
async def ws_asset_updates(websocket: WebSocket, asset_id: str):
    """
    Real-time snapshot stream for one asset.

    Sends the current snapshot on connect, then one message per tick.
    Unknown assets are refused with close code 4404.
    """
    await websocket.accept()
    engine = websocket.app.state.engine

    current = engine.registry.get(asset_id)
    if current is None:
        logger.info("WS refused: no BMS data for asset=%s", asset_id)
        await websocket.close(code=4404)
        return

    loop = asyncio.get_running_loop()
    pending: asyncio.Queue = asyncio.Queue(maxsize=MAX_PENDING_UPDATES)

    def enqueue(snapshot: MonitoredAsset) -> None:
        if pending.full():
            pending.get_nowait()
        pending.put_nowait(snapshot)

    def on_update(snapshot: MonitoredAsset) -> None:
        # Ticks may run off the event loop thread
        loop.call_soon_threadsafe(enqueue, snapshot)

    cancel = engine.subscribe(asset_id, on_update)
    logger.info("WS connected: asset=%s", asset_id)

    try:
        await websocket.send_text(asset_to_response(current).model_dump_json())
        while True:
            snapshot = await pending.get()
            await websocket.send_text(asset_to_response(snapshot).model_dump_json())
    except WebSocketDisconnect:
        logger.info("WS disconnected: asset=%s", asset_id)
    except Exception:
        logger.exception("WS stream error: asset=%s", asset_id)
    finally:
        cancel()
