"""
Socket.IO server — pushes every redraw to connected clients as a `frame`
event.

Uses python-socketio in ASGI mode so it can wrap FastAPI.
`create_socket_app(fastapi_app, emitter)` returns the composite ASGI
application to pass to uvicorn.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Set

import socketio

from .frame_emitter import FrameEmitter

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Socket.IO instance (async, ASGI mode)
# ---------------------------------------------------------------------------

sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins="*",
    logger=False,
    engineio_logger=False,
)


# In-flight emit tasks; the loop only keeps weak references.
_pending_emits: Set[asyncio.Task] = set()


def _emit_done(task: asyncio.Task) -> None:
    _pending_emits.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"frame emit failed: {exc}", exc_info=exc)


def _forward_frame(event: Dict[str, Any]) -> None:
    """
    Called synchronously from the redraw. We schedule an async emit on the
    running event loop; outside a loop there is nobody to send to.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return
    task = loop.create_task(sio.emit("frame", event))
    _pending_emits.add(task)
    task.add_done_callback(_emit_done)


# ---------------------------------------------------------------------------
# Socket.IO lifecycle events
# ---------------------------------------------------------------------------

@sio.event
async def connect(sid: str, environ: dict) -> None:
    logger.info(f"client connected: {sid}")


@sio.event
async def disconnect(sid: str) -> None:
    logger.info(f"client disconnected: {sid}")


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def create_socket_app(fastapi_app: Any, emitter: FrameEmitter) -> socketio.ASGIApp:
    """Wrap *fastapi_app* inside a Socket.IO ASGI application."""
    emitter.on_frame(_forward_frame)
    return socketio.ASGIApp(sio, other_asgi_app=fastapi_app)
