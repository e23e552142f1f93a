"""
nodecanvas FastAPI + Socket.IO server.

Start with:
    python -m nodecanvas.server.main

Or via uvicorn directly:
    uvicorn nodecanvas.server.main:create_server --factory --port 3001 --reload
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nodecanvas.config import EditorConfig, load_config
from nodecanvas.editor.EditorSession import start_editor
from nodecanvas.render.recording import RecordingRenderAdapter
from nodecanvas.server.routes.editor_routes import router
from nodecanvas.server.trace.frame_emitter import FrameEmitter
from nodecanvas.server.trace.socket_server import create_socket_app

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

def create_app(config: Optional[EditorConfig] = None) -> FastAPI:
    config = config if config is not None else load_config()

    app = FastAPI(title="nodecanvas API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    frames = FrameEmitter()
    app.state.config = config
    app.state.frames = frames
    app.state.session = start_editor(RecordingRenderAdapter(on_frame=frames.fire), config=config)

    app.include_router(router, prefix="/api")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "nodes": len(app.state.session.store)}

    return app


def create_server(config: Optional[EditorConfig] = None):
    """
    The top-level ASGI app: Socket.IO at the root, FastAPI for the rest.
    Without an explicit config, `.env` in the working directory is loaded
    so NODECANVAS_* settings are available without manual `export`.
    """
    if config is None:
        load_dotenv(os.path.join(os.getcwd(), ".env"))
        config = load_config()
    app = create_app(config)
    return create_socket_app(app, app.state.frames)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn

    load_dotenv(os.path.join(os.getcwd(), ".env"))
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"serving nodecanvas on {config.host}:{config.port}")

    uvicorn.run(
        "nodecanvas.server.main:create_server",
        factory=True,
        host=config.host,
        port=config.port,
        reload=True,
    )
