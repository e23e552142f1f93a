"""
Editor REST routes.

All routes are mounted under /api by main.py and operate on the session
held in `app.state.session`.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import BaseModel

from nodecanvas.compiler import EvaluationError
from nodecanvas.core.Node import Node
from nodecanvas.editor.EditorSession import EditorSession
from nodecanvas.server.serializers.editor_serializer import (
    serialize_interaction,
    serialize_node,
    serialize_session,
)

logger = logging.getLogger(__name__)

router = APIRouter()

POINTER_PHASES = ("press", "move", "release")


def get_session(request: Request) -> EditorSession:
    return request.app.state.session


# ── GET /node-types ───────────────────────────────────────────────────────────

@router.get("/node-types")
async def get_node_types() -> List[str]:
    return Node.registered_types()


# ── GET /nodes ────────────────────────────────────────────────────────────────

@router.get("/nodes")
async def list_nodes(session: EditorSession = Depends(get_session)) -> Dict[str, Any]:
    return serialize_session(session)


# ── POST /nodes ───────────────────────────────────────────────────────────────

class PositionBody(BaseModel):
    x: float
    y: float


class CreateNodeBody(BaseModel):
    type: str
    position: Optional[PositionBody] = None


@router.post("/nodes", status_code=201)
async def create_node(body: CreateNodeBody, session: EditorSession = Depends(get_session)) -> Dict[str, Any]:
    if body.type not in Node.registered_types():
        raise HTTPException(status_code=400, detail=f"Unknown node type '{body.type}'")

    if body.position is not None:
        node = session.add_node(body.type, body.position.x, body.position.y)
    else:
        node = session.add_node(body.type)
    return serialize_node(node)


# ── PUT /nodes/:id/value ──────────────────────────────────────────────────────

class SetValueBody(BaseModel):
    value: Any


@router.put("/nodes/{node_id}/value", status_code=204)
async def set_node_value(node_id: str, body: SetValueBody, session: EditorSession = Depends(get_session)) -> Response:
    try:
        session.set_value(node_id, body.value)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return Response(status_code=204)


# ── POST /pointer/:phase ──────────────────────────────────────────────────────

@router.post("/pointer/{phase}")
async def pointer_event(phase: str, body: PositionBody, session: EditorSession = Depends(get_session)) -> Dict[str, Any]:
    if phase not in POINTER_PHASES:
        raise HTTPException(status_code=404, detail=f"Unknown pointer phase '{phase}'")

    result: Dict[str, Any] = {}
    if phase == "press":
        session.press(body.x, body.y)
    elif phase == "move":
        session.move(body.x, body.y)
    else:
        linked = session.release(body.x, body.y)
        result["linked"] = [n.identifier for n in linked]

    result["interaction"] = serialize_interaction(session)
    return result


# ── POST /actions/:name ───────────────────────────────────────────────────────

@router.post("/actions/{name}")
async def run_action(name: str, session: EditorSession = Depends(get_session)) -> Dict[str, Any]:
    if name not in session.action_names():
        raise HTTPException(status_code=404, detail=f"Unknown action '{name}'")

    console_mark = len(session.console)
    try:
        result = session.dispatch_action(name)
    except EvaluationError as exc:
        logger.warning(f"[{name}] evaluation failed: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))

    if name == "compile":
        return {"output": result}
    return {"ran": bool(result), "console": session.console[console_mark:]}


# ── GET /output ───────────────────────────────────────────────────────────────

@router.get("/output")
async def get_output(session: EditorSession = Depends(get_session)) -> Dict[str, Any]:
    return {"output": session.text_sink.text(), "console": list(session.console)}


# ── POST /resize ──────────────────────────────────────────────────────────────

class ResizeBody(BaseModel):
    width: float
    height: float


@router.post("/resize")
async def resize(body: ResizeBody, session: EditorSession = Depends(get_session)) -> Dict[str, float]:
    session.resize(body.width, body.height)
    return {"width": session.canvas_width, "height": session.canvas_height}


# ── GET /frame ────────────────────────────────────────────────────────────────

@router.get("/frame")
async def get_frame(session: EditorSession = Depends(get_session)) -> Dict[str, Any]:
    adapter = session.render_adapter
    frame = getattr(adapter, "last_frame", None)
    if frame is None:
        raise HTTPException(status_code=404, detail="No frame has been drawn yet")
    return frame
