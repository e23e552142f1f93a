"""
Editor serializer — converts Node / EditorSession objects into JSON-safe
dicts for the REST responses.
"""
from __future__ import annotations

from typing import Any, Dict

# SerializedNode keys: id, type, title, priority, x, y, width, height,
#                      connected, links[, value]
# SerializedSession keys: nodes, interaction, canvas


def serialize_node(node: Any) -> Dict[str, Any]:
    data = {
        "id": node.identifier,
        "type": node.type_name,
        "title": node.title,
        "priority": node.priority,
        "x": node.x,
        "y": node.y,
        "width": node.width,
        "height": node.height,
        "connected": node.connected,
        "links": list(node.links),
    }
    if node.captures_value:
        data["value"] = node.value
    return data


def serialize_interaction(session: Any) -> Dict[str, Any]:
    drag = session.interaction.drag
    connect = session.interaction.connect
    pointer = connect.pointer if connect is not None else None
    return {
        "dragging": drag.node_id if drag is not None else None,
        "connecting": connect.source_id if connect is not None else None,
        "pointer": {"x": pointer.x, "y": pointer.y} if pointer is not None else None,
    }


def serialize_session(session: Any) -> Dict[str, Any]:
    return {
        "nodes": [serialize_node(n) for n in session.store.all()],
        "interaction": serialize_interaction(session),
        "canvas": {"width": session.canvas_width, "height": session.canvas_height},
    }
