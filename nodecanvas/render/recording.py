"""
RecordingRenderAdapter — a render adapter that turns every redraw into a
list of plain draw-call dicts instead of pixels.

The server pushes each finished frame to connected clients, which do the
actual painting. Tests use it to check the draw order.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..core.Interface import IRenderAdapter
from ..core.Types import Point

DrawCall = Dict[str, Any]

BACKGROUND_COLOR = "#e2e8f0"
CONNECTED_COLOR = "#22c55e"
DISCONNECTED_COLOR = "#cbd5e1"
PREVIEW_COLOR = "#6b7280"
LINK_COLOR = "#000"


def _point(p: Point) -> Dict[str, float]:
    return {"x": p.x, "y": p.y}


class RecordingRenderAdapter(IRenderAdapter):
    def __init__(self, on_frame: Optional[Callable[[Dict[str, Any]], None]] = None):
        self._calls: List[DrawCall] = []
        self._size = (0.0, 0.0)
        self.last_frame: Optional[Dict[str, Any]] = None
        self.frame_count = 0
        self.on_frame = on_frame

    def begin_frame(self, width: float, height: float):
        self._calls = []
        self._size = (width, height)

    def end_frame(self):
        self.frame_count += 1
        self.last_frame = {
            "frame": self.frame_count,
            "width": self._size[0],
            "height": self._size[1],
            "calls": self._calls,
        }
        if self.on_frame is not None:
            self.on_frame(self.last_frame)

    def draw_background(self):
        self._calls.append({
            "op": "background",
            "color": BACKGROUND_COLOR,
            "width": self._size[0],
            "height": self._size[1],
        })

    def draw_node_body(self, node):
        self._calls.append({
            "op": "node",
            "id": node.identifier,
            "title": node.title,
            "x": node.x,
            "y": node.y,
            "width": node.width,
            "height": node.height,
        })

    def draw_connector(self, node, is_output_side: bool, is_connected: bool):
        center = node.output_point() if is_output_side else node.input_point()
        self._calls.append({
            "op": "connector",
            "id": node.identifier,
            "side": "output" if is_output_side else "input",
            "center": _point(center),
            "color": CONNECTED_COLOR if is_connected else DISCONNECTED_COLOR,
        })

    def draw_link_line(self, from_point: Point, to_point: Point):
        self._calls.append({
            "op": "link",
            "from": _point(from_point),
            "to": _point(to_point),
            "color": LINK_COLOR,
        })

    def draw_preview_line(self, from_point: Point, to_point: Point):
        self._calls.append({
            "op": "preview",
            "from": _point(from_point),
            "to": _point(to_point),
            "color": PREVIEW_COLOR,
        })

    def ops(self) -> List[str]:
        """Operation names of the last finished frame, in draw order."""
        if self.last_frame is None:
            return []
        return [call["op"] for call in self.last_frame["calls"]]
