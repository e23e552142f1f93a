from dataclasses import dataclass
from typing import Optional

from ..core.Types import Point


@dataclass
class DragState:
    node_id: str
    offset: Point


@dataclass
class ConnectState:
    source_id: str
    # Live pointer, only used for the preview line.
    pointer: Optional[Point] = None


class InteractionSession:
    """
    Transient gesture state. A drag and a connect gesture are tracked
    independently; a single press can start both.
    """

    def __init__(self):
        self.drag: Optional[DragState] = None
        self.connect: Optional[ConnectState] = None

    @property
    def is_dragging(self) -> bool:
        return self.drag is not None

    @property
    def is_connecting(self) -> bool:
        return self.connect is not None

    @property
    def is_idle(self) -> bool:
        return self.drag is None and self.connect is None

    def clear(self):
        self.drag = None
        self.connect = None

    def __repr__(self):
        return f"InteractionSession(drag={self.drag}, connect={self.connect})"
