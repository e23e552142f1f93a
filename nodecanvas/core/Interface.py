from __future__ import annotations
from typing import Any, Callable, List, TYPE_CHECKING

from abc import ABC, abstractmethod

from .Types import Point

if TYPE_CHECKING:
    from .Node import Node


class IRenderAdapter(ABC):
    """
    Drawing contract the editor calls into on every redraw.
    Per frame the order is: background, every node (body + connector),
    the connect preview line (if any), then every committed link line.
    """

    @abstractmethod
    def draw_background(self):
        pass

    @abstractmethod
    def draw_node_body(self, node: 'Node'):
        pass

    @abstractmethod
    def draw_connector(self, node: 'Node', is_output_side: bool, is_connected: bool):
        pass

    @abstractmethod
    def draw_link_line(self, from_point: Point, to_point: Point):
        pass

    @abstractmethod
    def draw_preview_line(self, from_point: Point, to_point: Point):
        pass

    # Frame boundaries are optional hooks
    def begin_frame(self, width: float, height: float):
        pass

    def end_frame(self):
        pass


class IValueCapture(ABC):
    """An external text-input surface bound 1:1 to a Variable node."""

    @abstractmethod
    def place(self, x: float, y: float, width: float):
        pass

    @abstractmethod
    def input(self, value: Any):
        """Takes a new value and reports it through the surface's on_change."""
        pass


# (node, on_change) -> surface
ValueCaptureFactory = Callable[['Node', Callable[[Any], None]], IValueCapture]


class ITextSink(ABC):
    @abstractmethod
    def publish(self, text: str):
        pass

    @abstractmethod
    def text(self) -> str:
        pass


class IEvaluator(ABC):
    @abstractmethod
    def evaluate(self, text: str) -> List[Any]:
        pass
