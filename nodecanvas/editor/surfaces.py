"""
In-process stand-ins for the host collaborators: a text-input field bound to
a Variable node and the output panel the compile action publishes to. The
HTTP server drives these; a desktop or browser host would supply its own.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from ..core.Interface import IValueCapture, ITextSink


class TextField(IValueCapture):
    def __init__(self, on_change: Callable[[Any], None]):
        self.on_change = on_change
        self.value: Any = ""
        self.left: Optional[float] = None
        self.top: Optional[float] = None
        self.width: Optional[float] = None

    def place(self, x: float, y: float, width: float):
        self.left = x
        self.top = y
        self.width = width

    def input(self, value: Any):
        """Simulates the user typing into the field."""
        self.value = value
        self.on_change(value)


def text_field_factory(node, on_change: Callable[[Any], None]) -> TextField:
    return TextField(on_change)


class OutputPanel(ITextSink):
    def __init__(self):
        self._text = ""

    def publish(self, text: str):
        self._text = text

    def text(self) -> str:
        return self._text
