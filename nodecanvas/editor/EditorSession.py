"""
EditorSession — the explicit owner of one editor's state.

Holds the GraphStore and the InteractionSession, wires pointer gestures to
the InteractionStateMachine, exposes the named toolbar actions and performs
the redraw sequence against the render adapter. Nothing lives at module
scope; every operation goes through a session instance.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import nodecanvas.noderegistry  # noqa: F401  register built-in node types

from ..compiler import compile_nodes, StatementInterpreter
from ..config import EditorConfig
from ..core.GraphStore import GraphStore
from ..core.Interface import IRenderAdapter, IEvaluator, ITextSink, IValueCapture, ValueCaptureFactory
from ..core.Node import Node
from ..core.Types import Point, NODE_WIDTH, CONNECTOR_SIZE
from .InteractionSession import InteractionSession
from .InteractionStateMachine import InteractionStateMachine
from .surfaces import OutputPanel, text_field_factory

logger = logging.getLogger(__name__)

# Where each toolbar "add node" button drops its node.
DEFAULT_POSITIONS: Dict[str, Tuple[float, float]] = {
    "print": (NODE_WIDTH + 20, 10),
    "variable": (10, 10),
}

# Offset of a value-capture field from its node's top-left corner.
FIELD_OFFSET_X = 10
FIELD_OFFSET_Y = 35
FIELD_WIDTH_INSET = 30


class EditorSession:
    def __init__(self,
                 render_adapter: Optional[IRenderAdapter] = None,
                 config: Optional[EditorConfig] = None,
                 text_sink: Optional[ITextSink] = None,
                 evaluator: Optional[IEvaluator] = None,
                 value_capture_factory: Optional[ValueCaptureFactory] = text_field_factory):
        self.config = config if config is not None else EditorConfig()
        self.render_adapter = render_adapter
        self.text_sink = text_sink if text_sink is not None else OutputPanel()
        self.console: List[Any] = []
        self.evaluator = evaluator if evaluator is not None else StatementInterpreter(on_output=self._console_write)
        self.value_capture_factory = value_capture_factory

        self.store = GraphStore()
        self.interaction = InteractionSession()
        self.machine = InteractionStateMachine(
            self.store,
            self.interaction,
            on_redraw=self.redraw,
            on_node_moved=self._place_field,
        )

        self.fields: Dict[str, IValueCapture] = {}
        self.canvas_width, self.canvas_height = self.config.canvas_size(
            self.config.host_width, self.config.host_height
        )

        # Named toolbar triggers
        self._actions: Dict[str, Callable[[], Any]] = {
            "compile": self.compile,
            "run": self.run,
        }

    # ------------------------------------------------------------------
    # Toolbar dispatch
    # ------------------------------------------------------------------

    def action_names(self) -> List[str]:
        return list(self._actions.keys())

    def dispatch_action(self, name: str) -> Any:
        handler = self._actions.get(name)
        if handler is None:
            logger.warning(f"Unknown action '{name}'")
            return False
        return handler()

    def dispatch_node(self, type_name: str) -> Optional[Node]:
        if type_name not in Node.registered_types():
            logger.warning(f"Unknown node type '{type_name}'")
            return None
        return self.add_node(type_name)

    # ------------------------------------------------------------------
    # Graph mutation
    # ------------------------------------------------------------------

    def add_node(self, type_name: str, x: Optional[float] = None, y: Optional[float] = None) -> Node:
        default_x, default_y = DEFAULT_POSITIONS.get(type_name, (10, 10))
        node = self.store.create_node(
            type_name,
            default_x if x is None else x,
            default_y if y is None else y,
        )

        if node.captures_value and self.value_capture_factory is not None:
            self.fields[node.identifier] = self.value_capture_factory(node, node.set_value)
            self._place_field(node)

        self.redraw()
        return node

    def add_print(self, x: Optional[float] = None, y: Optional[float] = None) -> Node:
        return self.add_node("print", x, y)

    def add_variable(self, x: Optional[float] = None, y: Optional[float] = None) -> Node:
        return self.add_node("variable", x, y)

    def set_value(self, identifier: str, value: Any):
        node = self.store.get(identifier)
        if node is None:
            raise KeyError(f"Node '{identifier}' not found")
        if not node.captures_value:
            raise ValueError(f"Node '{identifier}' ({node.type_name}) does not hold a value")

        field = self.fields.get(identifier)
        if field is not None:
            field.input(value)
        else:
            node.set_value(value)

    def _place_field(self, node: Node):
        field = self.fields.get(node.identifier)
        if field is None:
            return
        field.place(
            node.x + FIELD_OFFSET_X,
            node.y + FIELD_OFFSET_Y + self.config.toolbar_height,
            node.width - FIELD_WIDTH_INSET,
        )

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def press(self, x: float, y: float):
        self.machine.press(x, y)

    def move(self, x: float, y: float):
        self.machine.move(x, y)

    def release(self, x: float, y: float) -> List[Node]:
        return self.machine.release(x, y)

    # ------------------------------------------------------------------
    # Compile / run
    # ------------------------------------------------------------------

    def compile(self) -> str:
        text = compile_nodes(self.store.all())
        self.text_sink.publish(text)
        return text

    def run(self) -> bool:
        """Hands the published text to the evaluator. No-op when it is blank."""
        text = self.text_sink.text()
        if len(text.strip()) == 0:
            logger.info("run: nothing to execute")
            return False

        self.evaluator.evaluate(text)
        return True

    def _console_write(self, value: Any):
        self.console.append(value)
        logger.info(f"[console] {value}")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def resize(self, host_width: float, host_height: float):
        self.canvas_width, self.canvas_height = self.config.canvas_size(host_width, host_height)
        logger.debug(f"canvas resized to {self.canvas_width}x{self.canvas_height}")
        self.redraw()

    def redraw(self):
        adapter = self.render_adapter
        if adapter is None:
            return

        adapter.begin_frame(self.canvas_width, self.canvas_height)
        adapter.draw_background()

        for node in self.store.all():
            node.draw(adapter)

        connect = self.interaction.connect
        if connect is not None and connect.pointer is not None:
            source = self.store.get(connect.source_id)
            if source is not None:
                start = source.output_point()
                adapter.draw_preview_line(Point(start.x + CONNECTOR_SIZE, start.y), connect.pointer)

        for node in self.store.all():
            for source in self.store.resolve_links(node):
                start = source.output_point()
                end = node.input_point()
                adapter.draw_link_line(
                    Point(start.x + CONNECTOR_SIZE, start.y),
                    Point(end.x - CONNECTOR_SIZE, end.y),
                )

        adapter.end_frame()


def start_editor(surface: Optional[IRenderAdapter], config: Optional[EditorConfig] = None, **kwargs) -> Optional[EditorSession]:
    """
    Builds a session around a drawing surface and draws the first frame.
    Without a surface nothing is wired and None is returned.
    """
    if surface is None:
        logger.error("There's no drawing surface for the editor.")
        logger.error("Pass a render adapter, e.g. start_editor(RecordingRenderAdapter()).")
        return None

    session = EditorSession(surface, config=config, **kwargs)
    session.redraw()
    return session
