from typing import Callable, List, Optional
import logging

from ..core.GraphStore import GraphStore
from ..core.Node import Node
from ..core.Types import Point
from .InteractionSession import InteractionSession, DragState, ConnectState

logger = logging.getLogger(__name__)


class InteractionStateMachine:
    """
    Turns pointer press/move/release into GraphStore mutations.

    Known quirks kept on purpose:
      - when several node bodies contain the press point, the last one in
        store order becomes the drag target;
      - a release that hits several input connectors links the source to
        all of them;
      - a release that hits nothing still clears the gesture;
      - a lost release leaves the gesture active until the next release.
    """

    def __init__(self,
                 store: GraphStore,
                 session: Optional[InteractionSession] = None,
                 on_redraw: Optional[Callable[[], None]] = None,
                 on_node_moved: Optional[Callable[[Node], None]] = None):
        self.store = store
        self.session = session if session is not None else InteractionSession()
        self.on_redraw = on_redraw
        self.on_node_moved = on_node_moved

    def _redraw(self):
        if self.on_redraw is not None:
            self.on_redraw()

    def press(self, x: float, y: float):
        p = Point(x, y)

        # Both checks run for every node; later matches overwrite earlier ones.
        for node in self.store.all():
            if node.contains(p):
                self.session.drag = DragState(node.identifier, p - node.position)

            if node.hits_output(p):
                self.session.connect = ConnectState(node.identifier)

        logger.debug(f"press at {p}: {self.session}")

    def move(self, x: float, y: float):
        p = Point(x, y)

        drag = self.session.drag
        if drag is not None:
            node = self.store.get(drag.node_id)
            if node is not None:
                node.move_to(p.x - drag.offset.x, p.y - drag.offset.y)
                if self.on_node_moved is not None:
                    self.on_node_moved(node)
            self._redraw()

        if self.session.connect is not None:
            self.session.connect.pointer = p
            self._redraw()

    def release(self, x: float, y: float) -> List[Node]:
        """Completes a connect gesture. Returns the nodes that were linked."""
        p = Point(x, y)
        linked: List[Node] = []

        connect = self.session.connect
        source = self.store.get(connect.source_id) if connect is not None else None
        if source is not None:
            for node in self.store.all():
                if node.hits_input(p):
                    node.connect_from(source)
                    linked.append(node)

            if not linked:
                logger.debug(f"connect from {source.identifier} released over nothing")

        self.session.clear()
        self._redraw()
        return linked
