from typing import Dict, Iterator, List, Optional
import logging

from .Node import Node

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Insertion-ordered, append-only collection of every live node (Arena Pattern).

    Nodes reference each other by identifier only; the store is the single
    owner and resolves identifiers back to nodes.
    """

    def __init__(self, prefix: str = "nd"):
        self._prefix = prefix
        self._nodes: List[Node] = []
        self._by_id: Dict[str, Node] = {}
        # Creation counter. Never decremented so identifiers are never reused.
        self._counter = 0

    def _next_identifier(self) -> str:
        identifier = f"{self._prefix}{self._counter}"
        self._counter += 1
        return identifier

    def add(self, node: Node) -> Node:
        if node.identifier is not None and node.identifier in self._by_id:
            raise ValueError(f"Node '{node.identifier}' is already in the store")

        node.identifier = self._next_identifier()
        self._nodes.append(node)
        self._by_id[node.identifier] = node

        logger.info(f"added {node.type_name} node {node.identifier} at ({node.x}, {node.y})")
        return node

    def create_node(self, type_name: str, x: float, y: float) -> Node:
        return self.add(Node.create_node(type_name, x, y))

    def all(self) -> List[Node]:
        return list(self._nodes)

    def get(self, identifier: str) -> Optional[Node]:
        return self._by_id.get(identifier)

    def resolve_links(self, node: Node) -> List[Node]:
        # Links to identifiers the store no longer knows are skipped.
        resolved = []
        for identifier in node.links:
            source = self._by_id.get(identifier)
            if source is not None:
                resolved.append(source)
        return resolved

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes))
