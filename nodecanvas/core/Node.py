from typing import Optional, List, Dict, Type, Callable, TYPE_CHECKING
import logging

from .Types import Point, NODE_WIDTH, NODE_HEIGHT, inside_rect, inside_square
from ..compiler.ir import IRBuilder
from ..compiler.emitter import emit

if TYPE_CHECKING:
    from .Interface import IRenderAdapter


# Get a logger for this module
logger = logging.getLogger(__name__)


class Node:
    """
    A positioned graph vertex with a title, a priority and a compile contract.

    `identifier` is assigned by the GraphStore when the node is added and is
    used as the symbol name in generated statements. `links` holds the
    identifiers of the source nodes this node consumes, in link order; the
    store resolves them back to nodes.
    """
    _node_registry: Dict[str, Type['Node']] = {}

    type_name: str = "Node"
    title: str = "Node"
    priority: int = 0

    # Connector geometry drawn for this variant. Hit-testing is uniform
    # across variants; these only decide which connectors are rendered.
    has_input_connector: bool = False
    has_output_connector: bool = False

    # Variants that hold a value captured from an external input surface.
    captures_value: bool = False

    @classmethod
    def register(cls, type_name: str) -> Callable[[Type['Node']], Type['Node']]:
        """Decorator to register a node class with a specific type name."""
        def decorator(subclass: Type['Node']) -> Type['Node']:
            if cls._node_registry.get(type_name):
                raise ValueError(f"Node type '{type_name}' is already registered.")
            subclass.type_name = type_name
            cls._node_registry[type_name] = subclass
            return subclass
        return decorator

    @classmethod
    def create_node(cls, type_name: str, *args, **kwargs) -> 'Node':
        """Factory method to create a node instance by type name."""
        if type_name not in cls._node_registry:
            raise ValueError(f"Unknown node type '{type_name}'")

        node_class = cls._node_registry[type_name]
        return node_class(*args, **kwargs)

    @classmethod
    def registered_types(cls) -> List[str]:
        return list(cls._node_registry.keys())

    def __init__(self,
                 x: float,
                 y: float,
                 title: Optional[str] = None,
                 priority: Optional[int] = None):
        self.x = float(x)
        self.y = float(y)
        if title is not None:
            self.title = title
        if priority is not None:
            self.priority = priority

        self.width = NODE_WIDTH
        self.height = NODE_HEIGHT

        self.identifier: Optional[str] = None
        self.links: List[str] = []
        self.connected = False

    def __repr__(self):
        return f"{type(self).__name__}({self.identifier}, x={self.x}, y={self.y})"

    # --- geometry ---

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def move_to(self, x: float, y: float):
        self.x = x
        self.y = y

    def output_point(self) -> Point:
        return Point(self.x + self.width, self.y + self.height / 2)

    def input_point(self) -> Point:
        return Point(self.x, self.y + self.height / 2)

    def contains(self, p: Point) -> bool:
        return inside_rect(p, self.x, self.y, self.width, self.height)

    def hits_output(self, p: Point) -> bool:
        return inside_square(p, self.output_point())

    def hits_input(self, p: Point) -> bool:
        return inside_square(p, self.input_point())

    # --- links ---

    def connect_from(self, source: 'Node'):
        """Record that this node consumes `source`'s output."""
        self.links.append(source.identifier)
        self.connected = True
        source.connected = True
        logger.debug(f"link {source.identifier} -> {self.identifier}")

    # --- compile ---

    def emit(self, builder: IRBuilder):
        """
        [Compile Phase]
        Emits this node's statements into `builder`. Every concrete variant
        overrides this; reaching the base implementation is a contract
        violation.
        """
        raise NotImplementedError(f"Node type '{self.type_name}' does not implement compile()")

    def statements(self):
        builder = IRBuilder()
        self.emit(builder)
        return builder.statements

    def compile(self) -> str:
        return emit(self.statements())

    # --- draw ---

    def draw(self, adapter: 'IRenderAdapter'):
        adapter.draw_node_body(self)
        if self.has_input_connector:
            adapter.draw_connector(self, False, self.connected)
        if self.has_output_connector:
            adapter.draw_connector(self, True, self.connected)
