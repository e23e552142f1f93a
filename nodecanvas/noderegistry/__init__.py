# Side-effect: registers the built-in node types with Node._node_registry
from .NodeRegistry import PrintNode, VariableNode

__all__ = ["PrintNode", "VariableNode"]
