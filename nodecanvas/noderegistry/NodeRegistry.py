from typing import Any

from ..core.Node import Node
from ..compiler.ir import IRBuilder

# =========================================================================================
# BUILT-IN NODE TYPES
#
# A variant supplies its title, priority, connector geometry and an `emit`
# hook. Lower priority compiles first, so every Variable binding precedes
# the Print statements that read it.
# =========================================================================================


@Node.register("print")
class PrintNode(Node):
    title = "Print"
    priority = 1
    has_input_connector = True

    def emit(self, builder: IRBuilder):
        # One output statement per incoming link, in link order.
        for identifier in self.links:
            builder.output(identifier)


@Node.register("variable")
class VariableNode(Node):
    title = "Variable"
    priority = 0
    has_output_connector = True
    captures_value = True

    def __init__(self, x: float, y: float, value: Any = "", **kwargs):
        super().__init__(x, y, **kwargs)
        self.value = value

    def set_value(self, value: Any):
        self.value = value

    def emit(self, builder: IRBuilder):
        # The variable's own links are never read here.
        builder.bind(self.identifier, self.value)
