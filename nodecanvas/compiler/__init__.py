"""
nodecanvas compiler
===================
Turns the nodes of a GraphStore into statement text.

Pipeline:
    nodes  →  [order_nodes]   →  priority-ordered nodes
    node   →  [Node.emit]     →  IR statements
    IR     →  [emitter]       →  text
    text   →  [interpreter]   →  outputs   (run action)

Public API
----------
    from nodecanvas.compiler import compile_nodes

    text = compile_nodes(store.all())
"""

from __future__ import annotations

from .graph_compiler import compile_nodes, compile_program, order_nodes
from .interpreter import EvaluationError, StatementInterpreter

__all__ = [
    "compile_nodes",
    "compile_program",
    "order_nodes",
    "EvaluationError",
    "StatementInterpreter",
]
