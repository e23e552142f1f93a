"""
Graph compiler — orders nodes by priority and concatenates their output.

This is a priority bucket, not a dependency sort: a lower priority node is
always emitted before a higher one regardless of link direction. A variant
that links to a same-or-lower priority node can therefore be emitted before
its source.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, TYPE_CHECKING

from .ir import Statement

if TYPE_CHECKING:
    from nodecanvas.core.Node import Node

logger = logging.getLogger(__name__)


def order_nodes(nodes: Iterable["Node"]) -> List["Node"]:
    # sorted() is stable: equal priorities keep insertion order.
    return sorted(list(nodes), key=lambda node: node.priority)


def compile_nodes(nodes: Iterable["Node"]) -> str:
    """
    Compile every node into one text blob, one node's output per line.

    Nodes with nothing to say still contribute an empty line.
    """
    ordered = order_nodes(nodes)
    lines = [node.compile() for node in ordered]
    logger.info(f"compiled {len(ordered)} node(s)")
    return "\n".join(lines)


def compile_program(nodes: Iterable["Node"]) -> List[List[Statement]]:
    """Same ordering as compile_nodes, as IR: one statement list per node."""
    return [node.statements() for node in order_nodes(nodes)]
