"""
Depth-first traversal of graphs.

This module provides reachability visitation with a path-local cycle guard.
"""

import logging
from typing import Any, Callable, FrozenSet, Iterator, List, Tuple

from ..classes.node import Node
from ..core.graph import Graph

logger = logging.getLogger(__name__)


class DepthFirstTraversal:
    """
    Pre-order depth-first visitation from a root node.

    Each stack frame carries the ids of the nodes on the path from the root to
    that frame. A node is skipped only if it is already on its own path; there
    is no global visited set, so a node reachable along several paths is
    visited once per path.
    """

    def __init__(self, graph: Graph):
        """
        Initialize the traversal.

        Args:
            graph: Graph to traverse
        """
        self.graph = graph

    def iter_from(self, root: Node) -> Iterator[Node]:
        """
        Yield nodes in visitation order.

        Args:
            root: Start node

        Yields:
            Visited nodes, the same node possibly several times
        """
        stack: List[Tuple[Node, FrozenSet[int]]] = [(root, frozenset())]

        while stack:
            node, ancestors = stack.pop()

            if node.id in ancestors:
                continue

            yield node

            path = ancestors | {node.id}
            # Reversed so the first successor is popped first
            for successor in reversed(self.graph.get_connected(node)):
                stack.append((successor, path))

    def pass_from(self, root: Node, visitor: Callable[[Node], Any]) -> None:
        """
        Call visitor on every visited node.

        Args:
            root: Start node
            visitor: Called once per visit
        """
        visits = 0
        for node in self.iter_from(root):
            visitor(node)
            visits += 1

        logger.debug(f"Traversal from node {root.id} made {visits} visits")
