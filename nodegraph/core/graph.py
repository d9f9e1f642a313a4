"""
Core graph data structure.

This module provides the Graph container: ordered nodes, ordered relations,
the invariant-preserving mutators and the adjacency query. Text serialization
and traversal live in their own modules and are reached through Graph methods.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple

from ..classes.codecs import resolve_codec
from ..classes.node import Node
from ..classes.relation import Relation
from ..errors import DuplicateNodeError, IncompatibleValueError, UnknownEndpointError

logger = logging.getLogger(__name__)


class Graph:
    """
    Directed graph of nodes and relations.

    A Graph is never modified in place: every mutator returns a new Graph and
    leaves the receiver as it was, so calls can be chained freely::

        graph = Graph().add_node(1, "A").add_node(2, "B").add_relation(1, 2)

    Invariants:
    - node ids are unique
    - both endpoints of a relation exist when the relation is added
    - (begin, end) pairs are unique
    - insertion order of nodes and relations is preserved
    """

    def __init__(self, value_type: Any = str):
        """
        Initialize an empty graph.

        Args:
            value_type: Value type or codec of the node values (str, int,
                float, a TextScalar class or a ValueCodec)
        """
        self.value_type = value_type
        self.codec = resolve_codec(value_type)

        self._nodes: Tuple[Node, ...] = ()
        self._relations: Tuple[Relation, ...] = ()

        # Lookup structures, rebuilt for every derived graph
        self._node_index: Dict[int, Node] = {}
        self._relation_pairs: Set[Tuple[int, int]] = set()

    def _derive(self, nodes: Tuple[Node, ...], relations: Tuple[Relation, ...]) -> "Graph":
        """Create a new graph with the same value type and the given contents."""
        graph = Graph.__new__(Graph)
        graph.value_type = self.value_type
        graph.codec = self.codec
        graph._nodes = nodes
        graph._relations = relations
        graph._build_graph()
        return graph

    def _build_graph(self):
        """Rebuild the id index and the relation pair set."""
        self._node_index = {node.id: node for node in self._nodes}
        self._relation_pairs = {relation.pair for relation in self._relations}

    # ========================================================================
    # NODE OPERATIONS
    # ========================================================================

    def add_node_from(self, node: Node) -> "Graph":
        """
        Add a node.

        Args:
            node: Node to append

        Returns:
            New graph containing the node

        Raises:
            DuplicateNodeError: If a node with the same id exists
            IncompatibleValueError: If the value is not of the graph's value type
            UnrepresentableValueError: If the value cannot be written as one token
        """
        if node.id in self._node_index:
            raise DuplicateNodeError(node.id)

        if not self.codec.accepts(node.value):
            raise IncompatibleValueError(node.id, node.value, self.codec.name)
        self.codec.to_text(node.value)

        return self._derive(self._nodes + (node,), self._relations)

    def add_node(self, node_id: int, value: Any) -> "Graph":
        """Add a node built from an id and a value."""
        return self.add_node_from(Node(node_id, value))

    def remove_node_by_id(self, node_id: int) -> "Graph":
        """
        Remove a node and every relation that starts or ends at it.

        Removing an id that is not present is a no-op.

        Args:
            node_id: Id of the node to remove

        Returns:
            New graph without the node and its incident relations
        """
        if node_id not in self._node_index:
            return self

        nodes = tuple(node for node in self._nodes if node.id != node_id)
        relations = tuple(r for r in self._relations if r.begin != node_id and r.end != node_id)

        removed = len(self._relations) - len(relations)
        if removed:
            logger.debug(f"Removed node {node_id} and {removed} incident relations")

        return self._derive(nodes, relations)

    # ========================================================================
    # RELATION OPERATIONS
    # ========================================================================

    def add_relation_from(self, relation: Relation) -> "Graph":
        """
        Add a relation.

        Adding a (begin, end) pair that is already present changes nothing.

        Args:
            relation: Relation to append

        Returns:
            New graph containing the relation

        Raises:
            UnknownEndpointError: If begin or end is not a node of the graph
        """
        if relation.begin not in self._node_index or relation.end not in self._node_index:
            raise UnknownEndpointError(relation.begin, relation.end)

        if relation.pair in self._relation_pairs:
            logger.debug(f"Relation {relation.begin}->{relation.end} already present, skipping")
            return self

        return self._derive(self._nodes, self._relations + (relation,))

    def add_relation(self, begin: int, end: int) -> "Graph":
        """Add a relation from begin to end."""
        return self.add_relation_from(Relation(begin, end))

    def remove_relation(self, relation: Relation) -> "Graph":
        """
        Remove the relation with the same (begin, end) pair.

        Removing a pair that is not present is a no-op.

        Args:
            relation: Relation to remove

        Returns:
            New graph without the relation
        """
        relations = tuple(r for r in self._relations if r.pair != relation.pair)
        return self._derive(self._nodes, relations)

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_connected(self, node: Node) -> List[Node]:
        """
        Get the direct successors of a node.

        Args:
            node: Node whose outgoing relations are followed

        Returns:
            Successor nodes in relation insertion order
        """
        connected = []
        for relation in self._relations:
            if relation.begin == node.id:
                successor = self._node_index.get(relation.end)
                if successor is not None:
                    connected.append(successor)
        return connected

    def get_all_nodes(self) -> List[Node]:
        """Get all nodes in insertion order."""
        return list(self._nodes)

    def get_all_relations(self) -> List[Relation]:
        """Get all relations in insertion order."""
        return list(self._relations)

    def get_node_by_id(self, node_id: int) -> Optional[Node]:
        """
        Get a node by its id.

        Args:
            node_id: Node id

        Returns:
            The node, or None if not found
        """
        return self._node_index.get(node_id)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._node_index

    def get_node_count(self) -> int:
        return len(self._nodes)

    def get_relation_count(self) -> int:
        return len(self._relations)

    # ========================================================================
    # SERIALIZATION
    # ========================================================================

    def serialize(self) -> str:
        """
        Render the graph in the line-based text format.

        Returns:
            Node lines, a "#" line, then relation lines, each ending in a newline
        """
        from ..operations.serialization import GraphSerializer

        return GraphSerializer(self.value_type).dumps(self)

    @classmethod
    def deserialize(cls, text: str, value_type: Any = str, strict: bool = True) -> "Graph":
        """
        Parse a graph from the line-based text format.

        Args:
            text: Serialized graph
            value_type: Value type or codec of the node values
            strict: Raise on the first bad line if True, otherwise log and
                skip bad lines

        Returns:
            Parsed graph

        Raises:
            ParseError: On a malformed line (strict mode)
            GraphError: On a duplicate node or unknown endpoint (strict mode)
        """
        from ..operations.serialization import GraphSerializer

        return GraphSerializer(value_type, strict=strict).loads(text)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def pass_from(self, root: Node, visitor: Callable[[Node], Any]) -> None:
        """
        Visit every node reachable from root, depth first.

        A node is skipped only when it already lies on the current path from
        root, so a node reached through two separate paths is visited twice.

        Args:
            root: Start node
            visitor: Called once per visit with the visited node
        """
        from ..analysis.traversal import DepthFirstTraversal

        DepthFirstTraversal(self).pass_from(root, visitor)

    def iter_from(self, root: Node) -> Iterator[Node]:
        """Yield the nodes pass_from would visit, in the same order."""
        from ..analysis.traversal import DepthFirstTraversal

        return DepthFirstTraversal(self).iter_from(root)

    # ========================================================================
    # COMPARISON
    # ========================================================================

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return (self.codec == other.codec
                and self._nodes == other._nodes
                and self._relations == other._relations)

    __hash__ = None

    def __repr__(self):
        return f"Graph(nodes={len(self._nodes)}, relations={len(self._relations)}, value_type={self.codec.name})"
