"""
nodegraph - Generic Directed Graph Container

A small in-memory directed graph whose nodes carry an unsigned 32-bit id and a
value with a single-token text form. Graphs are immutable values built through
chained mutators, serialize to a line-based text format and support
depth-first traversal with a path-local cycle guard.

Main Classes:
    Graph: Ordered nodes and relations with mutation, adjacency and traversal
    Node: Vertex with an id and a value
    Relation: Directed edge between two node ids
    GraphSerializer: Text format reader and writer
    DepthFirstTraversal: Path-bounded depth-first visitation

Example:
    >>> from nodegraph import Graph
    >>> graph = Graph().add_node(1, "A").add_node(2, "B").add_relation(1, 2)
    >>> print(graph.serialize(), end="")
    1 A
    2 B
    #
    1 2
"""

__version__ = "0.1.0"

from nodegraph.errors import (
    NodeGraphError,
    ParseError,
    MalformedLineError,
    InvalidIdError,
    InvalidValueError,
    GraphError,
    DuplicateNodeError,
    UnknownEndpointError,
    IncompatibleValueError,
    UnrepresentableValueError,
)
from nodegraph.classes.codecs import TextScalar, ValueCodec, TextScalarCodec, resolve_codec
from nodegraph.classes.node import Node
from nodegraph.classes.relation import Relation
from nodegraph.core.graph import Graph
from nodegraph.operations.serialization import GraphSerializer, DELIMITER
from nodegraph.analysis.traversal import DepthFirstTraversal

__all__ = [
    'Graph',
    'Node',
    'Relation',
    'GraphSerializer',
    'DepthFirstTraversal',
    'DELIMITER',
    'TextScalar',
    'ValueCodec',
    'TextScalarCodec',
    'resolve_codec',
    'NodeGraphError',
    'ParseError',
    'MalformedLineError',
    'InvalidIdError',
    'InvalidValueError',
    'GraphError',
    'DuplicateNodeError',
    'UnknownEndpointError',
    'IncompatibleValueError',
    'UnrepresentableValueError',
]
