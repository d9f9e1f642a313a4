"""
Text serialization of whole graphs.

This module provides the line-based format: node lines, a "#" delimiter
line, then relation lines. Every line ends with a newline.
"""

import logging
from typing import Any, List

from ..classes.codecs import resolve_codec
from ..classes.node import Node
from ..classes.relation import Relation
from ..classes.utils import iter_lines
from ..core.graph import Graph
from ..errors import NodeGraphError

logger = logging.getLogger(__name__)

DELIMITER = "#"


class GraphSerializer:
    """
    Converts graphs to and from the line-based text format.

    In strict mode the first bad line raises; otherwise bad lines are logged,
    skipped and kept in ``errors``.
    """

    def __init__(self, value_type: Any = str, strict: bool = True):
        """
        Initialize the serializer.

        Args:
            value_type: Value type or codec of the node values
            strict: Raise on the first bad line if True
        """
        self.value_type = value_type
        self.codec = resolve_codec(value_type)
        self.strict = strict
        self.errors: List[Exception] = []

    def dumps(self, graph: Graph) -> str:
        """
        Serialize a graph.

        Args:
            graph: Graph to render

        Returns:
            Text document
        """
        lines = [node.serialize(self.codec) for node in graph.get_all_nodes()]
        lines.append(DELIMITER)
        lines.extend(relation.serialize() for relation in graph.get_all_relations())
        return "".join(line + "\n" for line in lines)

    def loads(self, text: str) -> Graph:
        """
        Deserialize a graph.

        Lines before the first "#" are nodes, lines after it are relations.
        Without a "#" line every line is read as a node.

        Args:
            text: Text document

        Returns:
            Parsed graph

        Raises:
            ParseError: On a malformed line (strict mode)
            GraphError: On a duplicate node or unknown endpoint (strict mode)
        """
        self.errors = []
        graph = Graph(self.value_type)
        in_nodes = True

        for lineno, line in iter_lines(text):
            if line == DELIMITER:
                in_nodes = False
                continue

            try:
                if in_nodes:
                    graph = graph.add_node_from(Node.deserialize(line, self.codec))
                else:
                    graph = graph.add_relation_from(Relation.deserialize(line))
            except NodeGraphError as e:
                e.lineno = lineno
                if self.strict:
                    raise
                logger.warning(f"Skipping line {lineno}: {e}")
                self.errors.append(e)

        if in_nodes and text:
            logger.warning(f"No '{DELIMITER}' delimiter found, all lines were read as nodes")

        logger.debug(f"Parsed graph with {graph.get_node_count()} nodes and "
                     f"{graph.get_relation_count()} relations")
        return graph
