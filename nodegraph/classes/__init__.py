"""
Core data classes for graph representation.

This module contains the node and relation types and the value codecs used
throughout the nodegraph library.
"""

from .codecs import TextScalar, ValueCodec, TextScalarCodec, STR, INT, FLOAT, resolve_codec
from .node import Node
from .relation import Relation

__all__ = [
    'Node',
    'Relation',
    'TextScalar',
    'ValueCodec',
    'TextScalarCodec',
    'STR',
    'INT',
    'FLOAT',
    'resolve_codec',
]
