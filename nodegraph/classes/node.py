"""
Node representation.

A node pairs a unique unsigned 32-bit identifier with a value that has a
single-token text form.
"""

from typing import Any, Generic, TypeVar

from .codecs import resolve_codec
from .utils import SEPARATOR, check_u32, parse_u32, split_record
from ..errors import InvalidValueError

V = TypeVar("V")


class Node(Generic[V]):
    """
    Graph vertex with an identifier and a value.

    Nodes are immutable; id and value are read-only.
    """

    __slots__ = ("_id", "_value")

    def __init__(self, id: int, value: V):
        """
        Initialize a node.

        Args:
            id: Unsigned 32-bit identifier, unique within a graph
            value: Node value
        """
        self._id = check_u32(id, "node id")
        self._value = value

    @property
    def id(self) -> int:
        return self._id

    @property
    def value(self) -> V:
        return self._value

    def serialize(self, value_type: Any = None) -> str:
        """
        Render the node as "<id> <value-text>".

        Args:
            value_type: Value type or codec; defaults to the type of the value

        Returns:
            Single-line record without a trailing newline
        """
        codec = resolve_codec(type(self._value) if value_type is None else value_type)
        return f"{self._id}{SEPARATOR}{codec.to_text(self._value)}"

    @classmethod
    def deserialize(cls, line: str, value_type: Any = str) -> "Node":
        """
        Parse a node record.

        Args:
            line: Record of the form "<id> <value-text>"
            value_type: Value type or codec used to parse the value token

        Returns:
            Parsed node

        Raises:
            MalformedLineError: If the line does not hold exactly two tokens
            InvalidIdError: If the id is not a uint32
            InvalidValueError: If the value token cannot be parsed
        """
        codec = resolve_codec(value_type)
        id_token, value_token = split_record(line)
        node_id = parse_u32(id_token, line)

        try:
            value = codec.from_text(value_token)
        except InvalidValueError as e:
            raise InvalidValueError(e.token, line) from e

        return cls(node_id, value)

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self._id == other._id and self._value == other._value

    def __hash__(self):
        return hash((self._id, self._value))

    def __repr__(self):
        return f"Node(id={self._id}, value={self._value!r})"
