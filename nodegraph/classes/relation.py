"""
Relation representation.

A relation is a directed edge from one node id to another. Whether the ids
exist is checked by the graph, not here.
"""

from .utils import SEPARATOR, check_u32, parse_u32, split_record


class Relation:
    """Directed edge between two node ids. Self-loops are allowed."""

    __slots__ = ("_begin", "_end")

    def __init__(self, begin: int, end: int):
        self._begin = check_u32(begin, "begin")
        self._end = check_u32(end, "end")

    @property
    def begin(self) -> int:
        return self._begin

    @property
    def end(self) -> int:
        return self._end

    @property
    def pair(self):
        return self._begin, self._end

    def serialize(self) -> str:
        """Render the relation as "<begin> <end>"."""
        return f"{self._begin}{SEPARATOR}{self._end}"

    @classmethod
    def deserialize(cls, line: str) -> "Relation":
        """
        Parse a relation record.

        Args:
            line: Record of the form "<begin> <end>"

        Returns:
            Parsed relation

        Raises:
            MalformedLineError: If the line does not hold exactly two tokens
            InvalidIdError: If either token is not a uint32
        """
        begin_token, end_token = split_record(line)
        return cls(parse_u32(begin_token, line), parse_u32(end_token, line))

    def __eq__(self, other):
        if not isinstance(other, Relation):
            return NotImplemented
        return self.pair == other.pair

    def __hash__(self):
        return hash(self.pair)

    def __repr__(self):
        return f"Relation({self._begin}->{self._end})"
