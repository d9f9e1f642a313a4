"""
Exception hierarchy for nodegraph.

Every failure is raised as an exception so the caller can decide whether to
abort, report the offending line, or skip the record. All exceptions also
derive from ValueError.
"""

from typing import Optional


class NodeGraphError(ValueError):
    """Base class for all nodegraph errors."""


# ========================================================================
# PARSE ERRORS
# ========================================================================

class ParseError(NodeGraphError):
    """
    A line of the text format could not be parsed.

    Attributes:
        line: The offending line
        lineno: 1-based line number within the parsed document, if known
    """

    def __init__(self, message: str, line: str, lineno: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.lineno = lineno

    def __str__(self):
        message = super().__str__()
        if self.lineno is not None:
            return f"line {self.lineno}: {message}"
        return message


class MalformedLineError(ParseError):
    """The line does not split into exactly two space-separated tokens."""

    def __init__(self, line: str, lineno: Optional[int] = None):
        super().__init__(f"expected two space-separated tokens in {line!r}", line, lineno)


class InvalidIdError(ParseError):
    """A token expected to be an unsigned 32-bit integer is not one."""

    def __init__(self, token: str, line: str, lineno: Optional[int] = None):
        super().__init__(f"invalid id {token!r} in {line!r}", line, lineno)
        self.token = token


class InvalidValueError(ParseError):
    """The value token was rejected by the value codec."""

    def __init__(self, token: str, line: str = "", lineno: Optional[int] = None):
        super().__init__(f"cannot parse value {token!r}" + (f" in {line!r}" if line else ""),
                         line, lineno)
        self.token = token


# ========================================================================
# GRAPH INVARIANT ERRORS
# ========================================================================

class GraphError(NodeGraphError):
    """A mutation would break a graph invariant."""

    lineno: Optional[int] = None

    def __str__(self):
        message = super().__str__()
        if self.lineno is not None:
            return f"line {self.lineno}: {message}"
        return message


class DuplicateNodeError(GraphError):
    """A node with the same id is already present."""

    def __init__(self, node_id: int):
        super().__init__(f"duplicate node with id {node_id}")
        self.node_id = node_id


class UnknownEndpointError(GraphError):
    """A relation references a node id that is not in the graph."""

    def __init__(self, begin: int, end: int):
        super().__init__(f"relation between non-existent nodes ({begin}->{end})")
        self.begin = begin
        self.end = end


class IncompatibleValueError(GraphError):
    """A node value does not belong to the graph's value type."""

    def __init__(self, node_id: int, value, value_type: str):
        super().__init__(f"value {value!r} of node {node_id} is not a {value_type} value")
        self.node_id = node_id
        self.value = value
        self.value_type = value_type


class UnrepresentableValueError(NodeGraphError):
    """A value cannot be rendered as a single text token."""

    def __init__(self, value, text: Optional[str] = None):
        if text is None:
            message = f"value {value!r} cannot be rendered as text"
        else:
            message = f"value {value!r} renders as {text!r}, which contains a space or line break"
        super().__init__(message)
        self.value = value
        self.text = text
