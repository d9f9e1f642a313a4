"""
Utility functions for nodegraph.

This module provides shared helpers used across the nodegraph package,
including unsigned 32-bit id handling and the line/record primitives of the
text format.
"""

import re
from typing import Iterator, Tuple

import numpy as np

from ..errors import MalformedLineError, InvalidIdError


SEPARATOR = " "
U32_MAX = int(np.iinfo(np.uint32).max)

_U32_TOKEN = re.compile(r"\+?[0-9]+")


def check_u32(value, name: str = "id") -> int:
    """
    Validate an unsigned 32-bit identifier.

    Args:
        value: Python int or numpy integer
        name: Argument name used in error messages

    Returns:
        The identifier as a plain int

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is outside [0, 2**32 - 1]
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    value = int(value)
    if value < 0 or value > U32_MAX:
        raise ValueError(f"{name} {value} is outside the uint32 range [0, {U32_MAX}]")

    return value


def parse_u32(token: str, line: str) -> int:
    """
    Parse a decimal uint32 token.

    Args:
        token: Text token, digits with an optional leading '+'
        line: Line the token came from, for error reporting

    Returns:
        Parsed identifier

    Raises:
        InvalidIdError: If the token is not a uint32
    """
    if not _U32_TOKEN.fullmatch(token):
        raise InvalidIdError(token, line)

    value = int(token)
    if value > U32_MAX:
        raise InvalidIdError(token, line)

    return value


def split_record(line: str) -> Tuple[str, str]:
    """
    Split a record line into its two tokens.

    The split is on every single space, so "1  A" yields three tokens and is
    rejected.

    Raises:
        MalformedLineError: If the line does not hold exactly two tokens
    """
    tokens = line.split(SEPARATOR)
    if len(tokens) != 2:
        raise MalformedLineError(line)
    return tokens[0], tokens[1]


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Iterate over the lines of a document with 1-based line numbers.

    Lines end at '\\n'; one trailing '\\r' is dropped from each line and the
    empty segment after a final newline is not a line.

    Args:
        text: Whole document

    Yields:
        (lineno, line) tuples
    """
    if not text:
        return

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    for lineno, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        yield lineno, line
