"""
Value codecs for node values.

A node value is written as a single text token. A codec converts a value to
that token and back; the built-in codecs cover str, int and float, and
TextScalarCodec adapts any class that implements the TextScalar protocol.
"""

import re
from typing import Any, Generic, Protocol, Type, TypeVar, runtime_checkable

import numpy as np

from ..errors import InvalidValueError, UnrepresentableValueError

V = TypeVar("V")

_FORBIDDEN = (" ", "\n", "\r")
_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


@runtime_checkable
class TextScalar(Protocol):
    """
    Capability of a value type with a canonical single-token text form.

    Implementers provide to_text() and a from_text() classmethod that raises
    ValueError on text it cannot parse.
    """

    def to_text(self) -> str:
        ...

    @classmethod
    def from_text(cls, text: str) -> Any:
        ...


class ValueCodec(Generic[V]):
    """
    Converts values of one type to and from a single text token.

    Subclasses implement _render() and _parse(); this base class enforces the
    single-token rule and maps render and parse failures to nodegraph errors.
    """

    name = "value"

    def accepts(self, value: Any) -> bool:
        """
        Check whether a value belongs to this codec.

        The default requires the value to survive to_text() then from_text()
        unchanged; the built-in codecs check the value type instead.
        """
        try:
            return self.from_text(self.to_text(value)) == value
        except (InvalidValueError, UnrepresentableValueError):
            return False

    def to_text(self, value: V) -> str:
        """
        Render a value as a token.

        Raises:
            UnrepresentableValueError: If the value cannot be rendered, or its
                text contains a space or line break
        """
        try:
            text = self._render(value)
        except (TypeError, ValueError, AttributeError) as e:
            raise UnrepresentableValueError(value) from e

        if not isinstance(text, str):
            raise UnrepresentableValueError(value)
        if any(ch in text for ch in _FORBIDDEN):
            raise UnrepresentableValueError(value, text)
        return text

    def from_text(self, text: str) -> V:
        """
        Parse a token into a value.

        Raises:
            InvalidValueError: If the token is not a valid value
        """
        try:
            return self._parse(text)
        except (ValueError, TypeError) as e:
            raise InvalidValueError(text) from e

    def _render(self, value: V) -> str:
        raise NotImplementedError

    def _parse(self, text: str) -> V:
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


class StrCodec(ValueCodec[str]):
    name = "str"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)

    def _render(self, value: str) -> str:
        return value

    def _parse(self, text: str) -> str:
        return text


class IntCodec(ValueCodec[int]):
    name = "int"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, (int, np.integer)) and not isinstance(value, bool)

    def _render(self, value: int) -> str:
        return str(int(value))

    def _parse(self, text: str) -> int:
        if not _INT_TOKEN.fullmatch(text):
            raise ValueError(f"not a canonical integer: {text!r}")
        return int(text)


class FloatCodec(ValueCodec[float]):
    name = "float"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, (float, np.floating))

    def _render(self, value: float) -> str:
        return repr(float(value))

    def _parse(self, text: str) -> float:
        # float() also takes non-ASCII digits, whitespace and underscores
        if not text.isascii() or text != text.strip() or "_" in text:
            raise ValueError(f"not a canonical float: {text!r}")
        return float(text)


class TextScalarCodec(ValueCodec[V]):
    """Codec for classes implementing the TextScalar protocol."""

    def __init__(self, value_cls: Type[V]):
        self.value_cls = value_cls
        self.name = value_cls.__name__

    def accepts(self, value: Any) -> bool:
        return isinstance(value, self.value_cls)

    def _render(self, value: V) -> str:
        return value.to_text()

    def _parse(self, text: str) -> V:
        return self.value_cls.from_text(text)

    def __eq__(self, other):
        return isinstance(other, TextScalarCodec) and other.value_cls is self.value_cls

    def __hash__(self):
        return hash((TextScalarCodec, self.value_cls))


STR = StrCodec()
INT = IntCodec()
FLOAT = FloatCodec()

_BUILTIN_CODECS = {
    str: STR,
    int: INT,
    float: FLOAT,
}


def resolve_codec(value_type) -> ValueCodec:
    """
    Find the codec for a value type.

    Args:
        value_type: A ValueCodec instance, str, int, float, or a class
            implementing TextScalar

    Returns:
        The matching codec

    Raises:
        TypeError: If no codec can be derived from value_type
    """
    if isinstance(value_type, ValueCodec):
        return value_type

    if value_type in _BUILTIN_CODECS:
        return _BUILTIN_CODECS[value_type]

    if isinstance(value_type, type) and callable(getattr(value_type, "from_text", None)) \
            and callable(getattr(value_type, "to_text", None)):
        return TextScalarCodec(value_type)

    raise TypeError(f"no value codec for {value_type!r}; "
                    f"use str, int, float, a TextScalar class or a ValueCodec")
