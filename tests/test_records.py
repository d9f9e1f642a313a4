import numpy as np
import pytest

from nodegraph import (
    InvalidIdError,
    InvalidValueError,
    MalformedLineError,
    Node,
    Relation,
    UnrepresentableValueError,
)
from nodegraph.classes.codecs import FLOAT, INT, STR, TextScalarCodec, resolve_codec


class Point:
    """Value type with its own single-token text form."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def to_text(self) -> str:
        return f"{self.x},{self.y}"

    @classmethod
    def from_text(cls, text: str) -> "Point":
        x, y = text.split(",")
        return cls(int(x), int(y))

    def __eq__(self, other):
        return isinstance(other, Point) and (self.x, self.y) == (other.x, other.y)

    def __hash__(self):
        return hash((self.x, self.y))


def test_node_serialize():
    assert Node(1, "A").serialize() == "1 A"
    assert Node(7, 42).serialize() == "7 42"
    assert Node(3, Point(1, -2)).serialize() == "3 1,-2"


def test_node_deserialize():
    node = Node.deserialize("1 A")

    assert node.id == 1
    assert node.value == "A"
    assert Node.deserialize("4294967295 9", int) == Node(4294967295, 9)
    assert Node.deserialize("2 0.5", float).value == 0.5
    assert Node.deserialize("5 3,4", Point).value == Point(3, 4)


def test_node_deserialize_empty_value():
    assert Node.deserialize("1 ") == Node(1, "")


def test_node_deserialize_malformed_line():
    with pytest.raises(MalformedLineError):
        Node.deserialize("1")
    with pytest.raises(MalformedLineError):
        Node.deserialize("1 A B")
    with pytest.raises(MalformedLineError):
        Node.deserialize("1  A")


def test_node_deserialize_invalid_id():
    with pytest.raises(InvalidIdError) as excinfo:
        Node.deserialize("x A")

    assert excinfo.value.token == "x"
    assert excinfo.value.line == "x A"

    for line in ("-1 A", "4294967296 A", "1.5 A", " A"):
        with pytest.raises(InvalidIdError):
            Node.deserialize(line)


def test_node_deserialize_invalid_value():
    with pytest.raises(InvalidValueError) as excinfo:
        Node.deserialize("1 abc", int)

    assert excinfo.value.token == "abc"
    assert excinfo.value.line == "1 abc"

    with pytest.raises(InvalidValueError):
        Node.deserialize("1 nope", Point)


def test_node_id_validation():
    assert Node(np.uint32(5), "A").id == 5
    assert type(Node(np.int64(5), "A").id) is int

    with pytest.raises(ValueError):
        Node(-1, "A")
    with pytest.raises(ValueError):
        Node(2 ** 32, "A")
    with pytest.raises(TypeError):
        Node("1", "A")
    with pytest.raises(TypeError):
        Node(True, "A")


def test_node_is_read_only():
    node = Node(1, "A")

    with pytest.raises(AttributeError):
        node.id = 2


def test_value_with_space_cannot_be_serialized():
    with pytest.raises(UnrepresentableValueError):
        Node(1, "two words").serialize()
    with pytest.raises(UnrepresentableValueError):
        Node(1, "line\nbreak").serialize()


def test_relation_serialize():
    assert Relation(1, 2).serialize() == "1 2"
    assert Relation(3, 3).serialize() == "3 3"


def test_relation_deserialize():
    assert Relation.deserialize("1 2") == Relation(1, 2)
    assert Relation.deserialize("+1 2").pair == (1, 2)

    with pytest.raises(MalformedLineError):
        Relation.deserialize("1")
    with pytest.raises(MalformedLineError):
        Relation.deserialize("1 2 3")
    with pytest.raises(InvalidIdError) as excinfo:
        Relation.deserialize("1 b")

    assert excinfo.value.token == "b"


def test_resolve_codec():
    assert resolve_codec(str) is STR
    assert resolve_codec(int) is INT
    assert resolve_codec(float) is FLOAT
    assert resolve_codec(INT) is INT
    assert resolve_codec(Point) == TextScalarCodec(Point)

    with pytest.raises(TypeError):
        resolve_codec(dict)


def test_float_codec_is_exact():
    value = 0.1 + 0.2

    assert FLOAT.from_text(FLOAT.to_text(value)) == value


def test_int_codec_rejects_non_canonical_text():
    for text in ("1_000", " 1", "1.0"):
        with pytest.raises(InvalidValueError):
            INT.from_text(text)


def test_invalid_value_message_names_the_line():
    with pytest.raises(InvalidValueError) as excinfo:
        Node.deserialize("7 abc", int)

    assert "'7 abc'" in str(excinfo.value)


def test_numeric_codecs_reject_non_ascii_digits():
    with pytest.raises(InvalidValueError):
        Node.deserialize("1 ٣", int)
    with pytest.raises(InvalidValueError):
        FLOAT.from_text("٣.5")

    assert INT.from_text("-12") == -12
    assert INT.from_text("+3") == 3


def test_render_failure_is_unrepresentable():
    with pytest.raises(UnrepresentableValueError):
        STR.to_text(42)
    with pytest.raises(UnrepresentableValueError):
        INT.to_text("abc")
    with pytest.raises(UnrepresentableValueError):
        TextScalarCodec(Point).to_text("not a point")


def test_codec_accepts():
    assert STR.accepts("A")
    assert not STR.accepts(1)
    assert INT.accepts(np.int32(4))
    assert not INT.accepts(False)
    assert FLOAT.accepts(np.float64(0.5))
    assert not FLOAT.accepts(1)
    assert TextScalarCodec(Point).accepts(Point(0, 0))
    assert not TextScalarCodec(Point).accepts("0,0")
