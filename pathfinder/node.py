from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class NodeKind(StrEnum):
    HASH = "Hash"
    ARRAY = "Array"
    STRING = "String"
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    NULL = "Null"
    BAD_VALUE = "BadValue"


class BadValue:
    """Marker for a node the markup parser could not turn into a usable value."""

    def __repr__(self) -> str:
        return "BadValue"


BAD_VALUE = BadValue()


def node_kind(node: Any) -> NodeKind:  # noqa: ANN401
    # bool before int, bool is a subclass of int
    match node:
        case None:
            return NodeKind.NULL
        case bool():
            return NodeKind.BOOLEAN
        case int():
            return NodeKind.INTEGER
        case float():
            return NodeKind.FLOAT
        case str():
            return NodeKind.STRING
        case Mapping():
            return NodeKind.HASH
        case list() | tuple():
            return NodeKind.ARRAY
    return NodeKind.BAD_VALUE


def is_missing(node: Any) -> bool:  # noqa: ANN401
    return node_kind(node) in {NodeKind.NULL, NodeKind.BAD_VALUE}


def debug_repr(node: Any) -> str:  # noqa: ANN401
    if node is None or node is BAD_VALUE:
        return node_kind(node).value
    return f"{node_kind(node).value}({node!r})"
