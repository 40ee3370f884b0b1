import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from pathfinder.node import NodeKind, node_kind

T = TypeVar("T")


class Coercion(ABC, Generic[T]):
    name: str
    error_label: str

    @abstractmethod
    def coerce(self, node: Any) -> T | None:  # noqa: ANN401
        pass

    def __call__(self, node: Any) -> T | None:  # noqa: ANN401
        return self.coerce(node)


@dataclass(frozen=True)
class StringCoercion(Coercion[str]):
    name: str = "string"
    error_label: str = "not a string"

    def coerce(self, node: Any) -> str | None:  # noqa: ANN401
        if node_kind(node) == NodeKind.STRING:
            return node
        return None


@dataclass(frozen=True)
class IntegerCoercion(Coercion[int]):
    name: str = "integer"
    error_label: str = "not an integer"

    def coerce(self, node: Any) -> int | None:  # noqa: ANN401
        if node_kind(node) == NodeKind.INTEGER:
            return node
        return None


@dataclass(frozen=True)
class FloatCoercion(Coercion[float]):
    """Also takes an integer and widens it."""

    name: str = "float"
    error_label: str = "not a float"

    def coerce(self, node: Any) -> float | None:  # noqa: ANN401
        match node_kind(node):
            case NodeKind.FLOAT:
                return node
            case NodeKind.INTEGER:
                try:
                    return float(node)
                except OverflowError:
                    # integers beyond the float range saturate to infinity
                    return math.inf if node > 0 else -math.inf
        return None


@dataclass(frozen=True)
class LenientBooleanCoercion(Coercion[bool]):
    """
    A bit sweeter than YAML 1.2: strings are accepted too, similar to YAML 1.1.

    Only `"yes"` (any case) is `True`, every other string is `False`, `"no"` included.
    """

    name: str = "boolean"
    error_label: str = "not a boolean"

    def coerce(self, node: Any) -> bool | None:  # noqa: ANN401
        match node_kind(node):
            case NodeKind.BOOLEAN:
                return node
            case NodeKind.STRING:
                return node.lower() == "yes"
        return None


@dataclass(frozen=True)
class StrictBooleanCoercion(Coercion[bool]):
    name: str = "strict-boolean"
    error_label: str = "not a boolean"

    def coerce(self, node: Any) -> bool | None:  # noqa: ANN401
        if node_kind(node) == NodeKind.BOOLEAN:
            return node
        return None


@dataclass(frozen=True)
class HashCoercion(Coercion[Mapping[Any, Any]]):
    name: str = "hash"
    error_label: str = "not a hash"

    def coerce(self, node: Any) -> Mapping[Any, Any] | None:  # noqa: ANN401
        if node_kind(node) == NodeKind.HASH:
            # read-only view, the tree is borrowed
            return MappingProxyType(node)
        return None


@dataclass(frozen=True)
class ArrayCoercion(Coercion[tuple[Any, ...]]):
    name: str = "array"
    error_label: str = "not a vector"

    def coerce(self, node: Any) -> tuple[Any, ...] | None:  # noqa: ANN401
        if node_kind(node) == NodeKind.ARRAY:
            return tuple(node)
        return None


STRING = StringCoercion()
INTEGER = IntegerCoercion()
FLOAT = FloatCoercion()
LENIENT_BOOLEAN = LenientBooleanCoercion()
STRICT_BOOLEAN = StrictBooleanCoercion()
HASH = HashCoercion()
ARRAY = ArrayCoercion()

COERCIONS: dict[str, Coercion] = {
    coercion.name: coercion
    for coercion in (
        STRING,
        INTEGER,
        FLOAT,
        LENIENT_BOOLEAN,
        STRICT_BOOLEAN,
        HASH,
        ARRAY,
    )
}


def get_coercion(
    name: str,
    coercions: Mapping[str, Coercion] = COERCIONS,
) -> Coercion:
    try:
        return coercions[name]
    except KeyError as ex:
        valid_options = ", ".join(sorted(coercions))
        raise KeyError(
            f"Unknown coercion '{name}'. Expected one of: {valid_options}."
        ) from ex
