import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Self

from pathfinder.errors import InvalidPathError

PATH_ALTERNATIVE_SEPARATOR = "|"
PATH_SEGMENT_SEPARATOR_RE = re.compile(r"[./]")
WHITESPACE_RE = re.compile(r"\s")


def _check_whitespace(expression: str) -> None:
    if WHITESPACE_RE.search(expression):
        raise InvalidPathError(expression)


@dataclass(frozen=True)
class FieldPath:
    """
    A single path alternative, e.g. `users/clients/23/name` or `users.clients.23.name`.
    """

    segments: tuple[str, ...]

    @classmethod
    def parse(cls, expression: str) -> Self:
        _check_whitespace(expression)
        return cls(segments=tuple(PATH_SEGMENT_SEPARATOR_RE.split(expression)))

    def elements(self) -> Iterator[str]:
        return iter(self.segments)

    def to_expression(self) -> str:
        return ".".join(self.segments)


@dataclass(frozen=True)
class FieldPaths:
    """
    Ordered fallback alternatives, e.g. `offer.date|offer_date`.

    The first alternative that resolves wins.
    """

    paths: tuple[FieldPath, ...]

    @classmethod
    def parse(cls, expression: str) -> Self:
        return cls(paths=tuple(parse_alternatives(expression)))

    def alternatives(self) -> Iterator[FieldPath]:
        return iter(self.paths)

    def to_expression(self) -> str:
        return PATH_ALTERNATIVE_SEPARATOR.join(
            path.to_expression() for path in self.paths
        )


def parse_alternatives(expression: str) -> list[FieldPath]:
    """
    Split a path expression into its alternatives.

    Args:
        expression (str): A path expression like `offer.date|offer_date`.
    Returns:
        list[FieldPath]: The alternatives in order of precedence.
    Raises:
        InvalidPathError: If the expression contains whitespace.
    """
    _check_whitespace(expression)
    return [
        FieldPath.parse(alternative)
        for alternative in expression.split(PATH_ALTERNATIVE_SEPARATOR)
    ]


def as_field_paths(path: str | FieldPath | FieldPaths) -> FieldPaths:
    match path:
        case FieldPaths():
            return path
        case FieldPath():
            return FieldPaths(paths=(path,))
        case str():
            return FieldPaths.parse(path)
    raise TypeError(f"unsupported path type: {type(path).__name__}")
