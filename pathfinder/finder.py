import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Self, TypeVar

from pathfinder.coercion import (
    ARRAY,
    FLOAT,
    HASH,
    INTEGER,
    LENIENT_BOOLEAN,
    STRICT_BOOLEAN,
    STRING,
    Coercion,
)
from pathfinder.errors import InvalidFieldError, MissingFieldError
from pathfinder.node import debug_repr, is_missing
from pathfinder.path import FieldPath, FieldPaths, as_field_paths
from pathfinder.utils import load_document, load_document_file
from pathfinder.walk import NOT_FOUND, resolve

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = str | FieldPath | FieldPaths


class PathFinder(ABC):
    """
    Typed access to structured data via a simple path.

    A path can be something like `users/clients/23/name`
    but also `users.clients.23.name`, with fallbacks separated by `|`.
    """

    @property
    @abstractmethod
    def data(self) -> Any:  # noqa: ANN401
        pass

    def get(self, paths: PathLike) -> Any:  # noqa: ANN401
        """
        Return the node of the first alternative that resolves, or None.

        Null and bad values count as unresolved.
        """
        field_paths = as_field_paths(paths)
        for path in field_paths.alternatives():
            node = self.get_direct(self.data, path)
            if node is not None:
                logger.debug(
                    "path %s resolved via %s",
                    field_paths.to_expression(),
                    path.to_expression(),
                )
                return node
        return None

    def get_direct(self, data: Any, path: FieldPath) -> Any:  # noqa: ANN401
        node = self.get_path(data, path.segments)
        if is_missing(node):
            return None
        return node

    def get_path(self, data: Any, segments: Sequence[str]) -> Any:  # noqa: ANN401
        node = resolve(data, segments)
        if node is NOT_FOUND:
            return None
        return node

    def field(
        self,
        path: PathLike,
        err: str,
        parser: Callable[[Any], T | None],
    ) -> T:
        """
        Resolve `path` and convert the node with `parser`.

        Raises:
            MissingFieldError: No alternative resolved to a usable node.
            InvalidFieldError: `parser` rejected the resolved node.
        """
        field_paths = as_field_paths(path)
        node = self.get(field_paths)
        if node is None:
            raise MissingFieldError(field_paths.to_expression())
        parsed = parser(node)
        if parsed is None:
            raise InvalidFieldError(
                field_paths.to_expression(),
                f"{err} ({debug_repr(node)})",
                node,
            )
        return parsed

    def get_as(self, path: PathLike, coercion: Coercion[T]) -> T:
        return self.field(path, coercion.error_label, coercion)

    def get_str(self, path: PathLike) -> str:
        return self.get_as(path, STRING)

    def get_string(self, path: PathLike) -> str:
        # str is immutable, the borrowed and the owned variant are the same
        return str(self.get_as(path, STRING))

    def get_int(self, path: PathLike) -> int:
        return self.get_as(path, INTEGER)

    def get_float(self, path: PathLike) -> float:
        """Also takes an integer and reinterprets it."""
        return self.get_as(path, FLOAT)

    def get_bool(self, path: PathLike) -> bool:
        """
        **Careful**, this also interprets strings: `"yes"` is `True`
        and any other string is `False`.
        """
        return self.get_as(path, LENIENT_BOOLEAN)

    def get_bool_strict(self, path: PathLike) -> bool:
        return self.get_as(path, STRICT_BOOLEAN)

    def get_hash(self, path: PathLike) -> Mapping[Any, Any]:
        return self.get_as(path, HASH)

    def get_list(self, path: PathLike) -> tuple[Any, ...]:
        return self.get_as(path, ARRAY)


@dataclass(frozen=True)
class Document(PathFinder):
    tree: Any

    @property
    def data(self) -> Any:  # noqa: ANN401
        return self.tree

    @classmethod
    def loads(cls, content: str | bytes) -> Self:
        return cls(tree=load_document(content))

    @classmethod
    def load_file(cls, path: Path) -> Self:
        return cls(tree=load_document_file(path))
