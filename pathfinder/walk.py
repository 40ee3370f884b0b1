import re
from collections.abc import Sequence
from typing import Any

from pathfinder.node import NodeKind, node_kind

INDEX_RE = re.compile(r"[0-9]+")


class _NotFound:
    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Any = _NotFound()


def parse_index(segment: str) -> int | None:
    if INDEX_RE.fullmatch(segment):
        return int(segment)
    return None


def _child(node: Any, segment: str) -> Any:  # noqa: ANN401
    match node_kind(node):
        case NodeKind.HASH:
            return node.get(segment, NOT_FOUND)
        case NodeKind.ARRAY:
            index = parse_index(segment)
            if index is None or index >= len(node):
                return NOT_FOUND
            return node[index]
    # the path is longer than the data structure
    return NOT_FOUND


def resolve(node: Any, segments: Sequence[str]) -> Any:  # noqa: ANN401
    """
    Walk `segments` down from `node`.

    Hash nodes are looked up by key, array nodes by non-negative index.

    Args:
        node (Any): The node to start from.
        segments (Sequence[str]): Path segments, at least one.
    Returns:
        Any: The node found at the end of the path, or NOT_FOUND.
    """
    if not segments:
        return NOT_FOUND
    segment, *remainder = segments
    child = _child(node, segment)
    if child is NOT_FOUND or not remainder:
        return child
    return resolve(child, remainder)
