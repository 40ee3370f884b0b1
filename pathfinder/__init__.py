from pathfinder.errors import (
    FieldError,
    FieldErrorKind,
    InvalidFieldError,
    InvalidPathError,
    MissingFieldError,
)
from pathfinder.finder import Document, PathFinder
from pathfinder.path import FieldPath, FieldPaths, parse_alternatives

__all__ = [
    "Document",
    "FieldError",
    "FieldErrorKind",
    "FieldPath",
    "FieldPaths",
    "InvalidFieldError",
    "InvalidPathError",
    "MissingFieldError",
    "PathFinder",
    "parse_alternatives",
]
