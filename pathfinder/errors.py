from enum import StrEnum
from typing import Any


class FieldErrorKind(StrEnum):
    MISSING = "MISSING"
    INVALID = "INVALID"


class InvalidPathError(ValueError):
    def __init__(self, expression: str) -> None:
        self.expression = expression
        message = f"paths shouldn't contain whitespaces: {expression!r}"
        super().__init__(message)


class FieldError(Exception):
    kind: FieldErrorKind

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(message)


class MissingFieldError(FieldError):
    kind = FieldErrorKind.MISSING

    def __init__(self, path: str) -> None:
        super().__init__(path, f"field not found: `{path}`")


class InvalidFieldError(FieldError):
    kind = FieldErrorKind.INVALID

    def __init__(self, path: str, message: str, node: Any) -> None:  # noqa: ANN401
        self.node = node
        super().__init__(path, message)
