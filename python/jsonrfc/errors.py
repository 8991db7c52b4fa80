from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """
    Structural failures reported through ``Result.err``.

    INVALID_POINTER: the pointer text is malformed.
    INVALID_PATH: the pointer is well-formed but does not resolve in the document.
    INVALID_TARGET: the parent resolves but the operation cannot act on the final segment.
    INVALID_OPERATION: a patch record is not one of the supported operations.
    """

    INVALID_POINTER = "invalid_pointer"
    INVALID_PATH = "invalid_path"
    INVALID_TARGET = "invalid_target"
    INVALID_OPERATION = "invalid_operation"

    def __str__(self) -> str:
        return self.value


class BaseJsonRfcError(Exception):
    """Base class for all exceptions raised by this package."""


class DataError(BaseJsonRfcError):
    """Base exception class for documents that cannot be converted from or to text."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        super().__init__()
        self._msg = f"[{error_path}] {msg}" if error_path else msg
        self._error_path = error_path

    def __str__(self) -> str:
        return self._msg


class DataParsingError(DataError):
    """Exception class for documents that cannot be read as JSON or YAML."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        super().__init__(f"parsing error: {msg}", error_path)


class DataSerializationError(DataError):
    """Exception class for documents holding values with no JSON or YAML representation."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        super().__init__(f"serialization error: {msg}", error_path)


class PatchError(BaseJsonRfcError):
    """Raised when a failed result has to be surfaced as an exception."""

    def __init__(self, reason: object, pointer: str = "", step: int | None = None) -> None:
        super().__init__()
        self.reason = reason
        self.pointer = pointer
        self.step = step

    def __str__(self) -> str:
        parts: list[str] = []
        if self.step is not None:
            parts.append(f"step {self.step}")
        if self.pointer:
            parts.append(f"'{self.pointer}'")
        where = f"[{', '.join(parts)}] " if parts else ""
        return f"{where}{self.reason}"
