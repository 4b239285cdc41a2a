"""Errors raised while parsing and combining tree paths."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure categories; lets callers branch on ``err.kind``."""

    INVALID_CHARACTER = "invalid_character"
    INVALID_SEGMENT = "invalid_segment"
    ABOVE_ROOT = "above_root"
    NOT_ABSOLUTE = "not_absolute"
    FLAVOR_MISMATCH = "flavor_mismatch"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


class PathError(ValueError):
    """Base class for every path failure."""

    kind: ErrorKind

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class InvalidCharacterError(PathError):
    """Raised when a raw path string contains a disallowed character."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, path: str, character: Optional[str] = None) -> None:
        super().__init__(path, "path contains invalid characters")
        self.character = character


class InvalidSegmentError(PathError):
    """Raised when a segment sequence handed to a trusted constructor is malformed."""

    kind = ErrorKind.INVALID_SEGMENT


class AboveRootError(PathError):
    """Raised when a '..' element has no previous element to cancel."""

    kind = ErrorKind.ABOVE_ROOT

    def __init__(self, path: str) -> None:
        super().__init__(path, "cannot handle '..' element: would hop above the root of the path")


class NotAbsoluteError(PathError):
    """Raised when an operation needs an absolute path and gets a relative one."""

    kind = ErrorKind.NOT_ABSOLUTE


class FlavorMismatchError(PathError):
    """Raised when two paths of different flavors are combined."""

    kind = ErrorKind.FLAVOR_MISMATCH


class PathIndexError(PathError, IndexError):
    """Raised when a level index is outside the path's segments."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, path: str, index: int, levels: int) -> None:
        super().__init__(path, f"level index {index} out of range for {levels} level(s)")
        self.index = index


__all__ = [
    "ErrorKind",
    "PathError",
    "InvalidCharacterError",
    "InvalidSegmentError",
    "AboveRootError",
    "NotAbsoluteError",
    "FlavorMismatchError",
    "PathIndexError",
]
