from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Category of an underlying I/O failure."""

    NOT_FOUND = "not found"
    PERMISSION_DENIED = "permission denied"
    OTHER = "other"

    @classmethod
    def from_exception(cls, error: BaseException) -> "ErrorKind":
        match error:
            case FileNotFoundError():
                return cls.NOT_FOUND
            case PermissionError():
                return cls.PERMISSION_DENIED
            case _:
                return cls.OTHER


class JotterError(Exception):
    """Base class for every failure the session folds into a no-op."""


class PersistenceError(JotterError):
    """A create, save or load on a single path failed.

    Attributes:
        path (Path | None): The path the operation was working on.
        kind (ErrorKind): The classified cause.
    """

    def __init__(self, path: Path | None, kind: ErrorKind) -> None:
        super().__init__(f"{path}: {kind.value}")
        self.path = path
        self.kind = kind


class ScanError(JotterError):
    """The working directory could not be enumerated."""

    def __init__(self, directory: Path, kind: ErrorKind) -> None:
        super().__init__(f"cannot list {directory}: {kind.value}")
        self.directory = directory
        self.kind = kind


class NotFound(JotterError):
    """There is no distinct file to move to."""
