"""Messages flowing into and out of the session state machine.

Inbound events come from the user, the autosave timer and the window.
Result events carry the outcome of a command back in; `error` is None on
success. Commands are requests for one asynchronous operation each.
"""

from dataclasses import dataclass
from pathlib import Path

from jotter.classes.errors import JotterError
from jotter.functions.scanner import Direction
from jotter.variables.constants import FILENAME_FORMAT, TEXT_EXTENSION


@dataclass(frozen=True)
class Bootstrap:
    pass


@dataclass(frozen=True)
class BufferEdited:
    changed: bool = True


@dataclass(frozen=True)
class AutosaveTick:
    pass


@dataclass(frozen=True)
class SaveRequested:
    pass


@dataclass(frozen=True)
class Navigate:
    direction: Direction


@dataclass(frozen=True)
class NewFile:
    pass


@dataclass(frozen=True)
class SessionClosing:
    pass


@dataclass(frozen=True)
class CreateCompleted:
    path: Path
    epoch: int
    error: JotterError | None = None


@dataclass(frozen=True)
class SaveCompleted:
    path: Path | None
    epoch: int
    generation: int
    error: JotterError | None = None


@dataclass(frozen=True)
class FileLoaded:
    path: Path | None
    text: str = ""
    error: JotterError | None = None


@dataclass(frozen=True)
class CreateFile:
    path: Path
    epoch: int


@dataclass(frozen=True)
class SaveFile:
    path: Path | None
    text: str
    epoch: int
    generation: int
    directory: Path | None = None
    extension: str = TEXT_EXTENSION
    filename_format: str = FILENAME_FORMAT


@dataclass(frozen=True)
class OpenAdjacent:
    directory: Path
    current: Path | None
    direction: Direction
    extension: str = TEXT_EXTENSION


Event = (
    Bootstrap
    | BufferEdited
    | AutosaveTick
    | SaveRequested
    | Navigate
    | NewFile
    | SessionClosing
    | CreateCompleted
    | SaveCompleted
    | FileLoaded
)
Command = CreateFile | SaveFile | OpenAdjacent
