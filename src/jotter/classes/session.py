from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from textual import log

from jotter.classes.errors import JotterError
from jotter.classes.events import (
    AutosaveTick,
    Bootstrap,
    BufferEdited,
    Command,
    CreateCompleted,
    CreateFile,
    Event,
    FileLoaded,
    Navigate,
    NewFile,
    OpenAdjacent,
    SaveCompleted,
    SaveFile,
    SaveRequested,
    SessionClosing,
)
from jotter.functions import persistence
from jotter.functions.namer import new_filename
from jotter.variables.constants import FILENAME_FORMAT, TEXT_EXTENSION, StatusTitles


class Buffer(Protocol):
    """The editable text the session persists."""

    @property
    def text(self) -> str: ...

    def replace(self, text: str) -> None: ...


@dataclass
class Session:
    """State of the single open document.

    Attributes:
        directory (Path): The working directory files are created in and
            cycled through.
        current_file (Path | None): The file the buffer belongs to. None
            while the document is unnamed.
        dirty (bool): Whether the buffer holds edits not yet on disk.
        loading (bool): True until the pending create (at startup or after a
            new file) resolves. Saving and navigating wait for it.
        generation (int): Bumped on every content-changing edit.
        epoch (int): Bumped whenever the buffer is replaced wholesale.
    """

    directory: Path
    current_file: Path | None = None
    dirty: bool = False
    loading: bool = True
    generation: int = 0
    epoch: int = 0


class SessionMachine:
    """Turns events into state changes and operation requests.

    `handle` never performs I/O and never suspends; it returns the commands
    the caller should run, and each command's result comes back later as
    another event. Results arrive in completion order, so a save or create
    only touches the session if it belongs to the document that is still
    open (same epoch). A save clears `dirty` only when no edit happened
    after it captured the text (same generation).
    """

    def __init__(
        self,
        buffer: Buffer,
        directory: Path,
        extension: str = TEXT_EXTENSION,
        filename_format: str = FILENAME_FORMAT,
    ) -> None:
        self.buffer = buffer
        self.session = Session(directory=Path(directory))
        self.extension = extension
        self.filename_format = filename_format

    def handle(self, event: Event) -> list[Command]:
        session = self.session
        match event:
            case BufferEdited(changed=changed):
                if changed:
                    session.dirty = True
                    session.generation += 1
                return []

            case Bootstrap():
                session.loading = True
                return [self._create()]

            case CreateCompleted(path=path, epoch=epoch, error=error):
                session.loading = False
                if error is not None:
                    log.warning(f"could not create {path}: {error}")
                elif epoch != session.epoch:
                    log.debug(f"ignoring stale create of {path}")
                else:
                    session.current_file = path
                    log.info(f"created {path}")
                return []

            case AutosaveTick() | SaveRequested():
                if session.loading:
                    return []
                return [self._save()]

            case SaveCompleted(path=path, epoch=epoch, generation=generation, error=error):
                if epoch != session.epoch:
                    log.debug(f"ignoring stale save of {path}")
                    return []
                session.loading = False
                if error is not None:
                    log.warning(f"could not save {path or 'unnamed document'}: {error}")
                    return []
                session.current_file = path
                if generation == session.generation:
                    session.dirty = False
                return []

            case Navigate(direction=direction):
                if session.loading:
                    return []
                commands = [self._save()] if session.dirty else []
                commands.append(
                    OpenAdjacent(
                        directory=session.directory,
                        current=session.current_file,
                        direction=direction,
                        extension=self.extension,
                    )
                )
                return commands

            case NewFile():
                if session.loading:
                    return []
                commands = [self._save()] if session.dirty else []
                self.buffer.replace("")
                session.dirty = False
                session.epoch += 1
                session.current_file = None
                session.loading = True
                commands.append(self._create())
                return commands

            case FileLoaded(path=path, text=text, error=error):
                session.loading = False
                if error is not None:
                    log.warning(f"staying on {session.current_file}: {error}")
                    return []
                self.buffer.replace(text)
                session.current_file = path
                session.dirty = False
                session.epoch += 1
                log.info(f"loaded {path}")
                return []

            case SessionClosing():
                if session.dirty and not session.loading:
                    return [self._save()]
                return []

        raise TypeError(f"unexpected event {event!r}")

    def _create(self) -> CreateFile:
        path = new_filename(self.session.directory, self.extension, self.filename_format)
        return CreateFile(path=path, epoch=self.session.epoch)

    def _save(self) -> SaveFile:
        return SaveFile(
            path=self.session.current_file,
            text=self.buffer.text,
            epoch=self.session.epoch,
            generation=self.session.generation,
            directory=self.session.directory,
            extension=self.extension,
            filename_format=self.filename_format,
        )


async def execute(command: Command) -> Event:
    """Run one command and report its outcome as a result event.

    This is where every `JotterError` is caught; the result carries it in
    `error` instead.
    """
    match command:
        case CreateFile(path=path, epoch=epoch):
            try:
                created = await persistence.create_empty(path)
            except JotterError as error:
                return CreateCompleted(path=path, epoch=epoch, error=error)
            return CreateCompleted(path=created, epoch=epoch)

        case SaveFile(path=path, epoch=epoch, generation=generation):
            try:
                saved = await persistence.save(
                    path,
                    command.text,
                    command.directory,
                    command.extension,
                    command.filename_format,
                )
            except JotterError as error:
                return SaveCompleted(
                    path=path, epoch=epoch, generation=generation, error=error
                )
            return SaveCompleted(path=saved, epoch=epoch, generation=generation)

        case OpenAdjacent(directory=directory, current=current, direction=direction):
            try:
                loaded, text = await persistence.load_adjacent(
                    directory, current, direction, command.extension
                )
            except JotterError as error:
                return FileLoaded(path=None, error=error)
            return FileLoaded(path=loaded, text=text)

    raise TypeError(f"unexpected command {command!r}")


def format_status(
    current_file: Path | None,
    directory: Path,
    cursor: tuple[int, int],
    hint: str = "",
) -> str:
    """Compose the status line shown under the editor.

    Args:
        current_file (Path | None): The open file, if it has a name.
        directory (Path): The working directory; paths inside it are shown
            relative to it.
        cursor (tuple[int, int]): Zero-based (row, column) of the cursor.
        hint (str): Key binding summary appended at the end.

    Returns:
        str: e.g. `File: 2024-01-01_09-00-00.txt | 3:14 | ^S: Save`.
    """
    if current_file is None:
        name = StatusTitles.unnamed
    else:
        try:
            shown = current_file.relative_to(directory)
        except ValueError:
            shown = current_file
        name = f"File: {shown}"
    row, column = cursor
    parts = [name, f"{row + 1}:{column + 1}"]
    if hint:
        parts.append(hint)
    return " | ".join(parts)
