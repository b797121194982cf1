"""Asynchronous create/save/load operations on single paths.

None of these know about the session. Each either returns what it did or
raises a `PersistenceError` classifying the underlying failure. Text is
written and read with `newline=""` so content round-trips byte for byte.
"""

import asyncio
from pathlib import Path

import aiofiles

from jotter.classes.errors import ErrorKind, PersistenceError
from jotter.functions.namer import new_filename
from jotter.functions.scanner import Direction, find_adjacent, list_text_files
from jotter.variables.constants import FILENAME_FORMAT, TEXT_EXTENSION


async def _write(path: Path, text: str) -> None:
    try:
        async with aiofiles.open(path, "w", encoding="utf-8", newline="") as f:
            await f.write(text)
    except OSError as error:
        raise PersistenceError(path, ErrorKind.from_exception(error)) from error


async def create_empty(path: Path) -> Path:
    """Create `path` with no content, truncating it if it already exists."""
    await _write(path, "")
    return path


async def save(
    path: Path | None,
    text: str,
    directory: Path | None = None,
    extension: str = TEXT_EXTENSION,
    filename_format: str = FILENAME_FORMAT,
) -> Path:
    """Overwrite a file with `text`.

    Args:
        path (Path | None): Target file. A fresh timestamped name inside
            `directory` is generated when this is None.
        text (str): The full content to write.
        directory (Path | None): Where generated names are placed.
        extension (str): Extension for generated names.
        filename_format (str): strftime pattern for generated names.

    Returns:
        Path: The path actually written.
    """
    if path is None:
        path = new_filename(directory, extension, filename_format)
    await _write(path, text)
    return path


async def load(path: Path) -> tuple[Path, str]:
    """Read the whole of `path` as UTF-8 text."""
    try:
        async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
            text = await f.read()
    except (OSError, UnicodeDecodeError) as error:
        raise PersistenceError(path, ErrorKind.from_exception(error)) from error
    return path, text


async def load_adjacent(
    directory: Path,
    current: Path | None,
    direction: Direction,
    extension: str = TEXT_EXTENSION,
) -> tuple[Path, str]:
    """Scan `directory`, pick the neighbour of `current` and load it.

    Raises:
        ScanError: The directory could not be listed.
        NotFound: There is no distinct neighbour.
        PersistenceError: The neighbour could not be read.
    """
    listing = await asyncio.to_thread(list_text_files, directory, extension)
    target = find_adjacent(listing, current, direction)
    return await load(target)
