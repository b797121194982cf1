import os
from enum import Enum
from pathlib import Path

from jotter.classes.errors import ErrorKind, NotFound, ScanError
from jotter.variables.constants import TEXT_EXTENSION


class Direction(Enum):
    PREVIOUS = "previous"
    NEXT = "next"


def list_text_files(directory: Path, extension: str = TEXT_EXTENSION) -> list[Path]:
    """List the regular files in a directory that carry the text extension.

    Args:
        directory (Path): The directory to scan.
        extension (str): The extension to keep, including the dot.

    Returns:
        list[Path]: The matching files, sorted ascending by path.

    Raises:
        ScanError: The directory could not be enumerated.
    """
    directory = Path(directory)
    try:
        with os.scandir(directory) as entries:
            listing = [
                directory / entry.name
                for entry in entries
                if entry.is_file() and Path(entry.name).suffix == extension
            ]
    except OSError as error:
        raise ScanError(directory, ErrorKind.from_exception(error)) from error
    listing.sort()
    return listing


def find_adjacent(
    listing: list[Path], current: Path | None, direction: Direction
) -> Path:
    """Pick the file before or after `current`, wrapping around the ends.

    Without a current file, or when it is missing from the listing, the first
    file is returned whichever way we were asked to go. A lone file has no
    distinct neighbour, so moving away from it fails instead of wrapping onto
    itself.

    Raises:
        NotFound: The listing is empty, or holds nothing but `current`.
    """
    if not listing:
        raise NotFound("no text files to open")
    if current is None or current not in listing:
        return listing[0]
    if len(listing) == 1:
        raise NotFound(f"{current} is the only text file")

    index = listing.index(current)
    match direction:
        case Direction.PREVIOUS:
            return listing[index - 1] if index > 0 else listing[-1]
        case Direction.NEXT:
            return listing[index + 1] if index < len(listing) - 1 else listing[0]
