from datetime import datetime
from pathlib import Path

from jotter.variables.constants import FILENAME_FORMAT, TEXT_EXTENSION


def new_filename(
    directory: Path | None = None,
    extension: str = TEXT_EXTENSION,
    filename_format: str = FILENAME_FORMAT,
    now: datetime | None = None,
) -> Path:
    """Name a new document after the current local time.

    With the default pattern names sort lexicographically in the same order
    they were generated, as long as they are at least a second apart.

    Args:
        directory (Path | None): Directory to place the file in. Relative to
            the process working directory when omitted.
        extension (str): Extension to append, including the dot.
        filename_format (str): strftime pattern for the stem.
        now (datetime | None): Timestamp to use instead of the clock.

    Returns:
        Path: The generated path.
    """
    stamp = (now or datetime.now()).strftime(filename_format)
    filename = Path(f"{stamp}{extension}")
    return filename if directory is None else Path(directory) / filename
