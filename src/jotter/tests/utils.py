from os import mkdir
from pathlib import Path

TEST_FILE_CONTENT_1 = "file data"


# Let the exceptions roam wild
def setup_test_dir(*args: Path):
    for dir in args:
        mkdir(dir)


# Let the exceptions roam wild
def setup_test_files(*args: Path, content: str = TEST_FILE_CONTENT_1):
    for file in args:
        file.write_text(content, encoding="utf-8")


def content_of(file: Path) -> str:
    """Read a file without newline translation."""
    with open(file, "r", encoding="utf-8", newline="") as f:
        return f.read()


class StringBuffer:
    """A plain in-memory stand-in for the editor widget."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def replace(self, text: str) -> None:
        self.text = text
