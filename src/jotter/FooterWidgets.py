from pathlib import Path

from textual.widgets import Static

from .classes.session import format_status
from .variables.constants import config
from .variables.maps import KEYBIND_DESCRIPTIONS


def key_display(key: str) -> str:
    """Shorten a textual key name for the status line, `ctrl+s` -> `^S`."""
    match key:
        case "escape":
            return "ESC"
        case key if key.startswith("ctrl+"):
            return "^" + key.removeprefix("ctrl+").upper()
        case _:
            return key.upper() if len(key) > 1 else key


def keybind_hint() -> str:
    return " | ".join(
        f"{key_display(config['keybinds'][action][0])}: {description}"
        for action, description in KEYBIND_DESCRIPTIONS.items()
        if config["keybinds"].get(action)
    )


class StatusLine(Static):
    """A single line below the editor: file, cursor position and key hints."""

    def __init__(self, **kwargs) -> None:
        super().__init__("", markup=False, **kwargs)
        self.hint = keybind_hint()

    def update_status(
        self, current_file: Path | None, directory: Path, cursor: tuple[int, int]
    ) -> None:
        self.update(format_status(current_file, directory, cursor, self.hint))
