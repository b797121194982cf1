from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import VerticalGroup
from textual.screen import ModalScreen
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from jotter.FooterWidgets import key_display
from jotter.variables.constants import StatusTitles, config
from jotter.variables.maps import KEYBIND_DESCRIPTIONS


class Shortcuts(ModalScreen):
    """Lists every configured key binding."""

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "dismiss", "Close", show=False),
        Binding("q", "dismiss", "Close", show=False),
    ]

    def get_keybind_data(self) -> list[tuple[str, str]]:
        return [
            (", ".join(key_display(key) for key in config["keybinds"][action]), description)
            for action, description in KEYBIND_DESCRIPTIONS.items()
            if config["keybinds"].get(action)
        ]

    def compose(self) -> ComposeResult:
        keybind_data = self.get_keybind_data()
        max_key_width = max((len(keys) for keys, _ in keybind_data), default=0)
        with VerticalGroup(id="shortcuts_group"):
            yield OptionList(
                *[
                    Option(f" {keys.ljust(max_key_width)}  {description} ")
                    for keys, description in keybind_data
                ],
                id="shortcuts_list",
            )

    def on_mount(self) -> None:
        shortcuts_list = self.query_one("#shortcuts_list")
        shortcuts_list.border_title = StatusTitles.shortcuts
        shortcuts_list.border_subtitle = "Press Esc or Q to close"
        shortcuts_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss()
