from os import getcwd, path
from pathlib import Path
from typing import ClassVar

from textual import log, on
from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.message import Message
from textual.widgets import TextArea
from textual.worker import Worker, get_current_worker

from .classes.events import (
    AutosaveTick,
    Bootstrap,
    BufferEdited,
    Command,
    CreateCompleted,
    Event,
    Navigate,
    NewFile,
    SaveCompleted,
    SaveRequested,
    SessionClosing,
)
from .classes.session import SessionMachine, execute
from .FooterWidgets import StatusLine
from .functions.scanner import Direction
from .screens.shortcuts import Shortcuts
from .variables.constants import StatusTitles, config


class EditorBuffer:
    """Exposes a TextArea as the session's buffer."""

    def __init__(self, text_area: TextArea) -> None:
        self.text_area = text_area

    @property
    def text(self) -> str:
        return self.text_area.text

    def replace(self, text: str) -> None:
        # replacing the whole document is not an edit
        with self.text_area.prevent(TextArea.Changed):
            self.text_area.load_text(text)


class OperationFinished(Message):
    """A persistence command finished; carries its result event."""

    def __init__(self, event: Event, worker: Worker) -> None:
        super().__init__()
        self.event = event
        self.worker = worker


def resolve_startup_directory(startup_path: str = "") -> Path:
    """Work out the directory to keep documents in.

    Args:
        startup_path (str): A directory, or a file whose parent is used.
            Empty or missing paths fall back to the current directory.

    Returns:
        Path: An absolute directory.
    """
    if not startup_path:
        return Path(getcwd())
    candidate = Path(path.expanduser(startup_path))
    if candidate.is_dir():
        return candidate.resolve()
    if candidate.is_file():
        return candidate.resolve().parent
    log.warning(f"{startup_path} does not exist, using {getcwd()}")
    return Path(getcwd())


class Application(App):
    CSS_PATH = "style.tcss"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[BindingType]] = (
        [
            Binding(bind, "save", "Save", show=False, priority=True)
            for bind in config["keybinds"]["save"]
        ]
        + [
            Binding(bind, "previous", "Previous file", show=False, priority=True)
            for bind in config["keybinds"]["previous"]
        ]
        + [
            Binding(bind, "next", "Next file", show=False, priority=True)
            for bind in config["keybinds"]["next"]
        ]
        + [
            Binding(bind, "new", "New file", show=False, priority=True)
            for bind in config["keybinds"]["new"]
        ]
        + [
            Binding(bind, "shortcuts", "Keys", show=False)
            for bind in config["keybinds"]["help"]
        ]
        + [
            Binding(bind, "quit", "Exit", show=False)
            for bind in config["keybinds"]["quit"]
        ]
    )

    def __init__(self, startup_path: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.directory = resolve_startup_directory(startup_path)
        self.machine: SessionMachine | None = None
        self.pending: set[Worker] = set()

    def compose(self) -> ComposeResult:
        yield TextArea(
            id="editor",
            soft_wrap=config["interface"]["soft_wrap"],
            show_line_numbers=config["interface"]["show_line_numbers"],
        )
        yield StatusLine(id="status")

    def on_mount(self) -> None:
        if config["interface"]["theme"] in self.available_themes:
            self.theme = config["interface"]["theme"]
        else:
            log.warning(f"unknown theme {config['interface']['theme']}")
        self.title = "jotter - " + str(self.directory).replace(path.sep, "/")
        editor = self.query_one("#editor", TextArea)
        editor.border_title = StatusTitles.editor
        self.machine = SessionMachine(
            EditorBuffer(editor),
            self.directory,
            extension=config["settings"]["extension"],
            filename_format=config["settings"]["filename_format"],
        )
        editor.focus()
        self.set_interval(config["settings"]["autosave_interval"], self.autosave)
        self.send(Bootstrap())

    def send(self, event: Event) -> None:
        """Feed an event to the session and launch whatever it asks for."""
        if self.machine is None:
            return
        self.dispatch(self.machine.handle(event))
        self.refresh_status()

    def dispatch(self, commands: list[Command]) -> None:
        for command in commands:
            self.pending.add(self.run_worker(self.perform(command), group="persistence"))

    async def perform(self, command: Command) -> Event:
        event = await execute(command)
        self.post_message(OperationFinished(event, get_current_worker()))
        return event

    @on(OperationFinished)
    def reconcile(self, message: OperationFinished) -> None:
        # already reconciled by a quit that waited for it
        if message.worker not in self.pending:
            return
        self.pending.discard(message.worker)
        event = message.event
        self.send(event)
        if (
            isinstance(event, (CreateCompleted, SaveCompleted))
            and event.error is not None
            and config["interface"]["notify_on_error"]
        ):
            self.notify(str(event.error), title="jotter", severity="error")

    def refresh_status(self) -> None:
        if self.machine is None:
            return
        self.query_one("#status", StatusLine).update_status(
            self.machine.session.current_file,
            self.machine.session.directory,
            self.query_one("#editor", TextArea).cursor_location,
        )

    def autosave(self) -> None:
        self.send(AutosaveTick())

    @on(TextArea.Changed, "#editor")
    def edited(self, event: TextArea.Changed) -> None:
        self.send(BufferEdited(changed=True))

    @on(TextArea.SelectionChanged, "#editor")
    def cursor_moved(self, event: TextArea.SelectionChanged) -> None:
        self.refresh_status()

    def action_save(self) -> None:
        self.send(SaveRequested())

    def action_previous(self) -> None:
        self.send(Navigate(Direction.PREVIOUS))

    def action_next(self) -> None:
        self.send(Navigate(Direction.NEXT))

    def action_new(self) -> None:
        self.send(NewFile())

    def action_shortcuts(self) -> None:
        self.push_screen(Shortcuts())

    async def action_quit(self) -> None:
        """Let running saves and loads finish, save unsaved work, then exit."""
        if self.machine is not None:
            pending, self.pending = list(self.pending), set()
            await self.workers.wait_for_complete(pending)
            commands: list[Command] = []
            for worker in pending:
                if worker.result is not None:
                    commands.extend(self.machine.handle(worker.result))
            commands.extend(self.machine.handle(SessionClosing()))
            for command in commands:
                self.machine.handle(await execute(command))
        self.exit()
