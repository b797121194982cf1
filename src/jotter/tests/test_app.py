import asyncio
import dataclasses
from pathlib import Path

import pytest
from textual.widgets import TextArea

import jotter.tests.utils as testutils
from jotter.app import Application, resolve_startup_directory
from jotter.classes.errors import ErrorKind, PersistenceError
from jotter.functions import persistence


async def settle(app: Application, pilot) -> None:
    """Let every persistence worker finish and its result be reconciled."""
    for _ in range(3):
        await app.workers.wait_for_complete()
        await pilot.pause()


@dataclasses.dataclass
class StartupCase:
    name: str
    startup_arg: str
    expected: Path


def test_startup_directory(tmp_path, monkeypatch):
    dir1 = tmp_path / "dir1"
    testutils.setup_test_dir(dir1)
    testutils.setup_test_files(dir1 / "a.txt")
    monkeypatch.chdir(tmp_path)

    test_cases: list[StartupCase] = [
        StartupCase("No argument", "", tmp_path),
        StartupCase("Absolute path", str(dir1), dir1),
        StartupCase("Relative path", "dir1", dir1),
        StartupCase("Path of a file", "dir1/a.txt", dir1),
        StartupCase("Non existing path", "dir1/not/there", tmp_path),
    ]
    for t in test_cases:
        assert resolve_startup_directory(t.startup_arg).resolve() == t.expected.resolve(), t.name


@pytest.mark.asyncio
async def test_app_creates_a_file_and_saves_on_request(tmp_path):
    app = Application(startup_path=str(tmp_path))
    async with app.run_test() as pilot:
        await settle(app, pilot)
        current = app.machine.session.current_file
        assert current is not None and current.exists()
        assert not app.machine.session.loading

        await pilot.press("h", "i")
        await pilot.pause()
        assert app.machine.session.dirty
        await pilot.press("ctrl+s")
        await settle(app, pilot)
        assert testutils.content_of(current) == "hi"
        assert not app.machine.session.dirty


@pytest.mark.asyncio
async def test_app_cycles_through_files(tmp_path):
    testutils.setup_test_files(tmp_path / "a.txt", content="alpha")
    testutils.setup_test_files(tmp_path / "b.txt", content="beta")
    app = Application(startup_path=str(tmp_path))
    async with app.run_test() as pilot:
        await settle(app, pilot)
        editor = app.query_one("#editor", TextArea)

        # the generated name starts with a digit, so it sorts first
        await pilot.press("ctrl+p")
        await settle(app, pilot)
        assert app.machine.session.current_file == tmp_path / "a.txt"
        assert editor.text == "alpha"
        assert not app.machine.session.dirty

        await pilot.press("ctrl+p")
        await settle(app, pilot)
        assert editor.text == "beta"

        await pilot.press("ctrl+l")
        await settle(app, pilot)
        assert editor.text == "alpha"


@pytest.mark.asyncio
async def test_app_new_file_clears_the_editor(tmp_path):
    testutils.setup_test_files(tmp_path / "a.txt", content="alpha")
    app = Application(startup_path=str(tmp_path))
    async with app.run_test() as pilot:
        await settle(app, pilot)
        await pilot.press("ctrl+p")
        await settle(app, pilot)
        await pilot.press("x")
        await pilot.press("ctrl+n")
        assert app.query_one("#editor", TextArea).text == ""
        await settle(app, pilot)
        assert testutils.content_of(tmp_path / "a.txt") == "xalpha"
        assert app.machine.session.current_file is not None


@pytest.mark.asyncio
async def test_quitting_saves_unsaved_work(tmp_path):
    app = Application(startup_path=str(tmp_path))
    async with app.run_test() as pilot:
        await settle(app, pilot)
        current = app.machine.session.current_file
        await pilot.press("b", "y", "e")
        await pilot.press("escape")
    assert testutils.content_of(current) == "bye"


@pytest.mark.asyncio
@pytest.mark.parametrize("switch_key", ["ctrl+n", "ctrl+p"])
async def test_quitting_waits_for_saves_still_running(tmp_path, monkeypatch, switch_key):
    write = persistence._write

    async def slow_write(path: Path, text: str) -> None:
        if text:
            await asyncio.sleep(0.3)
        await write(path, text)

    monkeypatch.setattr(persistence, "_write", slow_write)
    testutils.setup_test_files(tmp_path / "a.txt", content="alpha")
    app = Application(startup_path=str(tmp_path))
    async with app.run_test() as pilot:
        await settle(app, pilot)
        current = app.machine.session.current_file
        await pilot.press("w", "o", "r", "k")
        await pilot.pause()
        # the switch saves "work" in the background and leaves the session clean
        await pilot.press(switch_key)
        await pilot.press("escape")
    assert testutils.content_of(current) == "work"


@pytest.mark.asyncio
async def test_failed_create_is_notified_and_left_unnamed(tmp_path, monkeypatch):
    async def refuse(path: Path) -> Path:
        raise PersistenceError(path, ErrorKind.PERMISSION_DENIED)

    monkeypatch.setattr(persistence, "create_empty", refuse)
    app = Application(startup_path=str(tmp_path))
    async with app.run_test() as pilot:
        await settle(app, pilot)
        assert app.machine.session.current_file is None
        assert not app.machine.session.loading
        assert len(app._notifications) == 1
