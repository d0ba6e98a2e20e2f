import os
import tempfile
from pathlib import Path

import pytest

import favdirs.tests.utils as testutils
from favdirs.app import Application, dir_name, truncate_path
from favdirs.core import LocationStore, ScreenKind, Session
from favdirs.functions.config import load_config


def make_app(store: LocationStore, start: str) -> Application:
    return Application(store, Session(store.load(), start), load_config())


@pytest.mark.asyncio
async def test_select_bound_key():
    with tempfile.TemporaryDirectory() as temp_dir:
        store = testutils.make_store(Path(temp_dir), testutils.SAMPLE_LOCATIONS)
        app = make_app(store, "/somewhere")
        async with app.run_test() as pilot:
            await pilot.press("a")
        assert app.return_value == "/home/u/proj"
        assert Path(store.select_file).read_text(encoding="utf-8") == "/home/u/proj"


@pytest.mark.asyncio
async def test_add_then_cancel():
    with tempfile.TemporaryDirectory() as temp_dir:
        store = testutils.make_store(Path(temp_dir), "")
        app = make_app(store, "/tmp/work")
        async with app.run_test() as pilot:
            await pilot.press("ctrl+a")
            await pilot.press("z")
            await pilot.pause()
            assert app.session.screen is ScreenKind.ADD
            assert app.session.locations == {"z": "/tmp/work"}
            assert Path(store.locations_file).read_text(encoding="utf-8") == "z=/tmp/work\n"
            await pilot.press("escape")
        assert app.return_value == "/tmp/work"
        assert Path(store.select_file).read_text(encoding="utf-8") == "/tmp/work"


@pytest.mark.asyncio
async def test_delete_binding():
    with tempfile.TemporaryDirectory() as temp_dir:
        store = testutils.make_store(Path(temp_dir), "a=/x\nb=/y\n")
        app = make_app(store, "/start")
        async with app.run_test() as pilot:
            await pilot.press("ctrl+d")
            await pilot.press("a")
            await pilot.pause()
            assert app.session.locations == {"b": "/y"}
            assert Path(store.locations_file).read_text(encoding="utf-8") == "b=/y\n"
            await pilot.press("ctrl+c")
        assert app.return_value == "/start"


@pytest.mark.asyncio
async def test_unbound_key_keeps_running():
    with tempfile.TemporaryDirectory() as temp_dir:
        store = testutils.make_store(Path(temp_dir), testutils.SAMPLE_LOCATIONS)
        app = make_app(store, "/start")
        async with app.run_test() as pilot:
            await pilot.press("x")
            await pilot.pause()
            assert not app.session.terminal
            assert app.session.help_text == "No directory bound to x."
            assert app.is_running
        assert not os.path.exists(store.select_file)


@pytest.mark.asyncio
async def test_failed_save_is_reported():
    with tempfile.TemporaryDirectory() as temp_dir:
        store = LocationStore(
            str(Path(temp_dir) / "gone" / "locations"), str(Path(temp_dir) / "select")
        )
        app = make_app(store, "/tmp/work")
        async with app.run_test() as pilot:
            await pilot.press("ctrl+a")
            await pilot.press("k")
            await pilot.pause()
            assert app.session.help_text.startswith("Could not save locations:")
            assert app.session.locations == {"k": "/tmp/work"}
            assert not app.session.terminal
            # the session still works after the failure
            await pilot.press("ctrl+s")
            await pilot.press("k")
        assert app.return_value == "/tmp/work"
        assert Path(store.select_file).read_text(encoding="utf-8") == "/tmp/work"


def test_dir_name():
    assert dir_name("/home/u/proj") == "proj"
    assert dir_name("/home/u/proj/") == "proj"
    assert dir_name("/") == "/"


def test_truncate_path():
    assert truncate_path("/home/u/proj", 70) == "/home/u/proj"
    long_path = "/very" * 20 + "/target"
    short = truncate_path(long_path, 40)
    assert short.startswith("...")
    assert short.endswith("/very/target")
    assert len(short) == 40 - len("target") - 5


@pytest.mark.asyncio
async def test_keys_after_finish_do_not_finish_again():
    with tempfile.TemporaryDirectory() as temp_dir:
        store = testutils.make_store(Path(temp_dir), testutils.SAMPLE_LOCATIONS)
        finished = Session(store.load(), "/start").finish("/start")
        app = Application(store, finished, load_config())
        async with app.run_test() as pilot:
            await pilot.press("a")
            await pilot.pause()
            assert app.session is finished
            assert app.is_running
        # finish() was never reached, so nothing was written
        assert not os.path.exists(store.select_file)
