"""Tests for core/bootstrap.py and the bundled subprocesses."""

import importlib
import sys
import textwrap

import pytest

from conftest import make_config
from core.bootstrap import start_subprocesses
from subprocesses import uptime
from utils.errors import BootstrapError

PACKAGE = "bootstrap_fixture_subprocesses"


@pytest.fixture
def subprocess_package(tmp_path, monkeypatch):
    """A throwaway subprocess package whose modules append to CALLS."""
    pkg = tmp_path / PACKAGE
    pkg.mkdir()
    (pkg / "__init__.py").write_text("CALLS = []\n")
    for name in ("first", "second"):
        (pkg / f"{name}.py").write_text(textwrap.dedent(f"""
            from {PACKAGE} import CALLS

            def main(client, config, base_dir):
                CALLS.append(("{name}", client, config, base_dir))
        """))
    (pkg / "broken.py").write_text("def main(client, config, base_dir):\n    raise RuntimeError('no db')\n")
    (pkg / "no_entry.py").write_text("VALUE = 1\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    yield pkg
    for mod in [m for m in sys.modules if m.split(".")[0] == PACKAGE]:
        del sys.modules[mod]


def calls():
    return importlib.import_module(PACKAGE).CALLS


class TestStartSubprocesses:
    """Sequential, all-or-nothing startup."""

    def test_starts_in_declared_order(self, subprocess_package):
        config = make_config(subprocesses=["second", "first"])
        client = object()

        started = start_subprocesses(client, config, "/srv/bot", package=PACKAGE)

        assert [m.__name__.rsplit(".", 1)[1] for m in started] == ["second", "first"]
        assert calls() == [
            ("second", client, config, "/srv/bot"),
            ("first", client, config, "/srv/bot"),
        ]

    def test_failure_aborts_remaining(self, subprocess_package):
        config = make_config(subprocesses=["first", "broken", "second"])

        with pytest.raises(BootstrapError, match="Failed to start subprocess 'broken': no db"):
            start_subprocesses(object(), config, "/srv/bot", package=PACKAGE)

        assert [c[0] for c in calls()] == ["first"]

    def test_missing_module(self, subprocess_package):
        config = make_config(subprocesses=["ghost"])
        with pytest.raises(BootstrapError, match="'ghost'") as info:
            start_subprocesses(object(), config, "/srv/bot", package=PACKAGE)
        assert isinstance(info.value.cause, ImportError)

    def test_module_without_main(self, subprocess_package):
        config = make_config(subprocesses=["no_entry"])
        with pytest.raises(BootstrapError, match="no main"):
            start_subprocesses(object(), config, "/srv/bot", package=PACKAGE)

    def test_nothing_configured(self):
        assert start_subprocesses(object(), make_config(), "/srv/bot") == []


class TestUptimeSubprocess:
    """The bundled uptime clock."""

    def test_main_starts_clock(self, monkeypatch):
        monkeypatch.setattr(uptime, "CLOCK", None)
        start_subprocesses(object(), make_config(subprocesses=["uptime"]), "/srv/bot")
        assert uptime.CLOCK is not None
        assert uptime.CLOCK.connects == 0

    def test_reconnects_counted_after_first_connect(self):
        clock = uptime.SessionClock.start(uptime.DEFAULT_TZ)
        clock.mark_connect()
        assert clock.reconnects == 0
        clock.mark_connect()
        clock.mark_disconnect()
        clock.mark_resume()
        status = clock.format_status()
        assert "Reconnects: 1" in status
        assert "disconnects: 1" in status
        assert "resumes: 1" in status
