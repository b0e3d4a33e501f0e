"""Shared test fixtures for logtap test suite."""

import io

import pytest

from logtap.lib.log_lib import console as _console_mod


# ---------------------------------------------------------------------------
# Console singleton
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_console():
    """Start each test with no process-wide console and restore it after.

    install()/init_console() replace the module-level singleton; without
    this, one test's installed console would leak into the next.
    """
    old = _console_mod._console
    _console_mod._console = None
    yield
    _console_mod._console = old


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


# ---------------------------------------------------------------------------
# Recording console
# ---------------------------------------------------------------------------
class RecordingConsole:
    """Console-like host that records (channel, args) instead of printing."""

    channels = ('log', 'info', 'warn', 'error')

    def __init__(self):
        self.calls = []

    def _record(self, channel, args):
        self.calls.append((channel, args))

    def log(self, *args):
        self._record('log', args)

    def info(self, *args):
        self._record('info', args)

    def warn(self, *args):
        self._record('warn', args)

    def error(self, *args):
        self._record('error', args)


@pytest.fixture
def recorder():
    """A fresh RecordingConsole."""
    return RecordingConsole()
