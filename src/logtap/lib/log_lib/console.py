"""
Console — the host logging facility that taps write through.

A small console object with one method per channel. Each channel call
emits a single record: its arguments joined by spaces, terminated by a
newline, written to the channel's stream.

    log, info, debug   ->  stdout
    warn, error        ->  stderr

Destinations can be overridden per channel, and channels outside the
known set can be registered as extras (see channels.py for the spec
syntax).

The process-wide console lives in a module-level singleton, read with
get_console() and swapped with set_console().
"""

import functools
import sys
from typing import Any, Dict, Optional, TextIO

from .channels import (
    DESTINATIONS, KNOWN_CHANNELS, RESERVED_CHANNEL_NAMES, InvalidChannelError,
    default_destination, parse_channel_spec,
)


class Console:
    """Console-like logging facility with named channels.

    Usage::

        con = Console(channel_overrides={'info': 'stderr'})
        con.log("loaded", 42)
        con.warn("low disk")
        con.emit('error', "failed:", exc)
    """

    def __init__(
        self,
        channel_overrides: Dict[str, Optional[str]] = None,
        stdout: TextIO = None,
        stderr: TextIO = None,
    ):
        self._destinations: Dict[str, Optional[str]] = {
            name: None for name in KNOWN_CHANNELS
        }
        for name, dest in (channel_overrides or {}).items():
            if name not in KNOWN_CHANNELS and (
                    hasattr(type(self), name) or name in RESERVED_CHANNEL_NAMES):
                raise ValueError(f"Channel name '{name}' shadows a console attribute")
            if dest is not None and dest not in DESTINATIONS:
                raise ValueError(
                    f"Unknown destination {dest!r} for channel '{name}' "
                    f"(expected one of: {', '.join(DESTINATIONS)})"
                )
            self._destinations[name] = dest
        self._stdout = stdout
        self._stderr = stderr

    @property
    def channels(self) -> tuple:
        """Channel names this console exposes, known channels first."""
        known = list(KNOWN_CHANNELS)
        extras = [name for name in self._destinations if name not in KNOWN_CHANNELS]
        return tuple(known + extras)

    def stream_for(self, channel: str) -> TextIO:
        """Resolve the stream a channel writes to.

        Resolved on every call so a redirected sys.stdout/sys.stderr
        is picked up.
        """
        dest = self._destinations.get(channel) or default_destination(channel)
        if dest == 'stderr':
            return self._stderr if self._stderr is not None else sys.stderr
        return self._stdout if self._stdout is not None else sys.stdout

    def emit(self, channel: str, *args: Any) -> None:
        """Write one record on a channel.

        Raises:
            InvalidChannelError: If the channel is not exposed.
        """
        if channel not in self._destinations:
            raise InvalidChannelError(channel)
        print(*args, file=self.stream_for(channel))

    def log(self, *args: Any) -> None:
        self.emit('log', *args)

    def info(self, *args: Any) -> None:
        self.emit('info', *args)

    def debug(self, *args: Any) -> None:
        self.emit('debug', *args)

    def warn(self, *args: Any) -> None:
        self.emit('warn', *args)

    def error(self, *args: Any) -> None:
        self.emit('error', *args)

    def __getattr__(self, name: str):
        # Only reached for names not found normally: extra channels
        destinations = self.__dict__.get('_destinations', {})
        if name in destinations and name not in KNOWN_CHANNELS:
            return functools.partial(self.emit, name)
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __repr__(self) -> str:
        return f"<Console channels={list(self.channels)}>"


# =============================================================================
# Module-level singleton
# =============================================================================

_console: Optional[Any] = None


def init_console(channels: list = None, stdout: TextIO = None,
                 stderr: TextIO = None) -> Console:
    """Initialize the process-wide Console singleton.

    Call once at program startup.

    Args:
        channels: List of channel spec strings (e.g., ['info:stderr', 'audit'])
        stdout: Stream for stdout channels (default: sys.stdout at emit time)
        stderr: Stream for stderr channels (default: sys.stderr at emit time)

    Returns:
        The initialized Console instance
    """
    global _console

    channel_overrides = {}
    if channels:
        for spec in channels:
            cfg = parse_channel_spec(spec)
            channel_overrides[cfg.name] = cfg.destination

    _console = Console(
        channel_overrides=channel_overrides,
        stdout=stdout,
        stderr=stderr,
    )
    return _console


def get_console():
    """Get the process-wide console, creating a default if needed."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console):
    """Replace the process-wide console.

    Returns:
        The previous console, so callers can put it back.
    """
    global _console
    previous = get_console()
    _console = console
    return previous
