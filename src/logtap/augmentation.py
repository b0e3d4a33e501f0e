"""Console augmentation and the opt-in global installer.

augment() mirrors a console's channels into a read-only mapping where
each channel function also carries a ``.tap`` bound to that channel::

    con = augment()
    con.warn("disk low")                 # plain channel call
    size = con.warn.tap(du(path), "du")  # logs on warn, returns size
    con.tap(value)                       # tap on 'log'

The host console is never modified.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional

from logtap.lib.log_lib.channels import KNOWN_CHANNELS, RESERVED_CHANNEL_NAMES
from logtap.lib.log_lib.console import get_console, set_console
from logtap.taplog import make_tap, lookup_channel


class TapChannel:
    """A console channel function plus a ``tap`` bound to it."""

    __slots__ = ('name', 'func', 'tap')

    def __init__(self, name: str, func: Callable, tap: Callable):
        self.name = name
        self.func = func
        self.tap = tap

    def __call__(self, *args, **kwargs):
        return self.func(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<TapChannel {self.name!r}>"


class AugmentedConsole(Mapping):
    """Read-only mapping of channel name -> TapChannel.

    Channels are also reachable as attributes. The top-level ``tap``
    attribute is bound to the 'log' channel and is not one of the keys.
    """

    def __init__(self, channels: Dict[str, TapChannel], tap: Callable):
        shadowed = sorted(set(channels) & RESERVED_CHANNEL_NAMES)
        if shadowed:
            raise ValueError(f"Channel names shadow console attributes: {shadowed}")
        self._channels = dict(channels)
        self.tap = tap

    def __getitem__(self, name: str) -> TapChannel:
        return self._channels[name]

    def __iter__(self):
        return iter(self._channels)

    def __len__(self) -> int:
        return len(self._channels)

    def __getattr__(self, name: str):
        channels = self.__dict__.get('_channels', {})
        if name in channels:
            return channels[name]
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    @property
    def channels(self) -> tuple:
        return tuple(self._channels)

    def __repr__(self) -> str:
        return f"<AugmentedConsole channels={list(self._channels)}>"


def discover_channels(host: Any) -> tuple:
    """List the channel names a console-like host exposes.

    Uses the host's own ``channels`` attribute when it has one, the
    callable values of a mapping host, and otherwise whichever known
    channels the host provides as callables.
    """
    declared = getattr(host, 'channels', None)
    if declared is not None and not callable(declared):
        return tuple(declared)
    if isinstance(host, Mapping):
        return tuple(name for name, func in host.items() if callable(func))
    return tuple(name for name in KNOWN_CHANNELS
                 if callable(getattr(host, name, None)))


def augment(host: Any = None,
            channels: Optional[Iterable[str]] = None) -> AugmentedConsole:
    """Build an AugmentedConsole over a host console.

    The top-level ``tap`` follows the selected channels: when 'log' is
    left out, calling it raises InvalidChannelError instead of reaching
    the host's own log.

    Args:
        host: Console-like object or mapping of callables
            (default: the process-wide console)
        channels: Channel names to include (default: discover_channels)

    Returns:
        A new AugmentedConsole; the channel set is fixed from here on
    """
    if host is None:
        host = get_console()
    names = tuple(channels) if channels is not None else discover_channels(host)

    wrapped = {
        name: TapChannel(name, lookup_channel(host, name), make_tap(name, host))
        for name in names
    }
    if 'log' in wrapped:
        top_tap = wrapped['log'].tap
    else:
        # Excluded 'log': the top-level tap raises InvalidChannelError
        top_tap = make_tap('log', wrapped)
    return AugmentedConsole(wrapped, top_tap)


def install(host: Any = None) -> Any:
    """Make an augmented console the process-wide console.

    Args:
        host: Console to augment (default: the current process-wide one)

    Returns:
        The previous process-wide console, for restore()
    """
    if host is None:
        host = get_console()
    if isinstance(host, AugmentedConsole):
        return set_console(host)
    return set_console(augment(host))


def restore(previous: Any) -> Any:
    """Put back a console returned by install().

    Returns:
        The console that was replaced
    """
    return set_console(previous)
