"""Tap logger: log a value, then hand it back unchanged.

Every console method returns None, so logging something normally means
pulling it out of the expression first. A tap logs inline instead::

    total = tap(price * qty, "subtotal") + shipping
"""

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from logtap.lib.log_lib.channels import InvalidChannelError
from logtap.lib.log_lib.console import get_console
from logtap.lib.log_lib.location import (
    LocationUnresolvableError, caller_frame, format_location,
)


@dataclass
class LogOptions:
    """Options for a single tap call.

    Attributes:
        label: Text logged before the value (dropped when empty)
        location: Append ' - <file>:<line>' of the tap call site
    """
    label: str = ''
    location: bool = True


def resolve_options(options: Any) -> LogOptions:
    """Normalize the options argument of a tap call.

    Accepts None (defaults), a bare label string, a mapping with
    'label'/'location' keys, or a LogOptions instance.
    """
    if options is None:
        return LogOptions()
    if isinstance(options, LogOptions):
        return options
    if isinstance(options, str):
        return LogOptions(label=options)
    if isinstance(options, Mapping):
        location = options.get('location')
        return LogOptions(
            label=options.get('label') or '',
            location=True if location is None else bool(location),
        )
    raise TypeError(
        f"tap options must be a str, mapping or LogOptions, not {type(options).__name__}"
    )


def build_output(value: Any, options: LogOptions,
                 location: Optional[str] = None) -> list:
    """Assemble the arguments for one emission: [label], value, [location].

    The value is always kept, falsy or not; label and location are
    dropped when empty.
    """
    output = []
    if options.label:
        output.append(options.label)
    output.append(value)
    if options.location and location:
        output.append(location)
    return output


def lookup_channel(console: Any, channel: str) -> Callable:
    """Return a console's channel function, by attribute or mapping key."""
    if isinstance(console, Mapping):
        func = console.get(channel)
    else:
        func = getattr(console, channel, None)
    if not callable(func):
        raise InvalidChannelError(channel)
    return func


def _call_site(stacklevel: int) -> Optional[str]:
    # Frame of the tap function itself; caller_frame steps out from there
    frame = inspect.currentframe()
    tap_frame = frame.f_back if frame is not None else None
    if tap_frame is None:
        return None
    try:
        return format_location(caller_frame(stacklevel, frame=tap_frame))
    except LocationUnresolvableError:
        return None
    finally:
        del frame, tap_frame


def make_tap(channel: str = 'log', console: Any = None) -> Callable:
    """Create a tap function bound to one console channel.

    Args:
        channel: Channel name the tap emits through
        console: Console to emit on (default: the process-wide console,
            looked up on every call)

    Returns:
        ``tap(value, options=None, *, stacklevel=1) -> value``
    """
    def tap(value, options=None, *, stacklevel=1):
        opts = resolve_options(options)
        location = _call_site(stacklevel) if opts.location else None

        target = console if console is not None else get_console()
        lookup_channel(target, channel)(*build_output(value, opts, location))
        return value

    tap.__qualname__ = 'tap'
    tap.channel = channel
    return tap


tap = make_tap('log')
