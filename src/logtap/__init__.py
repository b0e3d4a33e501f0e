"""logtap — log a value inline and get it back.

``tap(value, options)`` logs a value (with an optional label and the
call site) and returns it unchanged. ``console`` mirrors the console
channels, each with its own ``.tap``; ``install()`` makes such a
console the process-wide one.
"""

from logtap._version import __version__, __app_name__
from logtap.lib.log_lib import (
    Console, init_console, get_console, set_console,
    InvalidChannelError, LocationUnresolvableError, trace,
)
from logtap.taplog import LogOptions, make_tap, tap
from logtap.augmentation import (
    AugmentedConsole, TapChannel, augment, install, restore,
)

# Built once from the console present at import time
console = augment()

__all__ = [
    "__version__", "__app_name__",
    "tap", "make_tap", "LogOptions",
    "console", "augment", "install", "restore",
    "AugmentedConsole", "TapChannel",
    "Console", "init_console", "get_console", "set_console",
    "InvalidChannelError", "LocationUnresolvableError", "trace",
]
