"""
Function tracing decorator.

Routes trace output through a channel of the process-wide console
(default 'debug') and hands back the wrapped function's result
unchanged, so it works as a tap over a whole call.
"""

import functools
import inspect
from pathlib import Path


def _short_repr(value) -> str:
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func=None, *, channel='debug'):
    """Decorator to trace function calls on a console channel.

    Shows function entry with arguments and exit with the return value
    (or the exception raised). Usable bare (``@trace``) or with a
    channel (``@trace(channel='info')``).
    """
    if func is None:
        return functools.partial(trace, channel=channel)

    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    func_name = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .console import get_console

        emit = getattr(get_console(), channel)

        args_repr = [_short_repr(arg) for arg in args]
        args_repr += [f"{key}={_short_repr(value)}" for key, value in kwargs.items()]
        emit(f"[TRACE] >> {module_name}.{func_name}({', '.join(args_repr)})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            emit(f"[TRACE] !! {module_name}.{func_name} raised: "
                 f"{type(e).__name__}: {e}")
            raise

        emit(f"[TRACE] << {module_name}.{func_name} returned: {_short_repr(result)}")
        return result

    return wrapper
