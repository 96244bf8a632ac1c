"""
Function tracing decorator.

Emits call entry/exit through a Logger at TRACE level. By default the
logger is the one named after the decorated function's module, looked
up in the process-wide registry at call time.
"""

import functools
from pathlib import Path

from .levels import TRACE
from .registry import get_logger


def _abbrev(value):
    """repr() with long strings and lists shortened."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func=None, *, logger=None):
    """Decorator to trace function calls at TRACE level.

    Usable bare or with a target logger::

        @trace
        def load(path): ...

        @trace(logger=get_logger("db"))
        def query(sql): ...

    Nothing is rendered unless the logger is enabled for TRACE.
    """
    if func is None:
        return functools.partial(trace, logger=logger)

    module_name = func.__module__ or "unknown"
    qualname = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        log = logger if logger is not None else get_logger(module_name)
        if not log.is_enabled_for(TRACE):
            return func(*args, **kwargs)

        args_repr = [_abbrev(a) for a in args]
        args_repr.extend(f"{k}={_abbrev(v)}" for k, v in kwargs.items())
        log.tracef(">> %s.%s(%s)", module_name, qualname, ", ".join(args_repr))

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.tracef("!! %s.%s raised: %s: %s",
                       module_name, qualname, type(e).__name__, e)
            raise

        if result is not None:
            log.tracef("<< %s.%s returned: %s", module_name, qualname, _abbrev(result))
        return result

    return wrapper
