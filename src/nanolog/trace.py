"""
Function tracing decorator.

Logs entry, exit and exceptions at the TRACE level (logging level 5) on
the logger of the decorated function's module. Nothing is formatted
unless that logger is enabled for TRACE, so decorated functions cost a
single isEnabledFor() check at other levels.
"""

import functools
import logging
from pathlib import Path

from .levels import SeverityLevel

TRACE = SeverityLevel.TRACE.platform_level


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls at TRACE level.

    Shows function entry/exit with arguments and return values when the
    module logger is enabled for TRACE (app_log_level=TRACE or ALL).
    """
    logger = logging.getLogger(func.__module__)
    name = f"{func.__module__}.{func.__qualname__}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not logger.isEnabledFor(TRACE):
            return func(*args, **kwargs)

        args_repr = [_short_repr(arg) for arg in args]
        args_repr += [f"{key}={_short_repr(value)}" for key, value in kwargs.items()]
        logger.log(TRACE, "[TRACE] >> %s(%s)", name, ', '.join(args_repr))

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.log(TRACE, "[TRACE] !! %s raised: %s: %s",
                       name, type(e).__name__, e)
            raise

        if result is not None:
            logger.log(TRACE, "[TRACE] << %s returned: %s", name, _short_repr(result))
        return result

    return wrapper
