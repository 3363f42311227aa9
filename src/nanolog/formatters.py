"""
Log formatters and the formatter registry.

Two formatters ship built in and are reachable by reserved id:

    'console'  ->  ConsoleFormatter   [2026-01-15 10:00:00.123] [INFO ] [Service   ] - message
    'json'     ->  JsonFormatter      {"level":"INFO","logger":"Service",...}

Any other id is a custom formatter. Custom formatters are registered
with register_log_formatter(); an id that was never registered falls
back to a ConsoleFormatter, so a misspelled id still produces output.

Each id resolves to a single formatter instance for the lifetime of
the registry: repeated get_log_formatter('json') calls return the same
object.
"""

import json
import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from .keys import normalize_key
from .levels import SeverityLevel, from_platform_level
from .registry import Registry

CONSOLE = 'console'
JSON = 'json'

_LEVEL_WIDTH = max(len(level.name) for level in SeverityLevel)
NAME_WIDTH = 10


def _timestamp(record: logging.LogRecord) -> str:
    created = datetime.fromtimestamp(record.created)
    return created.strftime('%Y-%m-%d %H:%M:%S.') + f"{created.microsecond // 1000:03d}"


def _split_logger_name(name: str):
    """Split 'pkg.mod.Service' into ('pkg.mod', 'Service')."""
    package, _, short = name.rpartition('.')
    return package, short


class ConsoleFormatter(logging.Formatter):
    """Single-line human-readable format.

    [timestamp] [LEVEL] [logger    ] - message

    The level is the neutral name (WARN, not WARNING), padded to the
    widest level name. The logger is the last dotted segment of the
    logger name, left-aligned to ``name_width`` columns; the width grows
    to the longest name seen so later lines stay aligned. Exception
    text, if any, follows on the next lines.

    Args:
        name_width: Starting column width for the logger name
    """

    def __init__(self, name_width: int = NAME_WIDTH, **kwargs: Any):
        super().__init__(**kwargs)
        self.name_width = name_width

    def format(self, record: logging.LogRecord) -> str:
        level = from_platform_level(record.levelno)
        _, logger_name = _split_logger_name(record.name)
        self.name_width = max(self.name_width, len(logger_name))
        text = (f"[{_timestamp(record)}] [{level.name:<{_LEVEL_WIDTH}}] "
                f"[{logger_name:<{self.name_width}}] - {record.getMessage()}")
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text = f"{text}\n{record.exc_text}"
        return text


class JsonFormatter(logging.Formatter):
    """One JSON object per record, keys sorted.

    Fields: timestamp, level, logger, package, message, and error when
    an exception is attached. A dict passed as ``extra={'fields': {...}}``
    is merged in without replacing the standard fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        package, logger_name = _split_logger_name(record.name)
        entry: Dict[str, Any] = {}
        fields = getattr(record, 'fields', None)
        if isinstance(fields, dict):
            entry.update({str(k): str(v) for k, v in fields.items()})
        entry.update({
            'timestamp': _timestamp(record),
            'level': from_platform_level(record.levelno).name,
            'logger': logger_name,
            'package': package,
            'message': record.getMessage(),
        })
        if record.exc_info:
            entry['error'] = self.formatException(record.exc_info)
        return json.dumps(entry, sort_keys=True, separators=(',', ':'))


class FormatterRegistry(Registry):
    """Formatter id -> formatter instance.

    Registering None stores a ConsoleFormatter, matching the fallback
    for unknown ids.
    """

    def empty_value(self) -> logging.Formatter:
        return ConsoleFormatter()


_DEFAULT_FORMATTERS: Dict[str, Callable[[], logging.Formatter]] = {
    CONSOLE: ConsoleFormatter,
    JSON: JsonFormatter,
}


# =============================================================================
# Module-level singleton
# =============================================================================

_formatter_registry: Optional[FormatterRegistry] = None
_init_lock = threading.Lock()


def init_formatter_registry() -> FormatterRegistry:
    """Replace the module-level FormatterRegistry with a fresh one."""
    global _formatter_registry
    with _init_lock:
        _formatter_registry = FormatterRegistry()
        return _formatter_registry


def get_formatter_registry() -> FormatterRegistry:
    """Get the module-level FormatterRegistry, creating it on first use."""
    global _formatter_registry
    with _init_lock:
        if _formatter_registry is None:
            _formatter_registry = FormatterRegistry()
        return _formatter_registry


def register_log_formatter(formatter_id: str,
                           formatter: Optional[logging.Formatter]) -> Optional[str]:
    """Register a formatter under an id. An existing id is never replaced.

    Returns:
        The normalized id, or None if formatter_id is None/blank
    """
    return get_formatter_registry().register(formatter_id, formatter)


def get_log_formatter(formatter_id: str,
                      default: Optional[Callable[[], logging.Formatter]] = None,
                      registry: Optional[FormatterRegistry] = None) -> logging.Formatter:
    """Resolve a formatter id, building and storing a default if needed.

    'json' defaults to JsonFormatter; 'console' and every other id
    default to ConsoleFormatter. Pass ``default`` to supply a different
    constructor for an unregistered id.

    Args:
        formatter_id: Formatter id, e.g. 'console' or 'json'
        default: Zero-argument constructor used if the id is unregistered
        registry: Registry to use (default: the module-level one)

    Returns:
        The formatter stored for the id
    """
    if registry is None:
        registry = get_formatter_registry()
    if default is None:
        default = _DEFAULT_FORMATTERS.get(normalize_key(formatter_id), ConsoleFormatter)
    return registry.lookup_or_default(formatter_id, default)
