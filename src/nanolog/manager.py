"""
LogManager: config-driven wiring of formatters, levels and sinks.

Reads four config keys (registered in the config key registry at import
time, so they show up in the help listing):

    app_log_level      Neutral or logging level name (see SeverityLevel)
    app_log_formatter  Formatter id: console, json, or a registered custom id
    app_log_excludes   Comma-separated logger name fragments to suppress
    help               Lists available config keys

Keys are normalized on read, so APP_LOG_LEVEL (environment), app.log.level
(properties) and app-log-level (flags) all resolve to app_log_level.

Usage::

    mgr = init_logging(level='debug', formatter='json')
    mgr.install()                       # root logger
    logging.getLogger('svc').info("ready")   # -> stdout
    logging.getLogger('svc').error("boom")   # -> stderr
"""

import logging
import os
import threading
from typing import Any, Iterable, List, Mapping, Optional, TextIO, Union

from .formatters import CONSOLE, get_log_formatter
from .keys import normalize_key
from .levels import SeverityLevel, from_name
from .registry import format_config_list, register_config
from .sinks import CONSOLE_SINKS, ErrorConsoleSink, FilteredConsoleSink

log = logging.getLogger(__name__)

CONFIG_LOG_LEVEL = register_config(
    'app_log_level', 'Log level for the application (OFF, FATAL, ERROR, WARN, INFO, DEBUG, TRACE, ALL)')
CONFIG_LOG_FORMATTER = register_config(
    'app_log_formatter', 'Log formatter id (console, json or a registered custom id)')
CONFIG_LOG_EXCLUDES = register_config(
    'app_log_excludes', 'Comma-separated logger name patterns to exclude')
CONFIG_HELP = register_config('help', 'Lists available config keys')

DEFAULT_LEVEL = SeverityLevel.DEBUG

_TRUE = {'1', 'true', 'yes', 'on'}


class ExcludeFilter(logging.Filter):
    """Drop records whose logger name contains any of the patterns."""

    def __init__(self, patterns: Iterable[str] = ()):
        super().__init__()
        self.patterns = [p for p in patterns if p]

    def filter(self, record: logging.LogRecord) -> bool:
        return not any(p in record.name for p in self.patterns)


def _parse_excludes(value: Union[str, Iterable[str], None]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(',')
    return [p.strip() for p in value if p and p.strip()]


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE


class LogManager:
    """Owns the console sinks and the level applied to a logger.

    Records below WARN go to ``out`` (default: stdout), WARN and above to
    ``err`` (default: stderr). Both sinks share one formatter resolved
    from the formatter registry.

    Args:
        level: SeverityLevel or level name (default: DEBUG)
        formatter: Formatter id or logging.Formatter (default: 'console')
        excludes: Logger name patterns, list or comma-separated string
        out: Stream for records below WARN
        err: Stream for WARN and above
        show_help: Value of the help config key
    """

    def __init__(
        self,
        level: Union[SeverityLevel, str, None] = None,
        formatter: Union[logging.Formatter, str, None] = None,
        excludes: Union[str, Iterable[str], None] = None,
        out: TextIO = None,
        err: TextIO = None,
        show_help: bool = False,
    ):
        if level is None:
            level = DEFAULT_LEVEL
        elif not isinstance(level, SeverityLevel):
            level = from_name(level)
        self.level = level
        if formatter is None:
            formatter = CONSOLE
        if isinstance(formatter, logging.Formatter):
            self.formatter_id = None
            self.formatter = formatter
        else:
            self.formatter_id = formatter
            self.formatter = get_log_formatter(formatter)
        self.excludes = _parse_excludes(excludes)
        self.show_help = show_help

        self.out_sink = FilteredConsoleSink(self.formatter, out)
        self.err_sink = ErrorConsoleSink(self.formatter, err)
        exclude_filter = ExcludeFilter(self.excludes)
        for sink in self.sinks:
            sink.addFilter(exclude_filter)

    @classmethod
    def from_config(cls, config: Mapping[Any, Any], **kwargs: Any) -> "LogManager":
        """Build a LogManager from a config mapping.

        Mapping keys are normalized before matching, unknown keys are
        ignored. Keyword arguments (e.g. out=, err=) pass through.
        """
        values = {}
        for key, value in config.items():
            name = normalize_key(key)
            if name:
                values[name] = value
        return cls(
            level=values.get(CONFIG_LOG_LEVEL),
            formatter=values.get(CONFIG_LOG_FORMATTER),
            excludes=values.get(CONFIG_LOG_EXCLUDES),
            show_help=_as_bool(values.get(CONFIG_HELP, False)),
            **kwargs,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 **kwargs: Any) -> "LogManager":
        """Build a LogManager from environment variables (APP_LOG_LEVEL, ...)."""
        return cls.from_config(os.environ if environ is None else environ, **kwargs)

    @property
    def sinks(self) -> List[logging.Handler]:
        return [self.out_sink, self.err_sink]

    def install(self, logger: Optional[logging.Logger] = None) -> logging.Logger:
        """Attach both sinks to a logger and apply the configured level.

        Sinks of the same classes already attached (from an earlier
        install) are removed first, so installing twice never doubles
        output.

        Args:
            logger: Target logger (default: the root logger)

        Returns:
            The configured logger
        """
        if logger is None:
            logger = logging.getLogger()
        for handler in list(logger.handlers):
            if isinstance(handler, CONSOLE_SINKS):
                logger.removeHandler(handler)
        for sink in self.sinks:
            logger.addHandler(sink)
        # NOTSET on a child logger would defer to its parent's level
        logger.setLevel(max(self.level.platform_level, 1))
        log.debug("installed %s sinks on %r at %s",
                  self.formatter_id or type(self.formatter).__name__,
                  logger.name, self.level)
        return logger

    def is_enabled_for(self, level: SeverityLevel) -> bool:
        """True if a record at ``level`` passes the configured level.

        Uses declaration order: at INFO, FATAL/ERROR/WARN/INFO pass and
        DEBUG/TRACE/ALL do not. OFF only ever lets OFF through.
        """
        return level.rank <= self.level.rank

    def help_text(self) -> str:
        """Help listing of all registered config keys."""
        return format_config_list()

    def display_help(self, logger: Optional[logging.Logger] = None) -> bool:
        """Log the config key listing at INFO if the help key was set.

        Returns:
            True if the listing was logged
        """
        if not self.show_help:
            return False
        (logger or log).info(self.help_text())
        return True


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[LogManager] = None
_init_lock = threading.Lock()


def init_logging(level: Union[SeverityLevel, str, None] = None,
                 formatter: Union[logging.Formatter, str, None] = None,
                 excludes: Union[str, Iterable[str], None] = None,
                 **kwargs: Any) -> LogManager:
    """Initialize the module-level LogManager singleton.

    Call once at program startup. Does not install sinks; call
    ``install()`` on the result for the logger(s) you want wired.

    Returns:
        The initialized LogManager instance
    """
    global _manager
    manager = LogManager(level=level, formatter=formatter,
                         excludes=excludes, **kwargs)
    with _init_lock:
        _manager = manager
        return _manager


def get_logging() -> LogManager:
    """Get the module-level LogManager, creating one from the environment if needed."""
    global _manager
    with _init_lock:
        if _manager is None:
            _manager = LogManager.from_env()
        return _manager
