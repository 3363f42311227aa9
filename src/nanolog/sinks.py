"""
Console sinks split by severity.

    FilteredConsoleSink  ->  stdout   records below WARN   (INFO, DEBUG, TRACE, ...)
    ErrorConsoleSink     ->  stderr   records at WARN or above

Both compare the raw record level (record.levelno) against the logging
level bound to SeverityLevel.WARN and flush after every record they
write. Dropped records are neither written nor flushed.

logging.Handler.handle() holds the handler lock around emit(), so the
write+flush pair for one record never interleaves with another record
on the same sink.
"""

import logging
import sys
from typing import Optional, TextIO

from .levels import SeverityLevel

WARN_THRESHOLD = SeverityLevel.WARN.platform_level


class _ConsoleSink(logging.StreamHandler):
    """StreamHandler that writes only the records accepts() lets through.

    The handler level stays at NOTSET so that the WARN threshold is the
    only filter applied by the sink itself.

    Args:
        formatter: Formatter for accepted records
        stream: Destination (default: default_stream())
    """

    def __init__(self, formatter: Optional[logging.Formatter] = None,
                 stream: Optional[TextIO] = None):
        super().__init__(stream if stream is not None else self.default_stream())
        self.setLevel(logging.NOTSET)
        if formatter is not None:
            self.setFormatter(formatter)

    @staticmethod
    def default_stream() -> TextIO:
        raise NotImplementedError

    @property
    def threshold(self) -> int:
        return WARN_THRESHOLD

    def accepts(self, record: logging.LogRecord) -> bool:
        raise NotImplementedError

    def emit(self, record: logging.LogRecord) -> None:
        # StreamHandler.emit writes the terminator and flushes
        if self.accepts(record):
            super().emit(record)


class FilteredConsoleSink(_ConsoleSink):
    """Forward only records less severe than WARN (default: sys.stdout)."""

    @staticmethod
    def default_stream() -> TextIO:
        return sys.stdout

    def accepts(self, record: logging.LogRecord) -> bool:
        return record.levelno < WARN_THRESHOLD


class ErrorConsoleSink(_ConsoleSink):
    """Forward only WARN and more severe records (default: sys.stderr)."""

    @staticmethod
    def default_stream() -> TextIO:
        return sys.stderr

    def accepts(self, record: logging.LogRecord) -> bool:
        return record.levelno >= WARN_THRESHOLD


CONSOLE_SINKS = (FilteredConsoleSink, ErrorConsoleSink)
