"""
Neutral severity levels bound to stdlib logging level numbers.

Declaration order is severity order, most restrictive first:

    ←── quieter ──────────────────────────────────── louder ──→
    OFF   FATAL  ERROR  WARN     INFO  DEBUG  TRACE  ALL
    60    40     40     30       20    10     5      0
                        (WARNING)                    (NOTSET)

FATAL and ERROR share logging.ERROR, so a reverse lookup of that value
resolves to FATAL, the first declared match. The two lookups fall back
differently: an unknown level number is OFF, an unknown level name is
ALL.
"""

import logging
from enum import Enum

from .keys import has_text


# Platform level numbers with no stdlib equivalent
OFF_LEVEL = logging.CRITICAL + 10
TRACE_LEVEL = 5

logging.addLevelName(OFF_LEVEL, 'OFF')
logging.addLevelName(TRACE_LEVEL, 'TRACE')


class SeverityLevel(Enum):
    """Neutral severity tag with its stdlib logging level number."""

    OFF = (0, OFF_LEVEL)
    FATAL = (1, logging.ERROR)
    ERROR = (2, logging.ERROR)
    WARN = (3, logging.WARNING)
    INFO = (4, logging.INFO)
    DEBUG = (5, logging.DEBUG)
    TRACE = (6, TRACE_LEVEL)
    ALL = (7, logging.NOTSET)

    def __init__(self, rank: int, platform_level: int):
        self.rank = rank
        self.platform_level = platform_level

    @property
    def platform_name(self) -> str:
        """Display name of the bound logging level (e.g. 'WARNING')."""
        return logging.getLevelName(self.platform_level)

    def __str__(self) -> str:
        return self.name


def to_platform_level(level: SeverityLevel) -> int:
    """Return the logging level number bound to a neutral level."""
    return level.platform_level


def from_platform_level(value: int) -> SeverityLevel:
    """Map a logging level number to the first matching neutral level.

    Members are scanned in declaration order, so logging.ERROR gives
    FATAL. Numbers bound to no member give OFF.
    """
    for level in SeverityLevel:
        if level.platform_level == value:
            return level
    return SeverityLevel.OFF


def from_name(text: str) -> SeverityLevel:
    """Parse a level name leniently.

    Two passes, both case-insensitive: neutral names first (OFF, FATAL,
    ..., ALL), then each member's logging level name (WARNING, NOTSET,
    ...). None, blank or unrecognized text gives ALL.

    Args:
        text: Level name such as 'warn', 'WARNING' or 'debug'

    Returns:
        The matching SeverityLevel, or SeverityLevel.ALL
    """
    if not has_text(text):
        return SeverityLevel.ALL
    wanted = text.upper()
    for level in SeverityLevel:
        if level.name == wanted:
            return level
    for level in SeverityLevel:
        if level.platform_name.upper() == wanted:
            return level
    return SeverityLevel.ALL
