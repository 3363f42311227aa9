"""
Key normalization shared by every registry.

Config keys arrive from many places: environment variables
(APP_LOG_LEVEL), dotted property names (app.log.level), CLI-style
flags (app-log-level). They all collapse to one canonical form so a
lookup never depends on how the caller spelled the key.

Rule:
    '.', '-', '+', ':'  ->  '_'
    strip surrounding whitespace, then lower-case

    "  My.Key "   ->  "my_key"
    "APP_LOG_LEVEL" ->  "app_log_level"

The rule is idempotent: normalize_key(normalize_key(k)) == normalize_key(k).
"""

from typing import Any, Optional


_SEPARATORS = str.maketrans({'.': '_', '-': '_', '+': '_', ':': '_'})


def has_text(value: Any) -> bool:
    """True if value is a string with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def normalize_key(raw: Any) -> Optional[str]:
    """Return the canonical form of a registry key.

    None stays None. Non-string keys are converted with str() first.
    Blank input normalizes to an empty string, which registries treat
    as an invalid key.

    Args:
        raw: Key as supplied by the caller

    Returns:
        Normalized key, or None if raw is None
    """
    if raw is None:
        return None
    return str(raw).translate(_SEPARATORS).strip().lower()
