"""
Key-normalizing registries with fill-if-absent semantics.

A Registry maps normalized keys to values. The first registration for
a key wins; later registrations for the same key are ignored, never
overwriting. There is no delete. Invalid keys (None, empty, whitespace)
are not an error: register() and lookup() simply return None.

ConfigKeyRegistry documents configuration keys. Modules register the
keys they read at import time so a help listing can show every key the
process understands:

    CONFIG_LOG_LEVEL = register_config('app_log_level', 'Log level')

All operations are safe to call from any thread without caller-side
locking.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from .keys import has_text, normalize_key

log = logging.getLogger(__name__)


class Registry:
    """Thread-safe mapping from normalized key to value.

    register() never stores None: a None value is replaced by
    empty_value(), so a present key always looks up to something.

    Args:
        empty: Value stored in place of None on register() (default: '')
    """

    def __init__(self, empty: Any = ''):
        if empty is None:
            raise ValueError("empty default must not be None")
        self.empty = empty
        self._lock = threading.Lock()
        self._entries: Dict[str, Any] = {}

    def empty_value(self) -> Any:
        """Value stored when register() is given None."""
        return self.empty

    @staticmethod
    def _key(key: Any) -> Optional[str]:
        if not has_text(key):
            return None
        return normalize_key(key)

    def register(self, key: Any, value: Any = None) -> Optional[str]:
        """Store value under key unless the key is already present.

        Args:
            key: Raw key, normalized before storing
            value: Value to store; None is replaced by empty_value()

        Returns:
            The normalized key, or None if key is invalid
        """
        name = self._key(key)
        if name is None:
            return None
        if value is None:
            value = self.empty_value()
        with self._lock:
            added = name not in self._entries
            if added:
                self._entries[name] = value
        if added:
            log.debug("registered %r in %s", name, type(self).__name__)
        return name

    def lookup(self, key: Any) -> Any:
        """Return the value stored for key, or None."""
        name = self._key(key)
        if name is None:
            return None
        with self._lock:
            return self._entries.get(name)

    def lookup_or_default(self, key: Any, supplier: Callable[[], Any]) -> Any:
        """Return the stored value, storing supplier() first if absent.

        The supplier is called outside the lock. Under contention several
        callers may build a default, but only the first one stored is
        kept and every caller gets that same instance back.

        An invalid key returns supplier() without storing it.
        """
        name = self._key(key)
        if name is None:
            return supplier()
        with self._lock:
            if name in self._entries:
                return self._entries[name]
        candidate = supplier()
        with self._lock:
            return self._entries.setdefault(name, candidate)

    def keys(self) -> List[str]:
        """Sorted snapshot of registered keys."""
        with self._lock:
            return sorted(self._entries)

    def items(self) -> List[Tuple[str, Any]]:
        """Sorted snapshot of (key, value) pairs."""
        with self._lock:
            return sorted(self._entries.items(), key=lambda kv: kv[0])

    def __contains__(self, key: Any) -> bool:
        name = self._key(key)
        if name is None:
            return False
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class ConfigKeyRegistry(Registry):
    """Config key -> human-readable description.

    A None description is stored as '' so a registered key always has a
    string description, distinct from an unregistered key (None).
    """

    def __init__(self):
        super().__init__(empty='')


# =============================================================================
# Module-level singleton
# =============================================================================

_config_registry: Optional[ConfigKeyRegistry] = None
_init_lock = threading.Lock()


def init_config_registry() -> ConfigKeyRegistry:
    """Replace the module-level ConfigKeyRegistry with a fresh one.

    Mostly useful for tests. Keys registered at import time by other
    modules are not replayed.
    """
    global _config_registry
    with _init_lock:
        _config_registry = ConfigKeyRegistry()
        return _config_registry


def get_config_registry() -> ConfigKeyRegistry:
    """Get the module-level ConfigKeyRegistry, creating it on first use."""
    global _config_registry
    with _init_lock:
        if _config_registry is None:
            _config_registry = ConfigKeyRegistry()
        return _config_registry


def register_config(key: Any, description: Optional[str] = None) -> Optional[str]:
    """Register a config key with its description (first one wins).

    Returns:
        The normalized key, or None if key is None/blank
    """
    return get_config_registry().register(key, description)


def config_description_of(key: Any) -> Optional[str]:
    """Description of a registered config key, or None."""
    return get_config_registry().lookup(key)


def format_config_list(registry: Optional[ConfigKeyRegistry] = None) -> str:
    """Format registered config keys for a help listing.

    Args:
        registry: Registry to list (default: the module-level one)

    Returns:
        Formatted string, one key per line, sorted, descriptions aligned.
    """
    registry = registry if registry is not None else get_config_registry()
    entries = registry.items()
    lines = ["Available config keys:"]
    if not entries:
        return lines[0]
    max_name = max(len(name) for name, _ in entries)
    for name, desc in entries:
        lines.append(f"  {name:<{max_name}}  {desc}".rstrip())
    return "\n".join(lines)
