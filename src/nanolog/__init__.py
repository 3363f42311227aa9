"""
nanolog — key-normalizing registries and severity-split console logging.

Public API:
    normalize_key        — canonical registry key form
    Registry             — thread-safe fill-if-absent registry
    register_config      — document a config key (first description wins)
    config_description_of — look up a config key description
    format_config_list   — help listing of registered config keys
    register_log_formatter / get_log_formatter — formatter registry
    ConsoleFormatter, JsonFormatter — built-in formatters
    SeverityLevel        — neutral levels bound to logging level numbers
    from_platform_level, from_name, to_platform_level
    FilteredConsoleSink  — stdout sink for records below WARN
    ErrorConsoleSink     — stderr sink for WARN and above
    LogManager, init_logging, get_logging — config-driven wiring
    trace                — function tracing decorator
"""

from nanolog._version import __version__, __app_name__
from nanolog.keys import has_text, normalize_key
from nanolog.registry import (
    Registry, ConfigKeyRegistry,
    init_config_registry, get_config_registry,
    register_config, config_description_of, format_config_list,
)
from nanolog.levels import (
    SeverityLevel, from_platform_level, from_name, to_platform_level,
)
from nanolog.formatters import (
    ConsoleFormatter, JsonFormatter, FormatterRegistry,
    init_formatter_registry, get_formatter_registry,
    register_log_formatter, get_log_formatter,
)
from nanolog.sinks import FilteredConsoleSink, ErrorConsoleSink
from nanolog.manager import LogManager, init_logging, get_logging
from nanolog.trace import trace

__all__ = [
    '__version__', '__app_name__',
    'has_text', 'normalize_key',
    'Registry', 'ConfigKeyRegistry',
    'init_config_registry', 'get_config_registry',
    'register_config', 'config_description_of', 'format_config_list',
    'SeverityLevel', 'from_platform_level', 'from_name', 'to_platform_level',
    'ConsoleFormatter', 'JsonFormatter', 'FormatterRegistry',
    'init_formatter_registry', 'get_formatter_registry',
    'register_log_formatter', 'get_log_formatter',
    'FilteredConsoleSink', 'ErrorConsoleSink',
    'LogManager', 'init_logging', 'get_logging',
    'trace',
]
