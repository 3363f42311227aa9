"""
Tests for nanolog.levels — neutral severity levels.

The two reverse lookups fall back differently (OFF for numbers, ALL for
names) and FATAL wins the shared logging.ERROR binding; both behaviors
are pinned here.
"""

import logging

import pytest

from nanolog.levels import (
    OFF_LEVEL,
    TRACE_LEVEL,
    SeverityLevel,
    from_name,
    from_platform_level,
    to_platform_level,
)


# =============================================================================
# Table
# =============================================================================

class TestLevelTable:
    """Declaration order and platform bindings."""

    def test_declaration_order(self):
        assert [lvl.name for lvl in SeverityLevel] == [
            "OFF", "FATAL", "ERROR", "WARN", "INFO", "DEBUG", "TRACE", "ALL",
        ]

    def test_ranks_follow_declaration(self):
        assert [lvl.rank for lvl in SeverityLevel] == list(range(8))

    @pytest.mark.parametrize("level, platform", [
        (SeverityLevel.OFF, OFF_LEVEL),
        (SeverityLevel.FATAL, logging.ERROR),
        (SeverityLevel.ERROR, logging.ERROR),
        (SeverityLevel.WARN, logging.WARNING),
        (SeverityLevel.INFO, logging.INFO),
        (SeverityLevel.DEBUG, logging.DEBUG),
        (SeverityLevel.TRACE, TRACE_LEVEL),
        (SeverityLevel.ALL, logging.NOTSET),
    ])
    def test_to_platform_level(self, level, platform):
        assert to_platform_level(level) == platform
        assert level.platform_level == platform

    def test_every_member_bound(self):
        for level in SeverityLevel:
            assert level.platform_level is not None

    def test_fatal_and_error_are_distinct_members(self):
        assert SeverityLevel.FATAL is not SeverityLevel.ERROR
        assert len(list(SeverityLevel)) == 8

    def test_custom_level_names_registered(self):
        assert logging.getLevelName(OFF_LEVEL) == "OFF"
        assert logging.getLevelName(TRACE_LEVEL) == "TRACE"

    def test_platform_names(self):
        assert SeverityLevel.WARN.platform_name == "WARNING"
        assert SeverityLevel.ALL.platform_name == "NOTSET"

    def test_str_is_neutral_name(self):
        assert str(SeverityLevel.WARN) == "WARN"


# =============================================================================
# from_platform_level
# =============================================================================

class TestFromPlatformLevel:
    """Reverse lookup by logging level number."""

    def test_shared_error_value_resolves_to_fatal(self):
        assert from_platform_level(logging.ERROR) is SeverityLevel.FATAL

    @pytest.mark.parametrize("value, expected", [
        (logging.WARNING, SeverityLevel.WARN),
        (logging.INFO, SeverityLevel.INFO),
        (logging.DEBUG, SeverityLevel.DEBUG),
        (TRACE_LEVEL, SeverityLevel.TRACE),
        (logging.NOTSET, SeverityLevel.ALL),
        (OFF_LEVEL, SeverityLevel.OFF),
    ])
    def test_bound_values(self, value, expected):
        assert from_platform_level(value) is expected

    @pytest.mark.parametrize("value", [logging.CRITICAL, 15, 999, -1])
    def test_unbound_value_is_off(self, value):
        assert from_platform_level(value) is SeverityLevel.OFF

    def test_round_trip_except_error(self):
        for level in SeverityLevel:
            expected = SeverityLevel.FATAL if level is SeverityLevel.ERROR else level
            assert from_platform_level(to_platform_level(level)) is expected


# =============================================================================
# from_name
# =============================================================================

class TestFromName:
    """Two-pass lenient name parsing."""

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_is_all(self, text):
        assert from_name(text) is SeverityLevel.ALL

    def test_unknown_is_all(self):
        assert from_name("bogus") is SeverityLevel.ALL

    @pytest.mark.parametrize("text, expected", [
        ("warn", SeverityLevel.WARN),
        ("WARN", SeverityLevel.WARN),
        ("Fatal", SeverityLevel.FATAL),
        ("error", SeverityLevel.ERROR),
        ("off", SeverityLevel.OFF),
        ("trace", SeverityLevel.TRACE),
        ("all", SeverityLevel.ALL),
    ])
    def test_neutral_names(self, text, expected):
        assert from_name(text) is expected

    @pytest.mark.parametrize("text, expected", [
        ("WARNING", SeverityLevel.WARN),
        ("warning", SeverityLevel.WARN),
        ("notset", SeverityLevel.ALL),
    ])
    def test_platform_names(self, text, expected):
        assert from_name(text) is expected

    def test_neutral_pass_runs_first(self):
        """'ERROR' is both a neutral and a platform name; neutral wins."""
        assert from_name("error") is SeverityLevel.ERROR

    def test_critical_is_not_a_level_name(self):
        assert from_name("critical") is SeverityLevel.ALL

    def test_fallbacks_differ(self):
        assert from_name("nonsense") is SeverityLevel.ALL
        assert from_platform_level(12345) is SeverityLevel.OFF
