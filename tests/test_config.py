"""Tests for environment-driven settings in api.main."""

import pytest

from api.main import parse_lock_timeout, parse_log_level
from api.store import DEFAULT_LOCK_TIMEOUT


class TestLogLevel:

    @pytest.mark.parametrize("value,expected", [
        ("debug", "DEBUG"),
        ("WARNING", "WARNING"),
        ("error", "ERROR"),
    ])
    def test_known_levels(self, value, expected):
        assert parse_log_level(value) == expected

    @pytest.mark.parametrize("value", [None, "", "verbose", "LOUD"])
    def test_unknown_or_unset_falls_back_to_info(self, value):
        assert parse_log_level(value) == "INFO"


class TestLockTimeout:

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_uses_store_default(self, value):
        assert parse_lock_timeout(value) is DEFAULT_LOCK_TIMEOUT

    def test_explicit_value(self):
        assert parse_lock_timeout("2.5") == 2.5
