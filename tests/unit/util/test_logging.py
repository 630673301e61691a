"""Unit tests for logging setup."""

import logging

import pytest

from forum.config import Settings
from forum.util.logging import log_level


class TestLogLevel:
    """Tests for log_level."""

    @pytest.mark.parametrize(
        "environment, debug, expected",
        [
            ("development", False, logging.INFO),
            ("production", False, logging.WARNING),
            ("production", True, logging.DEBUG),
        ],
    )
    def test_level_follows_environment(self, environment, debug, expected):
        """Debug wins, production is quiet, everything else logs INFO."""
        settings = Settings(_env_file=None, environment=environment, debug=debug)

        assert log_level(settings) == expected
