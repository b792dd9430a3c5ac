"""Tests for logging module."""
import logging

import pytest

import fiosstats
from fiosstats.core.logging import (
    LEGACY_LOG_LEVEL_ENV,
    LOG_LEVEL_ENV,
    configure_logging,
    get_logger,
    level_from_env,
)


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_with_name(self):
        """Test getting logger with name."""
        logger = get_logger('fiosstats.test_module')

        assert logger.name == 'fiosstats.test_module'

    def test_get_logger_propagates(self):
        """Test logger propagates to the root logger."""
        assert get_logger('fiosstats.test').propagate is True

    def test_get_logger_returns_logger_instance(self):
        """Test returns logging.Logger instance."""
        assert isinstance(get_logger('fiosstats.test'), logging.Logger)


class TestLevelFromEnv:
    """Test suite for level_from_env."""

    def test_default_is_info(self, monkeypatch):
        """Test INFO when the variable is unset."""
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        monkeypatch.delenv(LEGACY_LOG_LEVEL_ENV, raising=False)

        assert level_from_env() == logging.INFO

    @pytest.mark.parametrize('value,expected', [
        ('debug', logging.DEBUG),
        ('WARNING', logging.WARNING),
        (' error ', logging.ERROR),
    ])
    def test_named_levels(self, monkeypatch, value, expected):
        """Test level names are case-insensitive."""
        monkeypatch.setenv(LOG_LEVEL_ENV, value)

        assert level_from_env() == expected

    def test_unknown_level_falls_back(self, monkeypatch):
        """Test unknown names fall back to the default."""
        monkeypatch.setenv(LOG_LEVEL_ENV, 'chatty')

        assert level_from_env() == logging.INFO

    def test_legacy_variable(self, monkeypatch):
        """Test MY_LOG_LEVEL is honoured when the new variable is unset."""
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        monkeypatch.setenv(LEGACY_LOG_LEVEL_ENV, 'debug')

        assert level_from_env() == logging.DEBUG

    def test_new_variable_wins(self, monkeypatch):
        """Test FIOSSTATS_LOG_LEVEL takes precedence over MY_LOG_LEVEL."""
        monkeypatch.setenv(LOG_LEVEL_ENV, 'error')
        monkeypatch.setenv(LEGACY_LOG_LEVEL_ENV, 'debug')

        assert level_from_env() == logging.ERROR


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_explicit_level(self):
        """Test an explicit level is applied to the package logger."""
        assert configure_logging(logging.ERROR) == logging.ERROR
        assert logging.getLogger('fiosstats').level == logging.ERROR

    def test_level_from_environment(self, monkeypatch):
        """Test the environment decides when no level is given."""
        monkeypatch.setenv(LOG_LEVEL_ENV, 'debug')

        assert configure_logging() == logging.DEBUG
        assert logging.getLogger('fiosstats').level == logging.DEBUG


class TestSetupLogging:
    """Test suite for fiosstats.setup_logging."""

    def test_sets_package_levels(self):
        """Test every package logger gets the level."""
        fiosstats.setup_logging(logging.DEBUG)

        for name in ('fiosstats', 'fiosstats.api', 'fiosstats.auth', 'fiosstats.sink'):
            assert logging.getLogger(name).level == logging.DEBUG


class TestCliLogger:
    """Test suite for the command line logger."""

    def test_follows_configured_level(self):
        """Test the CLI logger picks up a level configured after import."""
        from fiosstats.cli import main as cli

        package_logger = logging.getLogger('fiosstats')
        previous = package_logger.level
        try:
            configure_logging(logging.DEBUG)

            assert cli.logger.isEnabledFor(logging.DEBUG)
        finally:
            package_logger.setLevel(previous)
