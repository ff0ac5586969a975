"""Tests for library configuration."""

import logging

import pytest
from klaw_validate import ValidateConfig, get_config, init
from klaw_validate import _config as config_module


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start every test uninitialized with a clean environment."""
    monkeypatch.setattr(config_module, '_config', None)
    monkeypatch.delenv('KLAW_VALIDATE_LOG_LEVEL', raising=False)
    monkeypatch.delenv('KLAW_VALIDATE_LOG_JSON', raising=False)


class TestGetConfig:
    """Tests for get_config()."""

    def test_uninitialized(self):
        """get_config() fails before init()."""
        with pytest.raises(RuntimeError, match='init'):
            get_config()

    def test_returns_initialized(self):
        """get_config() returns what init() set."""
        config = init()
        assert get_config() is config


class TestInit:
    """Tests for init()."""

    def test_defaults(self, package_logger):
        """Without arguments or environment, logging stays untouched."""
        handlers = list(package_logger.handlers)
        assert init() == ValidateConfig(log_level=None, json_output=True)
        assert package_logger.handlers == handlers

    def test_explicit_level_configures_logging(self, package_logger):
        """An explicit level configures the package logger."""
        config = init(log_level='debug', json_output=False)
        assert config == ValidateConfig(log_level='DEBUG', json_output=False)
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_level_from_environment(self, package_logger, monkeypatch):
        """KLAW_VALIDATE_LOG_LEVEL sets the level."""
        monkeypatch.setenv('KLAW_VALIDATE_LOG_LEVEL', ' warning ')
        assert init().log_level == 'WARNING'
        assert package_logger.level == logging.WARNING

    def test_argument_beats_environment(self, package_logger, monkeypatch):
        """Explicit arguments win over the environment."""
        monkeypatch.setenv('KLAW_VALIDATE_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('KLAW_VALIDATE_LOG_JSON', 'false')
        config = init(log_level='INFO', json_output=True)
        assert config == ValidateConfig(log_level='INFO', json_output=True)

    def test_unknown_level_is_ignored(self, caplog, monkeypatch):
        """An unknown environment level is reported and ignored."""
        monkeypatch.setenv('KLAW_VALIDATE_LOG_LEVEL', 'chatty')
        assert init().log_level is None
        assert 'KLAW_VALIDATE_LOG_LEVEL' in caplog.text

    @pytest.mark.parametrize(('raw', 'expected'), [('0', False), ('off', False), ('FALSE', False), ('yes', True)])
    def test_json_from_environment(self, monkeypatch, raw, expected):
        """KLAW_VALIDATE_LOG_JSON selects the output format."""
        monkeypatch.setenv('KLAW_VALIDATE_LOG_JSON', raw)
        assert init().json_output is expected

    def test_unknown_json_value_defaults_to_json(self, caplog, monkeypatch):
        """An unknown format value is reported and defaults to JSON."""
        monkeypatch.setenv('KLAW_VALIDATE_LOG_JSON', 'xml')
        assert init().json_output is True
        assert 'KLAW_VALIDATE_LOG_JSON' in caplog.text

    def test_config_is_frozen(self):
        """ValidateConfig is immutable."""
        config = init()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]
