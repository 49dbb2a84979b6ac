"""Tests for config and logging."""

import json
import logging
import sys

import pytest

from webform_address.config import LanguageConfig, WebformAddressConfig
from webform_address.exceptions import ConfigurationError
from webform_address.logging import JsonFormatter, setup_logging

ENV_VARS = ["WEBFORM_LANGCODE", "WEBFORM_LANGUAGES", "LOG_LEVEL", "LOG_FORMAT", "SEED"]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLanguageConfig:
    """Tests for LanguageConfig."""

    def test_default_values(self) -> None:
        config = LanguageConfig()

        assert config.default_langcode == "en"
        assert config.languages == ["en"]
        assert config.multilingual is False

    def test_multilingual(self) -> None:
        config = LanguageConfig(languages=["en", "fr"])

        assert config.multilingual is True


class TestWebformAddressConfig:
    """Tests for WebformAddressConfig."""

    def test_default_values(self) -> None:
        config = WebformAddressConfig()

        assert isinstance(config.language, LanguageConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.seed is None

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        config = WebformAddressConfig.from_env()

        assert config.language.default_langcode == "en"
        assert config.language.languages == ["en"]
        assert config.log_level == "INFO"
        assert config.seed is None

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("WEBFORM_LANGCODE", "fr")
        clean_env.setenv("WEBFORM_LANGUAGES", "en, fr,de")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")
        clean_env.setenv("SEED", "12345")

        config = WebformAddressConfig.from_env()

        assert config.language.default_langcode == "fr"
        assert config.language.languages == ["en", "fr", "de"]
        assert config.language.multilingual is True
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.seed == 12345

    def test_from_env_default_language_not_enabled(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("WEBFORM_LANGCODE", "de")
        clean_env.setenv("WEBFORM_LANGUAGES", "en,fr")

        with pytest.raises(ConfigurationError):
            WebformAddressConfig.from_env()

    def test_from_env_unknown_log_format(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ConfigurationError):
            WebformAddressConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        logger = logging.getLogger("webform_address")
        assert logger.level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_package_module_loggers_follow_level(self) -> None:
        setup_logging(level="WARNING")

        assert logging.getLogger("webform_address.webform").getEffectiveLevel() == logging.WARNING

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = {
            "name": "test.logger",
            "level": logging.INFO,
            "pathname": "/path/to/file.py",
            "lineno": 42,
            "msg": "Test message",
            "args": (),
            "exc_info": None,
        }
        return logging.LogRecord(**{**defaults, **kwargs})

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"element": "address"}

        data = json.loads(JsonFormatter().format(record))

        assert data["element"] == "address"


class TestPackageInit:
    """Tests for webform_address __init__.py."""

    def test_version_exported(self) -> None:
        from webform_address import __version__

        assert isinstance(__version__, str)
