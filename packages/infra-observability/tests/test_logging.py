"""Unit tests for codeflix.infra.observability.logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from unittest.mock import patch

import pytest

from codeflix.foundation.domain import ValidationError, ValidatorRules
from codeflix.infra.observability.logging import (
    CODEFLIX_LOGGER_NAME,
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and codeflix logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    codeflix = logging.getLogger(CODEFLIX_LOGGER_NAME)
    codeflix_level = codeflix.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    codeflix.setLevel(codeflix_level)
    get_logging_settings.cache_clear()


class TestLoggingSettings:
    @pytest.mark.unit
    def test_default_values(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "INFO"
            assert settings.environment == "development"

    @pytest.mark.unit
    def test_use_json_logs_production(self) -> None:
        settings = LoggingSettings(environment="production")
        assert settings.use_json_logs is True

    @pytest.mark.unit
    def test_use_json_logs_development(self) -> None:
        settings = LoggingSettings(environment="development")
        assert settings.use_json_logs is False

    @pytest.mark.unit
    def test_log_level_int(self) -> None:
        settings = LoggingSettings(log_level="DEBUG")
        assert settings.log_level_int == logging.DEBUG

    @pytest.mark.unit
    def test_normalize_log_level_lowercase(self) -> None:
        settings = LoggingSettings(log_level="debug")
        assert settings.log_level == "DEBUG"

    @pytest.mark.unit
    def test_invalid_log_level(self) -> None:
        with pytest.raises(Exception):  # noqa: B017
            LoggingSettings(log_level="INVALID")

    @pytest.mark.unit
    def test_from_env_vars(self) -> None:
        env = {"LOG_LEVEL": "WARNING", "ENVIRONMENT": "production"}
        with patch.dict("os.environ", env, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "WARNING"
            assert settings.environment == "production"

    @pytest.mark.unit
    def test_settings_are_cached(self) -> None:
        get_logging_settings.cache_clear()
        assert get_logging_settings() is get_logging_settings()


class TestConfigureLogging:
    @pytest.mark.unit
    def test_configure_with_default_settings(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            get_logging_settings.cache_clear()
            configure_logging()
        assert logging.getLogger(CODEFLIX_LOGGER_NAME).level == logging.INFO
        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.unit
    def test_configure_sets_codeflix_level(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        assert logging.getLogger(CODEFLIX_LOGGER_NAME).level == logging.DEBUG

    @pytest.mark.unit
    def test_json_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG", environment="production"))
        get_logger("codeflix.test").warning("category_created", category_id="123")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "category_created"
        assert parsed["category_id"] == "123"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "codeflix.test"
        assert "timestamp" in parsed

    @pytest.mark.unit
    def test_stdlib_domain_logs_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG", environment="production"))
        with pytest.raises(ValidationError):
            ValidatorRules.values(None, "name").required()
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "codeflix.foundation.domain.validators"
        assert "The name is required." in parsed["event"]

    @pytest.mark.unit
    def test_level_filters_domain_debug_logs(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(log_level="INFO", environment="production"))
        with pytest.raises(ValidationError):
            ValidatorRules.values(None, "name").required()
        assert capfd.readouterr().err == ""


class TestGetLogger:
    @pytest.mark.unit
    def test_returns_logger(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        logger = get_logger("codeflix.module")
        assert logger is not None

    @pytest.mark.unit
    def test_returns_logger_when_no_name(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        logger = get_logger()
        assert logger is not None
