"""Codeflix Infra Observability -- structlog logging configuration."""

from __future__ import annotations

from codeflix.infra.observability.logging import (
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
)

__all__ = [
    "LoggingSettings",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
]
