from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional

import structlog

from nugget_forecast.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "nugget.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("structured log test")


def test_production_console_renders_json(capsys) -> None:
    configure_logging(level="INFO", environment="production")

    logging.getLogger("nugget.test").info("json line")

    lines = [line for line in capsys.readouterr().out.splitlines() if "json line" in line]
    assert lines
    payload = json.loads(lines[-1])
    assert payload["event"] == "json line"
    assert payload["level"] == "info"


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    format: str = "%(message)s"
    file_path: Optional[str] = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR


def test_update_logging_from_settings_tolerates_incomplete_settings() -> None:
    configure_logging(level="INFO")

    update_logging_from_settings(object())

    assert logging.getLogger().level == logging.INFO


def test_get_logger_returns_structlog_proxy() -> None:
    logger = get_logger("nugget_forecast.test")

    assert hasattr(logger, "info")
    assert structlog.is_configured()
