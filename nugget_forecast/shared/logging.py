"""
Logging Configuration - Shared Layer

Structured logging for the prediction engine. Domain services stay silent;
use cases and the composition root log through the loggers returned here.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from nugget_forecast.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """Read bootstrap logging options before settings are loaded."""
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
    }


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure stdlib logging with structlog processors.

    Console output is rendered by structlog (key/value in development,
    JSON in production). A file handler, when requested, writes plain lines
    using ``format_string``.

    Args:
        level: Optional override for the log level.
        format_string: Optional override for the file log format.
        file_path: Optional path of a log file.
        environment: Application environment (development, production, etc.)
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or "INFO"
    log_format = format_string or env_config["format"] or DEFAULT_LOG_FORMAT
    log_file = file_path or env_config["file_path"]

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    pre_chain: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _select_renderer(environment),
            ],
            foreign_pre_chain=pre_chain,
        )
    )
    handlers: List[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(log_format))
        handlers.append(file_handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.getLogger(__name__).info("Logging configured with level: %s", log_level)


def update_logging_from_settings(settings: Any) -> None:
    """
    Re-apply logging configuration from the loaded application settings.

    Args:
        settings: ``AppSettings`` or any object exposing ``logging`` and
            ``environment`` attributes.
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=log_level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except (AttributeError, TypeError) as exc:
        logging.getLogger(__name__).error(
            "Failed to update logging from settings: %s", exc
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the package."""
    return structlog.get_logger(name)
