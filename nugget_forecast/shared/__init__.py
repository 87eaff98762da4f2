"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the package.

Its primary responsibilities include:
- Defining cross-layer constants (e.g., environment names, log levels)
- Configuring structured logging for the composition root
- Serving as a common place for definitions that do not belong
  exclusively to Domain or Application

It must not depend on any other layer.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
