"""
Main module - Main/Composition Root Layer

This module wires the package together for callers embedding the
prediction engine.

Its primary responsibilities include:
- Loading settings from the environment
- Configuring dependencies and services (Composition Root)
- Configuring logging from the loaded settings
"""

from .app import create_app
from .config import AppSettings, LoggingSettings, PredictionSettings, get_settings
from .container import AppContainer, get_container, init_container, utc_now

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "PredictionSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
    "utc_now",
    "create_app",
]
