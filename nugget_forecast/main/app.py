"""
Application Bootstrap - Main Layer

Entry point for embedding the prediction engine: configures logging, loads
settings and builds the dependency injection container.
"""

from typing import Optional

from nugget_forecast.main.config import AppSettings, get_settings
from nugget_forecast.main.container import AppContainer, init_container
from nugget_forecast.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> AppContainer:
    """
    Configure logging and initialize the global container.

    Args:
        settings: Settings to use; loaded from the environment when omitted.

    Returns:
        AppContainer: The initialized container
    """
    # Basic logging first so that settings loading is observable
    configure_logging()

    settings = settings or get_settings()
    update_logging_from_settings(settings)

    container = init_container(settings)
    logger.info("app.ready", environment=settings.environment.value)
    return container
