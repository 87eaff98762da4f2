"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from datetime import datetime, timezone
from typing import Optional

from dependency_injector import containers, providers

from nugget_forecast.application.use_cases import (
    PredictNextDiaperUseCase,
    PredictNextFeedingUseCase,
    PredictNextPumpingUseCase,
    PredictNextSleepUseCase,
)
from nugget_forecast.domain.entities.policy import PredictionPolicy
from nugget_forecast.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def utc_now() -> datetime:
    """Current time in UTC; the only place the system clock is read."""
    return datetime.now(timezone.utc)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    # Settings
    config = providers.Configuration()

    # Domain
    prediction_policy = providers.Singleton(
        PredictionPolicy,
        history_limit=config.prediction.history_limit,
        recent_pattern_limit=config.prediction.recent_pattern_limit,
        max_valid_gap_hours=config.prediction.max_valid_gap_hours,
        recovery_interval_factor=config.prediction.recovery_interval_factor,
        feeding_preference_weight=config.prediction.feeding_preference_weight,
        pumping_preference_weight=config.prediction.pumping_preference_weight,
        sleep_preference_weight=config.prediction.sleep_preference_weight,
    )

    clock = providers.Object(utc_now)

    # Application (use cases)
    predict_next_feeding_use_case = providers.Factory(
        PredictNextFeedingUseCase,
        policy=prediction_policy,
        clock=clock,
    )

    predict_next_pumping_use_case = providers.Factory(
        PredictNextPumpingUseCase,
        policy=prediction_policy,
        clock=clock,
    )

    predict_next_sleep_use_case = providers.Factory(
        PredictNextSleepUseCase,
        policy=prediction_policy,
        clock=clock,
    )

    predict_next_diaper_use_case = providers.Factory(
        PredictNextDiaperUseCase,
        policy=prediction_policy,
        clock=clock,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: Optional[AppContainer] = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.info(
        "container.initialized",
        environment=settings.environment.value,
        history_limit=settings.prediction.history_limit,
    )
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
