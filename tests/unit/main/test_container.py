from __future__ import annotations

from datetime import timezone

import pytest

from nugget_forecast.application.use_cases import (
    PredictNextDiaperUseCase,
    PredictNextFeedingUseCase,
    PredictNextPumpingUseCase,
    PredictNextSleepUseCase,
)
from nugget_forecast.domain.entities.policy import PredictionPolicy
from nugget_forecast.main.config import AppSettings, PredictionSettings
from nugget_forecast.main.container import get_container, init_container, utc_now


def test_init_and_get_container() -> None:
    settings = AppSettings()
    container = init_container(settings)

    assert get_container() is container
    assert isinstance(container.predict_next_feeding_use_case(), PredictNextFeedingUseCase)
    assert isinstance(container.predict_next_pumping_use_case(), PredictNextPumpingUseCase)
    assert isinstance(container.predict_next_sleep_use_case(), PredictNextSleepUseCase)
    assert isinstance(container.predict_next_diaper_use_case(), PredictNextDiaperUseCase)


def test_policy_reflects_prediction_settings() -> None:
    settings = AppSettings(
        prediction=PredictionSettings(history_limit=4, pumping_preference_weight=0.7)
    )
    container = init_container(settings)

    policy = container.prediction_policy()

    assert isinstance(policy, PredictionPolicy)
    assert policy.history_limit == 4
    assert policy.pumping_preference_weight == 0.7
    assert container.prediction_policy() is policy
    assert container.predict_next_sleep_use_case().policy is policy


def test_clock_provider_returns_aware_utc_time() -> None:
    container = init_container(AppSettings())

    clock = container.clock()

    assert clock is utc_now
    assert clock().tzinfo == timezone.utc


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("nugget_forecast.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
