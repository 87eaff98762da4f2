from __future__ import annotations

from nugget_forecast.domain.entities.activity import ActivityType, PumpingDetails
from nugget_forecast.domain.services.pumping_volume import (
    calculate_pumping_volumes,
    is_colostrum_phase,
    pumped_amount_ml,
)


def test_colostrum_volumes_are_small() -> None:
    result = calculate_pumping_volumes(1, 20)

    assert result.is_colostrum is True
    assert result.total_ml == 7.5
    assert result.left_ml == result.right_ml == 4.0


def test_volumes_progress_with_age() -> None:
    totals = [calculate_pumping_volumes(age, 20).total_ml for age in (1, 3, 7, 14, 30)]
    assert totals == sorted(totals)
    assert totals[-1] == 180


def test_volumes_scale_with_duration() -> None:
    assert calculate_pumping_volumes(14, 10).total_ml == 75
    assert calculate_pumping_volumes(14, 30).total_ml == 225


def test_configured_volume_used_once_supply_is_established() -> None:
    assert calculate_pumping_volumes(60, 20, ml_per_pump=120).total_ml == 120
    assert calculate_pumping_volumes(20, 20, ml_per_pump=120).total_ml == 180


def test_even_split_between_breasts() -> None:
    result = calculate_pumping_volumes(30, 20)
    assert result.left_ml == result.right_ml
    assert result.left_ml + result.right_ml == result.total_ml


def test_is_colostrum_phase() -> None:
    assert is_colostrum_phase(0) is True
    assert is_colostrum_phase(5) is True
    assert is_colostrum_phase(6) is False


def test_pumped_amount_prefers_recorded_total(make_activity) -> None:
    recorded = make_activity(ActivityType.PUMPING, 1, amount_ml=100)
    per_breast = make_activity(
        ActivityType.PUMPING,
        1,
        details=PumpingDetails(left_breast_ml=40, right_breast_ml=50),
    )
    empty = make_activity(ActivityType.PUMPING, 1)

    assert pumped_amount_ml(recorded) == 100
    assert pumped_amount_ml(per_breast) == 90
    assert pumped_amount_ml(empty) is None
