from __future__ import annotations

import pytest

from nugget_forecast.domain.services.units import (
    VolumeUnit,
    format_volume,
    ml_to_oz,
    ml_to_oz_precise,
    oz_to_ml,
    quick_select_volumes,
    quick_select_volumes_by_age,
    volume_step,
    volume_unit_for,
)


@pytest.mark.parametrize("ml", [30, 60, 120, 240])
def test_ml_round_trip_stays_within_half_ounce(ml) -> None:
    assert abs(oz_to_ml(ml_to_oz(ml)) - ml) <= 0.5 * 29.5735


@pytest.mark.parametrize("oz", [1, 2, 4, 8])
def test_oz_round_trip_is_exact(oz) -> None:
    assert ml_to_oz(oz_to_ml(oz)) == oz


def test_ml_to_oz_rounds_to_half_ounce() -> None:
    assert ml_to_oz(90) == 3.0
    assert ml_to_oz(75) == 2.5
    assert ml_to_oz(0) == 0


def test_oz_to_ml_returns_whole_milliliters() -> None:
    assert oz_to_ml(4) == 118
    assert isinstance(oz_to_ml(1.5), int)


def test_ml_to_oz_precise_keeps_small_volumes_visible() -> None:
    assert ml_to_oz_precise(0) == 0.0
    assert ml_to_oz_precise(1) == 0.1
    assert ml_to_oz_precise(6) == 0.2
    assert ml_to_oz_precise(60) == 2.0


def test_unit_helpers() -> None:
    assert volume_unit_for("imperial") == VolumeUnit.OZ
    assert volume_unit_for("metric") == VolumeUnit.ML
    assert volume_unit_for(None) == VolumeUnit.ML
    assert volume_step(VolumeUnit.OZ) == 0.5
    assert volume_step(VolumeUnit.ML) == 30
    assert quick_select_volumes(VolumeUnit.OZ) == [2, 3, 4, 6]


def test_quick_select_volumes_by_age() -> None:
    assert quick_select_volumes_by_age(10, VolumeUnit.ML) == [60, 75, 90, 105]
    assert quick_select_volumes_by_age(400, VolumeUnit.OZ) == [6, 7, 8, 9]
    assert quick_select_volumes_by_age(None, VolumeUnit.ML) == [60, 90, 120, 180]


def test_format_volume() -> None:
    assert format_volume(118, VolumeUnit.OZ) == "4oz"
    assert format_volume(75, VolumeUnit.OZ) == "2.5oz"
    assert format_volume(89.6, VolumeUnit.ML) == "90ml"
    assert format_volume(90, VolumeUnit.ML, show_unit=False) == "90"
