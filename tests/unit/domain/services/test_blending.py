from __future__ import annotations

import pytest

from nugget_forecast.domain.entities.prediction import BlendResult
from nugget_forecast.domain.services.blending import (
    blend,
    describe_blend,
    split_preference_weight,
)


def _blend(**overrides):
    params = dict(
        age_based_value=None,
        age_based_weight=0.3,
        recent_value=None,
        recent_weight=0.4,
        custom_value=None,
        custom_weight=0.3,
    )
    params.update(overrides)
    return blend(**params)


def test_single_source_collapses_to_that_value() -> None:
    result = _blend(age_based_value=100)

    assert result.value == 100
    assert result.source == "age-based only"
    assert result.components[0].weight == 1.0


def test_no_sources_returns_no_data() -> None:
    result = _blend()

    assert result.value is None
    assert result.source == "no data"
    assert result.components == ()


def test_missing_source_weight_is_redistributed_proportionally() -> None:
    result = _blend(age_based_value=100, recent_value=200)

    # 0.3 and 0.4 normalized to 3/7 and 4/7
    assert result.value == pytest.approx(100 * 3 / 7 + 200 * 4 / 7)
    assert result.source == "recent 57% + age-based 43%"


def test_missing_value_is_never_treated_as_zero() -> None:
    result = _blend(age_based_value=90, recent_value=90)
    assert result.value == pytest.approx(90)


def test_three_sources_source_string_is_ordered() -> None:
    result = blend(
        age_based_value=60,
        age_based_weight=0.2,
        recent_value=90,
        recent_weight=0.4,
        custom_value=120,
        custom_weight=0.4,
    )

    assert result.value == pytest.approx(60 * 0.2 + 90 * 0.4 + 120 * 0.4)
    assert result.source == "custom 40% + recent 40% + age-based 20%"


def test_all_zero_weights_are_treated_as_equal() -> None:
    result = blend(
        age_based_value=60,
        age_based_weight=0,
        recent_value=120,
        recent_weight=0,
        custom_value=None,
        custom_weight=0,
    )
    assert result.value == pytest.approx(90)
    assert result.source == "recent 50% + age-based 50%"


def test_blend_returns_raw_float() -> None:
    result = _blend(age_based_value=100, recent_value=101)
    assert result.value != round(result.value)


def test_split_preference_weight() -> None:
    age, recent, custom = split_preference_weight(0.4)

    assert custom == 0.4
    assert age == pytest.approx(0.6 * 0.33)
    assert recent == pytest.approx(0.6 * 0.67)
    assert age + recent + custom == pytest.approx(1.0)


def test_split_preference_weight_is_clamped() -> None:
    assert split_preference_weight(1.5) == (0.0, 0.0, 1.0)
    assert split_preference_weight(-1)[2] == 0.0


def test_describe_blend() -> None:
    assert describe_blend(_blend()) == "Not enough data yet"
    assert describe_blend(_blend(custom_value=5)) == "Based on your preference"
    assert describe_blend(_blend(recent_value=5)) == "Based on recent activity"
    assert describe_blend(_blend(age_based_value=5)) == "Based on baby's age"
    assert (
        describe_blend(_blend(age_based_value=5, custom_value=6))
        == "Blend of your preference, age guidelines"
    )
    assert describe_blend(BlendResult(value=45.0, source="estimate")) == "estimate"
