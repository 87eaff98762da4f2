"""
Domain Service - Prediction Blending

Combines a custom user preference, a recent observed average and an
age-based default into one suggested value.

Sources whose value is missing do not take part: their weight is handed to
the remaining sources in proportion to those sources' own weights, which is
the same as normalizing the weights of the available sources. A missing value
is never treated as zero.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from nugget_forecast.domain.entities.prediction import BlendComponent, BlendResult

CUSTOM = "custom"
RECENT = "recent"
AGE_BASED = "age-based"
NO_DATA = "no data"

# Share of the non-custom weight given to the age-based default; the rest
# goes to the recent average.
AGE_BASED_SHARE = 0.33
RECENT_SHARE = 0.67

_DISPLAY_NAMES = {
    CUSTOM: "your preference",
    RECENT: "recent activity",
    AGE_BASED: "age guidelines",
}


def split_preference_weight(preference_weight: float) -> Tuple[float, float, float]:
    """
    Derive ``(age_based, recent, custom)`` weights from a preference weight.

    The preference weight is clamped to ``[0, 1]``; the remainder is split
    33/67 between the age-based default and the recent average.
    """
    custom = min(max(preference_weight, 0.0), 1.0)
    remainder = 1.0 - custom
    return remainder * AGE_BASED_SHARE, remainder * RECENT_SHARE, custom


def _format_source(components: List[BlendComponent]) -> str:
    if not components:
        return NO_DATA
    if len(components) == 1:
        return f"{components[0].name} only"
    return " + ".join(
        f"{component.name} {round(component.weight * 100)}%"
        for component in components
    )


def blend(
    *,
    age_based_value: Optional[float],
    age_based_weight: float,
    recent_value: Optional[float],
    recent_weight: float,
    custom_value: Optional[float],
    custom_weight: float,
) -> BlendResult:
    """
    Blend up to three candidate values.

    Returns:
        BlendResult whose ``value`` is the raw weighted average of the
        available sources, ``None`` when no source is available. ``source``
        names the contributing inputs, e.g. ``"age-based only"`` or
        ``"custom 40% + recent 40% + age-based 20%"``; percentages are the
        normalized weights after redistribution.
    """
    candidates = [
        (CUSTOM, custom_value, max(custom_weight, 0.0)),
        (RECENT, recent_value, max(recent_weight, 0.0)),
        (AGE_BASED, age_based_value, max(age_based_weight, 0.0)),
    ]
    available = [
        (name, value, weight)
        for name, value, weight in candidates
        if value is not None
    ]

    if not available:
        return BlendResult(value=None, source=NO_DATA)

    if len(available) == 1:
        name, value, _ = available[0]
        component = BlendComponent(name=name, value=float(value), weight=1.0)
        return BlendResult(
            value=float(value),
            source=_format_source([component]),
            components=(component,),
        )

    total_weight = sum(weight for _, _, weight in available)
    if total_weight <= 0:
        # Every available source carries zero weight: treat them equally.
        available = [(name, value, 1.0) for name, value, _ in available]
        total_weight = float(len(available))

    components = [
        BlendComponent(name=name, value=float(value), weight=weight / total_weight)
        for name, value, weight in available
    ]
    weighted_sum = sum(value * weight for _, value, weight in available)

    return BlendResult(
        value=weighted_sum / total_weight,
        source=_format_source(components),
        components=tuple(components),
    )


def describe_blend(result: BlendResult) -> str:
    """Human-readable sentence describing where a blended value came from."""
    if result.value is None:
        return "Not enough data yet"
    if not result.components:
        return result.source
    if len(result.components) == 1:
        name = result.components[0].name
        if name == CUSTOM:
            return "Based on your preference"
        if name == RECENT:
            return "Based on recent activity"
        return "Based on baby's age"
    names = [_DISPLAY_NAMES[component.name] for component in result.components]
    return f"Blend of {', '.join(names)}"
