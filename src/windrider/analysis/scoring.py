"""Cycling comfort score and rule-based recommendation for a path impact."""

from __future__ import annotations

import math

from windrider.models import (
    AdvisoryThresholds,
    CyclingAdvice,
    PathWeatherImpact,
    ScoreWeights,
    WindPercentages,
)

# Wind balance (tailwind - headwind - crosswind) is mapped from this range onto [0, 1].
BALANCE_MIN = -200.0
BALANCE_MAX = 200.0


def _sigmoid(x: float) -> float:
    # Clamp to avoid OverflowError in exp for absurd inputs
    x = max(min(x, 500.0), -500.0)
    return 1 / (1 + math.exp(-x))


def normalized_wind_balance(path_impact: PathWeatherImpact) -> float:
    """Wind balance mapped onto [0, 1]; incomplete data counts as neutral (0.5)."""
    balance = 0.0
    if isinstance(path_impact.wind, WindPercentages):
        balance = path_impact.wind.wind_balance
    return (balance - BALANCE_MIN) / (BALANCE_MAX - BALANCE_MIN)


def cycling_score(
    path_impact: PathWeatherImpact, weights: ScoreWeights | None = None
) -> float:
    """Weighted blend of temperature, wind speed and wind balance terms.

    For valid observations (speed >= 0) the speed term lies in [0.5, 1) and the
    balance term in [0.109, 0.75], so with default weights the score falls in
    roughly (0.22, 0.95).
    """
    weights = weights or ScoreWeights()

    temperature_term = _sigmoid(path_impact.temperature_c - weights.ideal_temperature_c)
    wind_speed_term = _sigmoid(path_impact.wind_speed_ms - weights.ideal_wind_speed_ms)
    balance_term = normalized_wind_balance(path_impact)

    return (
        weights.temperature * temperature_term
        + weights.wind_speed * wind_speed_term
        + weights.wind_balance * balance_term
    )


def cycling_advisory(
    path_impact: PathWeatherImpact, thresholds: AdvisoryThresholds | None = None
) -> CyclingAdvice:
    """Pick a recommendation; rules are checked in order and the first match wins."""
    t = thresholds or AdvisoryThresholds()

    wind = path_impact.wind
    if not isinstance(wind, WindPercentages):
        return CyclingAdvice.DATA_INCOMPLETE

    temperature = path_impact.temperature_c

    if path_impact.wind_speed_ms > t.windy_speed_ms:
        return CyclingAdvice.WINDY
    if temperature < t.freezing_c:
        return CyclingAdvice.FREEZING
    if wind.headwind_pct > t.strong_pct:
        return CyclingAdvice.STRONG_HEADWIND
    if wind.crosswind_pct > t.strong_pct:
        return CyclingAdvice.STRONG_CROSSWIND
    if wind.tailwind_pct > t.strong_pct:
        if temperature > t.hot_c:
            return CyclingAdvice.HOT_WITH_TAILWIND
        return CyclingAdvice.TAILWIND
    if temperature > t.hot_c:
        return CyclingAdvice.HOT
    return CyclingAdvice.FAVORABLE
