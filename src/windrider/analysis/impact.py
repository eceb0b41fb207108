"""Path impact aggregation: apply the wind geometry to every path point.

One weather sample is taken at the path's average coordinate and applied
uniformly along the path.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Executor, Future

from windrider.analysis.wind import relative_wind_angle, wind_percentages
from windrider.errors import EmptyImpactSet, InvalidAverageCoordinate
from windrider.fetch import WeatherProvider
from windrider.models import (
    CoordinateWeatherImpact,
    CyclingPath,
    ImpactAnalysis,
    MissingWindPercentages,
    PathWeatherImpact,
    WindObservation,
    WindPercentages,
    kelvin_to_celsius,
)

logger = logging.getLogger(__name__)


def compute_coordinate_impacts(
    headings: Sequence[int], observation: WindObservation
) -> list[CoordinateWeatherImpact]:
    """Compute the wind impact at each heading, preserving order and length."""
    impacts = []
    for heading in headings:
        angle = relative_wind_angle(heading, observation.wind_direction_deg)
        impacts.append(
            CoordinateWeatherImpact(
                relative_wind_direction_deg=float(angle),
                wind=wind_percentages(angle),
            )
        )
    return impacts


def compute_path_impact(
    impacts: Sequence[CoordinateWeatherImpact], observation: WindObservation
) -> PathWeatherImpact:
    """Average per-point shares into a whole-path impact.

    Temperature is converted from Kelvin to Celsius here; everything
    downstream (scoring, advisory, reports) works in Celsius.

    Raises:
        EmptyImpactSet: If ``impacts`` is empty.
    """
    if not impacts:
        raise EmptyImpactSet("Cannot compute a path impact from zero points")

    temperature_c = kelvin_to_celsius(observation.temperature_k)
    complete = [i.wind for i in impacts if isinstance(i.wind, WindPercentages)]

    if len(complete) < len(impacts):
        missing = len(impacts) - len(complete)
        logger.warning("%d of %d points lack wind shares", missing, len(impacts))
        wind = MissingWindPercentages(reason=f"{missing} of {len(impacts)} points incomplete")
    else:
        n = len(complete)
        wind = WindPercentages(
            headwind_pct=sum(w.headwind_pct for w in complete) / n,
            tailwind_pct=sum(w.tailwind_pct for w in complete) / n,
            crosswind_pct=sum(w.crosswind_pct for w in complete) / n,
        )

    return PathWeatherImpact(
        temperature_c=temperature_c,
        wind_speed_ms=observation.wind_speed_ms,
        wind=wind,
    )


def analyze_impact(path: CyclingPath, provider: WeatherProvider) -> ImpactAnalysis:
    """Fetch one observation at the path's average coordinate and analyze the path.

    Provider exceptions propagate unchanged; no partial result is returned.

    Raises:
        InvalidAverageCoordinate: If the path has no average coordinate.
    """
    average = path.average_coordinate()
    if average is None:
        raise InvalidAverageCoordinate(f"Path '{path.name}' has no average coordinate")

    logger.info(
        "Analyzing '%s' (%d points) at %.4f,%.4f",
        path.name, len(path.points), average.lat, average.lon,
    )
    observation = provider.fetch_conditions(average)

    headings = path.heading_angles()
    coordinate_impacts = compute_coordinate_impacts(headings, observation)
    path_impact = compute_path_impact(coordinate_impacts, observation)

    logger.debug(
        "Wind %.1f m/s from %d deg, %.1f C",
        observation.wind_speed_ms, observation.wind_direction_deg, path_impact.temperature_c,
    )
    return ImpactAnalysis(
        path_name=path.name,
        observation=observation,
        coordinate_impacts=coordinate_impacts,
        path_impact=path_impact,
    )


def submit_analysis(
    executor: Executor,
    path: CyclingPath,
    provider: WeatherProvider,
) -> Future[ImpactAnalysis]:
    """Run ``analyze_impact`` in the background.

    The returned future is the caller's handle: ``result()`` re-raises any
    analysis or provider error, ``cancel()`` abandons a request not yet started.
    """
    return executor.submit(analyze_impact, path, provider)
