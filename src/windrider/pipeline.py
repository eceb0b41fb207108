"""Core analysis pipeline, shared by CLI and API.

Orchestrates: fetch → per-point impacts → path impact → score, advice, overlay.
Returns structured results without printing or exiting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from windrider.analysis.impact import analyze_impact, compute_coordinate_impacts, compute_path_impact
from windrider.analysis.overlay import build_overlay_segments
from windrider.analysis.scoring import cycling_advisory, cycling_score
from windrider.errors import InvalidAverageCoordinate
from windrider.fetch import WeatherProvider
from windrider.models import (
    CyclingAdvice,
    CyclingPath,
    ImpactAnalysis,
    PathSegmentOverlay,
    Settings,
    WindObservation,
)

logger = logging.getLogger(__name__)


@dataclass
class RideAssessment:
    """Structured result from one pipeline run."""

    analysis: ImpactAnalysis
    score: float
    advice: CyclingAdvice
    segments: list[PathSegmentOverlay] = field(default_factory=list)


def assess_path(
    path: CyclingPath,
    provider: WeatherProvider,
    settings: Settings | None = None,
) -> RideAssessment:
    """Fetch conditions for the path and derive score, advice and overlay."""
    analysis = analyze_impact(path, provider)
    return _assess(path, analysis, settings or Settings())


def assess_with_observation(
    path: CyclingPath,
    observation: WindObservation,
    settings: Settings | None = None,
) -> RideAssessment:
    """Same as ``assess_path`` but with a caller-supplied observation (no fetch)."""
    if path.average_coordinate() is None:
        raise InvalidAverageCoordinate(f"Path '{path.name}' has no average coordinate")
    impacts = compute_coordinate_impacts(path.heading_angles(), observation)
    analysis = ImpactAnalysis(
        path_name=path.name,
        observation=observation,
        coordinate_impacts=impacts,
        path_impact=compute_path_impact(impacts, observation),
    )
    return _assess(path, analysis, settings or Settings())


def _assess(path: CyclingPath, analysis: ImpactAnalysis, settings: Settings) -> RideAssessment:
    score = cycling_score(analysis.path_impact, settings.weights)
    advice = cycling_advisory(analysis.path_impact, settings.thresholds)
    segments = build_overlay_segments(analysis.coordinate_impacts, path.coordinates())
    logger.info("Path '%s': score %.2f, advice %s", path.name, score, advice.value)
    return RideAssessment(analysis=analysis, score=score, advice=advice, segments=segments)
