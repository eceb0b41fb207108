"""API endpoints for path listing and wind impact analysis."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from windrider.analysis.overlay import overlay_to_geojson
from windrider.config import list_paths, load_path, load_settings
from windrider.errors import InvalidAverageCoordinate, WeatherProviderError
from windrider.models import (
    Coordinate,
    CyclingAdvice,
    CyclingPath,
    ImpactAnalysis,
    PathSegmentOverlay,
    WindObservation,
)
from windrider.pipeline import RideAssessment, assess_path, assess_with_observation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


class AnalyzeRequest(BaseModel):
    """Path to analyze, optionally with a fixed observation instead of a fetch."""

    name: str = ""
    points: list[Coordinate] = Field(default_factory=list)
    headings: Optional[list[int]] = None
    observation: Optional[WindObservation] = None


class AnalyzeResponse(BaseModel):
    analysis: ImpactAnalysis
    score: float
    advice: CyclingAdvice
    message: str
    segments: list[PathSegmentOverlay]
    geojson: dict

    @classmethod
    def from_assessment(cls, result: RideAssessment) -> AnalyzeResponse:
        return cls(
            analysis=result.analysis,
            score=result.score,
            advice=result.advice,
            message=result.advice.message,
            segments=result.segments,
            geojson=overlay_to_geojson(result.segments),
        )


def _run(request: Request, path: CyclingPath, observation: WindObservation | None) -> AnalyzeResponse:
    settings = load_settings(request.app.state.config_dir)
    try:
        if observation is not None:
            result = assess_with_observation(path, observation, settings)
        else:
            result = assess_path(path, request.app.state.provider, settings)
    except InvalidAverageCoordinate as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except WeatherProviderError as exc:
        logger.warning("Weather provider failed for '%s': %s", path.name, exc)
        raise HTTPException(status_code=502, detail=str(exc))
    return AnalyzeResponse.from_assessment(result)


@router.get("/paths", response_model=list[str])
def get_paths(request: Request):
    """List all configured path names."""
    return list_paths(request.app.state.config_dir)


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(body: AnalyzeRequest, request: Request):
    """Analyze an inline path."""
    try:
        path = CyclingPath(name=body.name, points=body.points, headings=body.headings)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return _run(request, path, body.observation)


@router.get("/paths/{name}/analysis", response_model=AnalyzeResponse)
def analyze_named(name: str, request: Request):
    """Fetch current conditions and analyze a configured path."""
    try:
        path = load_path(name, request.app.state.config_dir)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Path '{name}' not found")
    return _run(request, path, None)
