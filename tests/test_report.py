"""Tests for the plain text report."""

from __future__ import annotations

from windrider.models import (
    CyclingAdvice,
    ImpactAnalysis,
    MissingWindPercentages,
    PathWeatherImpact,
)
from windrider.pipeline import assess_path
from windrider.report.text import format_report


def test_report_contains_summary(north_path, fake_provider):
    result = assess_path(north_path, fake_provider)
    text = format_report(result.analysis, result.score, result.advice, north_path.coordinates())

    assert "Northbound" in text
    assert "Observed: 2026-10-18 09:00Z" in text
    assert "Wind 000/5.0m/s, T 18C" in text
    assert "Headwind 100%, tailwind 0%, crosswind 0%" in text
    assert f"Score: {result.score:.2f}" in text
    assert result.advice.message in text
    assert "--- Per point ---" in text
    assert "51.7000" in text


def test_report_incomplete_wind(sample_observation):
    analysis = ImpactAnalysis(
        path_name="Gappy",
        observation=sample_observation,
        coordinate_impacts=[],
        path_impact=PathWeatherImpact(
            temperature_c=18.0,
            wind_speed_ms=5.0,
            wind=MissingWindPercentages(reason="2 of 4 points incomplete"),
        ),
    )
    text = format_report(analysis, 0.5, CyclingAdvice.DATA_INCOMPLETE)
    assert "Wind shares unavailable (2 of 4 points incomplete)" in text
    assert "Data is incomplete" in text
    assert "Per point" not in text
