"""Plain text report for a path wind impact analysis."""

from __future__ import annotations

from windrider.models import (
    Coordinate,
    CoordinateWeatherImpact,
    CyclingAdvice,
    ImpactAnalysis,
    WindPercentages,
)

SEPARATOR = "=" * 60


def format_report(
    analysis: ImpactAnalysis,
    score: float,
    advice: CyclingAdvice,
    coordinates: list[Coordinate] | None = None,
) -> str:
    """Format a plain-text report from an analysis, its score and advice."""
    lines: list[str] = []
    obs = analysis.observation
    impact = analysis.path_impact

    # Header
    lines.append(SEPARATOR)
    lines.append(f"  {analysis.path_name or 'Unnamed path'}")
    if obs.observed_at is not None:
        lines.append(f"  Observed: {obs.observed_at.strftime('%Y-%m-%d %H:%MZ')}")
    lines.append(SEPARATOR)
    lines.append("")

    lines.append(
        f"  Wind {obs.wind_direction_deg:03d}/{obs.wind_speed_ms:.1f}m/s, "
        f"T {impact.temperature_c:.0f}C"
    )
    lines.extend(_format_wind_share(impact.wind))
    lines.append("")
    lines.append(f"  Score: {score:.2f}")
    lines.append(f"  {advice.message}")
    lines.append("")

    if analysis.coordinate_impacts:
        lines.append("--- Per point ---")
        lines.extend(_format_points(analysis.coordinate_impacts, coordinates))

    lines.append(SEPARATOR)
    return "\n".join(lines)


def _format_wind_share(wind) -> list[str]:
    if not isinstance(wind, WindPercentages):
        return [f"  Wind shares unavailable ({wind.reason})" if wind.reason else "  Wind shares unavailable"]
    return [
        f"  Headwind {wind.headwind_pct:.0f}%, "
        f"tailwind {wind.tailwind_pct:.0f}%, "
        f"crosswind {wind.crosswind_pct:.0f}%"
    ]


def _format_points(
    impacts: list[CoordinateWeatherImpact], coordinates: list[Coordinate] | None
) -> list[str]:
    lines = []
    for i, ci in enumerate(impacts):
        where = f"#{i:<3d}"
        if coordinates and i < len(coordinates):
            where += f" {coordinates[i].lat:8.4f},{coordinates[i].lon:9.4f}"
        if isinstance(ci.wind, WindPercentages):
            w = ci.wind
            lines.append(
                f"  {where}  rel {ci.relative_wind_direction_deg:3.0f}  "
                f"H {w.headwind_pct:3.0f}%  T {w.tailwind_pct:3.0f}%  X {w.crosswind_pct:3.0f}%"
            )
        else:
            lines.append(f"  {where}  rel {ci.relative_wind_direction_deg:3.0f}  no data")
    return lines
