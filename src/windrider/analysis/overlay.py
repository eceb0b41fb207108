"""Colour-coded path overlay built from per-point headwind shares."""

from __future__ import annotations

from collections.abc import Sequence

from windrider.models import (
    GRAY,
    Coordinate,
    CoordinateWeatherImpact,
    PathSegmentOverlay,
    RGBColor,
)


def color_for_percentage(percentage: float) -> RGBColor:
    """Green at 0%, red at 100%, linear in between."""
    red = min(max(percentage, 0.0), 100.0) / 100
    return RGBColor(red=red, green=1 - red, blue=0.0)


def build_overlay_segments(
    impacts: Sequence[CoordinateWeatherImpact],
    coordinates: Sequence[Coordinate],
) -> list[PathSegmentOverlay]:
    """One segment per adjacent coordinate pair, coloured by the first point's headwind.

    Truncated to the number of impacts when there are fewer impacts than pairs.
    """
    segments = []
    for i in range(min(len(impacts), len(coordinates) - 1)):
        headwind = impacts[i].headwind_pct
        color = GRAY if headwind is None else color_for_percentage(headwind)
        segments.append(
            PathSegmentOverlay(
                start=coordinates[i],
                end=coordinates[i + 1],
                color=color,
                headwind_pct=headwind,
            )
        )
    return segments


def overlay_to_geojson(segments: Sequence[PathSegmentOverlay]) -> dict:
    """Render segments as a GeoJSON FeatureCollection of LineStrings."""
    features = []
    for seg in segments:
        features.append({
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                # GeoJSON positions are [lon, lat]
                "coordinates": [[seg.start.lon, seg.start.lat], [seg.end.lon, seg.end.lat]],
            },
            "properties": {
                "stroke": seg.color.hex,
                "headwind_pct": seg.headwind_pct,
            },
        })
    return {"type": "FeatureCollection", "features": features}
