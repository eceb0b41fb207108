"""Headwind/tailwind and crosswind shares from heading and wind direction.

Relative wind angle 0 means wind from straight ahead, 180 from straight behind.
Shares are whole percentages rounded to the nearest integer.
"""

from __future__ import annotations

import math

from windrider.models import WindPercentages


def relative_wind_angle(heading_deg: int, wind_direction_deg: int) -> int:
    """Wind direction relative to heading, normalized into [0, 360)."""
    return ((wind_direction_deg - heading_deg) % 360 + 360) % 360


def headwind_percentage(relative_angle: int) -> int:
    """Headwind share; non-zero only for relative angles in [0, 90) or (270, 360)."""
    if relative_angle < 90 or relative_angle > 270:
        theta = math.radians(relative_angle)
        return round((1 + math.cos(theta)) / 2 * 100)
    return 0


def tailwind_percentage(relative_angle: int) -> int:
    """Tailwind share; non-zero only for relative angles strictly in (90, 270)."""
    if 90 < relative_angle < 270:
        theta = math.radians(relative_angle)
        return round((1 - math.cos(theta)) / 2 * 100)
    return 0


def crosswind_percentage(relative_angle: int) -> int:
    """Crosswind share, peaking at 90 and 270 and zero at 0 and 180."""
    theta = math.radians(relative_angle)
    return round((1 - math.cos(2 * theta)) / 2 * 100)


def wind_percentages(relative_angle: int) -> WindPercentages:
    return WindPercentages(
        headwind_pct=headwind_percentage(relative_angle),
        tailwind_pct=tailwind_percentage(relative_angle),
        crosswind_pct=crosswind_percentage(relative_angle),
    )
