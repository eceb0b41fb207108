"""Pydantic v2 models for windrider."""

from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

ABSOLUTE_ZERO_C = -273.15


def kelvin_to_celsius(temp_k: float) -> float:
    """Convert a Kelvin temperature to Celsius."""
    return temp_k + ABSOLUTE_ZERO_C


def celsius_to_kelvin(temp_c: float) -> float:
    """Convert a Celsius temperature to Kelvin."""
    return temp_c - ABSOLUTE_ZERO_C


class Coordinate(BaseModel):
    """A geographic point."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


def bearing_between(a: Coordinate, b: Coordinate) -> float:
    """Compute great-circle initial bearing from a to b in degrees [0, 360)."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlon = math.radians(b.lon - a.lon)

    x = math.sin(dlon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    return math.degrees(math.atan2(x, y)) % 360


class CyclingPath(BaseModel):
    """An ordered cycling path.

    Headings are derived from consecutive bearings unless given explicitly.
    """

    name: str = ""
    points: list[Coordinate] = Field(default_factory=list)
    headings: Optional[list[int]] = None

    @model_validator(mode="after")
    def _validate_headings(self) -> CyclingPath:
        if self.headings is not None:
            if len(self.headings) != len(self.points):
                raise ValueError("Path must have exactly one heading per point")
            if any(not 0 <= h < 360 for h in self.headings):
                raise ValueError("Headings must be in [0, 360)")
        return self

    def coordinates(self) -> list[Coordinate]:
        return list(self.points)

    def heading_angles(self) -> list[int]:
        """Heading in whole degrees at every point.

        Point i faces point i+1; the last point keeps the previous bearing.
        """
        if self.headings is not None:
            return list(self.headings)
        if len(self.points) < 2:
            return [0] * len(self.points)

        leg_bearings = [
            round(bearing_between(a, b)) % 360
            for a, b in zip(self.points, self.points[1:])
        ]
        return leg_bearings + [leg_bearings[-1]]

    def average_coordinate(self) -> Optional[Coordinate]:
        """Mean latitude/longitude, or None for an empty path."""
        if not self.points:
            return None
        n = len(self.points)
        return Coordinate(
            lat=sum(p.lat for p in self.points) / n,
            lon=sum(p.lon for p in self.points) / n,
        )


class WindObservation(BaseModel):
    """A single wind and temperature sample for one location."""

    model_config = ConfigDict(frozen=True)

    wind_speed_ms: float = Field(ge=0)
    wind_direction_deg: int = Field(ge=0, lt=360)
    temperature_k: float = Field(ge=0)
    observed_at: Optional[datetime] = None

    @property
    def temperature_c(self) -> float:
        return kelvin_to_celsius(self.temperature_k)


# --- Analysis result models ---


class WindPercentages(BaseModel):
    """Headwind/tailwind/crosswind shares, all present."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["complete"] = "complete"
    headwind_pct: float = Field(ge=0, le=100)
    tailwind_pct: float = Field(ge=0, le=100)
    crosswind_pct: float = Field(ge=0, le=100)

    @property
    def wind_balance(self) -> float:
        """Tailwind minus headwind minus crosswind, in [-200, 100]."""
        return self.tailwind_pct - self.headwind_pct - self.crosswind_pct


class MissingWindPercentages(BaseModel):
    """Marker for wind shares that could not be determined."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["incomplete"] = "incomplete"
    reason: str = ""


WindShare = Annotated[
    Union[WindPercentages, MissingWindPercentages],
    Field(discriminator="kind"),
]


class CoordinateWeatherImpact(BaseModel):
    """Wind impact at one path point."""

    model_config = ConfigDict(frozen=True)

    relative_wind_direction_deg: float
    wind: WindShare

    @property
    def headwind_pct(self) -> Optional[float]:
        if isinstance(self.wind, WindPercentages):
            return self.wind.headwind_pct
        return None


class PathWeatherImpact(BaseModel):
    """Mean wind impact over a whole path, paired with the shared sample."""

    model_config = ConfigDict(frozen=True)

    temperature_c: float
    wind_speed_ms: float
    wind: WindShare


class RGBColor(BaseModel):
    """Colour with channels in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    red: float = Field(ge=0, le=1)
    green: float = Field(ge=0, le=1)
    blue: float = Field(ge=0, le=1)

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(
            *(round(c * 255) for c in (self.red, self.green, self.blue))
        )


GRAY = RGBColor(red=0.5, green=0.5, blue=0.5)


class PathSegmentOverlay(BaseModel):
    """A drawable segment between two adjacent path points."""

    model_config = ConfigDict(frozen=True)

    start: Coordinate
    end: Coordinate
    color: RGBColor
    headwind_pct: Optional[float] = None


class ImpactAnalysis(BaseModel):
    """Result of one path analysis: per-point and whole-path impact."""

    path_name: str = ""
    observation: WindObservation
    coordinate_impacts: list[CoordinateWeatherImpact] = Field(default_factory=list)
    path_impact: PathWeatherImpact


class CyclingAdvice(str, Enum):
    """Recommendation label derived from a path impact."""

    DATA_INCOMPLETE = "data_incomplete"
    WINDY = "windy"
    FREEZING = "freezing"
    STRONG_HEADWIND = "strong_headwind"
    STRONG_CROSSWIND = "strong_crosswind"
    HOT_WITH_TAILWIND = "hot_with_tailwind"
    TAILWIND = "tailwind"
    HOT = "hot"
    FAVORABLE = "favorable"

    @property
    def message(self) -> str:
        return _ADVICE_MESSAGES[self]


_ADVICE_MESSAGES = {
    CyclingAdvice.DATA_INCOMPLETE: "Data is incomplete",
    CyclingAdvice.WINDY: "It's quite windy today. Cycling might be challenging.",
    CyclingAdvice.FREEZING: "It's freezing outside. Cycling might be uncomfortable.",
    CyclingAdvice.STRONG_HEADWIND: "There's a strong headwind today. Cycling could be difficult.",
    CyclingAdvice.STRONG_CROSSWIND: "There's a strong crosswind today. It could make cycling unstable.",
    CyclingAdvice.HOT_WITH_TAILWIND: (
        "It's a warm day with a nice tailwind. Remember to stay hydrated while cycling."
    ),
    CyclingAdvice.TAILWIND: "It's a good day to cycle with a supportive tailwind.",
    CyclingAdvice.HOT: "It's quite hot today. If you decide to cycle, remember to stay hydrated.",
    CyclingAdvice.FAVORABLE: "The weather seems good for cycling. Enjoy your ride!",
}


# --- Tunables ---


class ScoreWeights(BaseModel):
    """Weights and centre points for the cycling score."""

    ideal_temperature_c: float = 23.0
    ideal_wind_speed_ms: float = 0.0
    temperature: float = 0.4
    wind_speed: float = 0.4
    wind_balance: float = 0.2


class AdvisoryThresholds(BaseModel):
    """Thresholds for the advisory rule cascade."""

    windy_speed_ms: float = 10.0
    freezing_c: float = 0.0
    strong_pct: float = 50.0
    hot_c: float = 30.0


class Settings(BaseModel):
    """Tunables loaded from config."""

    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    thresholds: AdvisoryThresholds = Field(default_factory=AdvisoryThresholds)
