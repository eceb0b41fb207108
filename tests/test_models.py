"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from windrider.models import (
    Coordinate,
    CoordinateWeatherImpact,
    CyclingAdvice,
    CyclingPath,
    MissingWindPercentages,
    PathWeatherImpact,
    WindObservation,
    WindPercentages,
    bearing_between,
    celsius_to_kelvin,
    kelvin_to_celsius,
)


def test_bearing_due_north():
    assert bearing_between(Coordinate(lat=51.0, lon=0.0), Coordinate(lat=52.0, lon=0.0)) == 0.0


def test_bearing_due_east_on_equator():
    b = bearing_between(Coordinate(lat=0.0, lon=0.0), Coordinate(lat=0.0, lon=1.0))
    assert b == pytest.approx(90.0)


def test_bearing_due_south():
    b = bearing_between(Coordinate(lat=52.0, lon=0.0), Coordinate(lat=51.0, lon=0.0))
    assert b == pytest.approx(180.0)


def test_temperature_conversion():
    assert kelvin_to_celsius(273.15) == pytest.approx(0.0)
    assert celsius_to_kelvin(23.0) == pytest.approx(296.15)


class TestCyclingPath:
    def test_derived_headings(self, dogleg_path):
        """Each point faces the next; the last repeats the previous bearing."""
        assert dogleg_path.heading_angles() == [90, 0, 0]

    def test_headings_match_coordinates(self, north_path):
        assert len(north_path.heading_angles()) == len(north_path.coordinates())

    def test_explicit_headings(self):
        path = CyclingPath(
            points=[Coordinate(lat=0, lon=0), Coordinate(lat=0, lon=1)],
            headings=[10, 20],
        )
        assert path.heading_angles() == [10, 20]

    def test_explicit_headings_length_mismatch(self):
        with pytest.raises(ValidationError):
            CyclingPath(points=[Coordinate(lat=0, lon=0)], headings=[10, 20])

    def test_explicit_heading_out_of_range(self):
        with pytest.raises(ValidationError):
            CyclingPath(points=[Coordinate(lat=0, lon=0)], headings=[360])

    def test_average_coordinate(self, dogleg_path):
        avg = dogleg_path.average_coordinate()
        assert avg.lat == pytest.approx(1 / 3)
        assert avg.lon == pytest.approx(2 / 3)

    def test_empty_path(self):
        path = CyclingPath(name="Empty")
        assert path.average_coordinate() is None
        assert path.heading_angles() == []

    def test_single_point_heading_zero(self):
        path = CyclingPath(points=[Coordinate(lat=51.0, lon=0.0)])
        assert path.heading_angles() == [0]


class TestWindObservation:
    def test_celsius_property(self, sample_observation):
        assert sample_observation.temperature_c == pytest.approx(18.0)

    def test_negative_speed_rejected(self):
        with pytest.raises(ValidationError):
            WindObservation(wind_speed_ms=-1, wind_direction_deg=0, temperature_k=280)

    def test_direction_must_be_below_360(self):
        with pytest.raises(ValidationError):
            WindObservation(wind_speed_ms=1, wind_direction_deg=360, temperature_k=280)

    def test_frozen(self, sample_observation):
        with pytest.raises(ValidationError):
            sample_observation.wind_speed_ms = 2.0


class TestWindShare:
    def test_percentages_bounded(self):
        with pytest.raises(ValidationError):
            WindPercentages(headwind_pct=101, tailwind_pct=0, crosswind_pct=0)

    def test_wind_balance(self):
        wp = WindPercentages(headwind_pct=10, tailwind_pct=0, crosswind_pct=30)
        assert wp.wind_balance == -40

    def test_discriminated_union_round_trip(self):
        impact = PathWeatherImpact(
            temperature_c=10.0, wind_speed_ms=2.0, wind=MissingWindPercentages(reason="x")
        )
        restored = PathWeatherImpact.model_validate_json(impact.model_dump_json())
        assert isinstance(restored.wind, MissingWindPercentages)

    def test_parse_complete_from_dict(self):
        impact = CoordinateWeatherImpact.model_validate({
            "relative_wind_direction_deg": 0.0,
            "wind": {"kind": "complete", "headwind_pct": 100, "tailwind_pct": 0, "crosswind_pct": 0},
        })
        assert impact.headwind_pct == 100

    def test_headwind_none_when_incomplete(self):
        impact = CoordinateWeatherImpact(
            relative_wind_direction_deg=0.0, wind=MissingWindPercentages()
        )
        assert impact.headwind_pct is None


def test_every_advice_has_message():
    for advice in CyclingAdvice:
        assert advice.message
