"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from windrider.models import Coordinate, CyclingPath, WindObservation, celsius_to_kelvin


class FakeProvider:
    """Weather provider double that records requested coordinates."""

    def __init__(self, observation: WindObservation | None = None, error: Exception | None = None):
        self.observation = observation
        self.error = error
        self.calls: list[Coordinate] = []

    def fetch_conditions(self, coordinate: Coordinate) -> WindObservation:
        self.calls.append(coordinate)
        if self.error is not None:
            raise self.error
        return self.observation


def make_observation(
    speed_ms: float = 4.0, direction_deg: int = 0, temp_c: float = 18.0
) -> WindObservation:
    return WindObservation(
        wind_speed_ms=speed_ms,
        wind_direction_deg=direction_deg,
        temperature_k=celsius_to_kelvin(temp_c),
    )


@pytest.fixture
def north_path():
    """Straight path heading due north (every heading 0)."""
    return CyclingPath(
        name="Northbound",
        points=[
            Coordinate(lat=51.70, lon=-1.25),
            Coordinate(lat=51.72, lon=-1.25),
            Coordinate(lat=51.74, lon=-1.25),
            Coordinate(lat=51.76, lon=-1.25),
        ],
    )


@pytest.fixture
def dogleg_path():
    """East along the equator, then north."""
    return CyclingPath(
        name="Dogleg",
        points=[
            Coordinate(lat=0.0, lon=0.0),
            Coordinate(lat=0.0, lon=1.0),
            Coordinate(lat=1.0, lon=1.0),
        ],
    )


@pytest.fixture
def sample_observation():
    return WindObservation(
        wind_speed_ms=5.0,
        wind_direction_deg=0,
        temperature_k=celsius_to_kelvin(18.0),
        observed_at=datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def fake_provider(sample_observation):
    return FakeProvider(sample_observation)


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Temporary config directory with a sample paths.yaml."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "paths.yaml").write_text(
        "paths:\n"
        "  river_loop:\n"
        '    name: "River loop"\n'
        "    points:\n"
        "      - [51.70, -1.25]\n"
        "      - [51.72, -1.25]\n"
        "      - [51.74, -1.25]\n"
        "  fixed_heading:\n"
        '    name: "Fixed heading"\n'
        "    points: [[51.0, 0.0], [51.1, 0.0]]\n"
        "    headings: [180, 180]\n"
        "settings:\n"
        "  weights:\n"
        "    ideal_temperature_c: 20\n"
        "  thresholds:\n"
        "    windy_speed_ms: 8\n"
    )
    return config_dir
