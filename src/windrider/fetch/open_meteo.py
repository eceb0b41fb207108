"""Open-Meteo client for current surface wind and temperature."""

from __future__ import annotations

import logging
from datetime import datetime

import requests

from windrider.errors import WeatherProviderError
from windrider.models import Coordinate, WindObservation, celsius_to_kelvin

logger = logging.getLogger(__name__)

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
CURRENT_VARIABLES = "temperature_2m,wind_speed_10m,wind_direction_10m"


class OpenMeteoClient:
    """Client for fetching current conditions from the Open-Meteo API."""

    def __init__(self, timeout: int = 30, base_url: str = FORECAST_URL):
        self.timeout = timeout
        self.base_url = base_url
        self.session = requests.Session()

    def fetch_conditions(self, coordinate: Coordinate) -> WindObservation:
        """Fetch the current observation for a single coordinate.

        Open-Meteo reports Celsius; the observation is stored in Kelvin.
        """
        params = {
            "latitude": coordinate.lat,
            "longitude": coordinate.lon,
            "current": CURRENT_VARIABLES,
            "wind_speed_unit": "ms",
            "timezone": "UTC",
        }

        logger.info("Fetching Open-Meteo conditions for %.4f,%.4f", coordinate.lat, coordinate.lon)

        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise WeatherProviderError(f"Open-Meteo request failed: {exc}") from exc

        return self._parse_current(data)

    def _parse_current(self, data: dict) -> WindObservation:
        if not isinstance(data, dict):
            raise WeatherProviderError("Malformed Open-Meteo response: expected a JSON object")
        current = data.get("current") or {}
        try:
            observed_at = None
            if current.get("time"):
                observed_at = datetime.fromisoformat(current["time"])
            return WindObservation(
                wind_speed_ms=float(current["wind_speed_10m"]),
                wind_direction_deg=round(float(current["wind_direction_10m"])) % 360,
                temperature_k=celsius_to_kelvin(float(current["temperature_2m"])),
                observed_at=observed_at,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise WeatherProviderError(f"Malformed Open-Meteo response: {exc}") from exc
