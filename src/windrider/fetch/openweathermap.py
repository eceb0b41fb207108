"""OpenWeatherMap client for current wind and temperature."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import requests

from windrider.errors import WeatherProviderError
from windrider.models import Coordinate, WindObservation

logger = logging.getLogger(__name__)

CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class OpenWeatherMapClient:
    """Client for the OpenWeatherMap current weather endpoint.

    Uses standard units: wind speed in m/s, temperature in Kelvin.
    """

    def __init__(self, api_key: str, timeout: int = 30, base_url: str = CURRENT_WEATHER_URL):
        if not api_key:
            raise ValueError("OpenWeatherMap API key is required")
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = base_url
        self.session = requests.Session()

    def fetch_conditions(self, coordinate: Coordinate) -> WindObservation:
        params = {
            "lat": coordinate.lat,
            "lon": coordinate.lon,
            "appid": self.api_key,
        }

        logger.info(
            "Fetching OpenWeatherMap conditions for %.4f,%.4f", coordinate.lat, coordinate.lon
        )

        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise WeatherProviderError(f"OpenWeatherMap request failed: {exc}") from exc

        try:
            wind = data["wind"]
            observed_at = None
            if "dt" in data:
                observed_at = datetime.fromtimestamp(data["dt"], tz=timezone.utc)
            return WindObservation(
                wind_speed_ms=float(wind["speed"]),
                # Direction is omitted in calm conditions
                wind_direction_deg=round(float(wind.get("deg", 0))) % 360,
                temperature_k=float(data["main"]["temp"]),
                observed_at=observed_at,
            )
        except (AttributeError, KeyError, TypeError, ValueError, OverflowError, OSError) as exc:
            raise WeatherProviderError(f"Malformed OpenWeatherMap response: {exc}") from exc
