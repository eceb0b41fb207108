"""Weather providers.

A provider returns one ``WindObservation`` for one coordinate and raises
``WeatherProviderError`` when it cannot.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from windrider.models import Coordinate, WindObservation


@runtime_checkable
class WeatherProvider(Protocol):
    """Protocol for anything that can supply a wind observation."""

    def fetch_conditions(self, coordinate: Coordinate) -> WindObservation: ...
