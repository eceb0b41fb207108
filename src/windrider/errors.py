"""Exceptions raised by the wind impact analysis."""

from __future__ import annotations


class WindriderError(Exception):
    """Base class for windrider errors."""


class InvalidAverageCoordinate(WindriderError):
    """The path has no usable representative point (e.g. it is empty)."""


class EmptyImpactSet(WindriderError, ValueError):
    """Aggregation was attempted on zero per-point impacts."""


class WeatherProviderError(WindriderError):
    """A weather provider failed to return an observation."""
