"""Path and settings configuration loading from YAML and the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from windrider.fetch import WeatherProvider
from windrider.fetch.open_meteo import OpenMeteoClient
from windrider.fetch.openweathermap import OpenWeatherMapClient
from windrider.models import (
    AdvisoryThresholds,
    Coordinate,
    CyclingPath,
    ScoreWeights,
    Settings,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"
PATHS_FILE = "paths.yaml"

PROVIDERS = ("open-meteo", "openweathermap")


def _config_dir(config_dir: Path | None) -> Path:
    if config_dir is not None:
        return config_dir
    env_dir = os.environ.get("WINDRIDER_CONFIG_DIR")
    return Path(env_dir) if env_dir else CONFIG_DIR


def _load_yaml(config_dir: Path | None) -> dict:
    paths_file = _config_dir(config_dir) / PATHS_FILE
    if not paths_file.exists():
        logger.warning("Config file %s not found, using defaults", paths_file)
        return {}
    with open(paths_file) as f:
        return yaml.safe_load(f) or {}


def load_path(name: str, config_dir: Path | None = None) -> CyclingPath:
    """Load a named path from paths.yaml.

    Args:
        name: Path key in paths.yaml.
        config_dir: Override for config directory (testing).
    """
    paths = _load_yaml(config_dir).get("paths", {})
    if name not in paths:
        available = ", ".join(paths.keys())
        raise KeyError(f"Path '{name}' not found. Available: {available}")

    p = paths[name]
    points = [Coordinate(lat=lat, lon=lon) for lat, lon in p.get("points", [])]
    return CyclingPath(
        name=p.get("name", name),
        points=points,
        headings=p.get("headings"),
    )


def list_paths(config_dir: Path | None = None) -> list[str]:
    """List available path names."""
    return list(_load_yaml(config_dir).get("paths", {}).keys())


def load_settings(config_dir: Path | None = None) -> Settings:
    """Load score weights and advisory thresholds, falling back to defaults."""
    raw = _load_yaml(config_dir).get("settings") or {}
    return Settings(
        weights=ScoreWeights(**(raw.get("weights") or {})),
        thresholds=AdvisoryThresholds(**(raw.get("thresholds") or {})),
    )


def build_provider(name: str | None = None, timeout: int = 30) -> WeatherProvider:
    """Create the weather provider named by argument or WINDRIDER_PROVIDER.

    Defaults to OpenWeatherMap when OPENWEATHERMAP_API_KEY is set, else Open-Meteo.
    """
    api_key = os.environ.get("OPENWEATHERMAP_API_KEY", "")
    name = name or os.environ.get("WINDRIDER_PROVIDER")
    if not name:
        name = "openweathermap" if api_key else "open-meteo"

    if name == "openweathermap":
        return OpenWeatherMapClient(api_key, timeout=timeout)
    if name == "open-meteo":
        return OpenMeteoClient(timeout=timeout)
    raise ValueError(f"Unknown provider '{name}'. Choose from: {', '.join(PROVIDERS)}")
