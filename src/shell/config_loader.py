"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, MapConfig, TileLayerConfig) are defined in
src/core/config.py to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from src.core.config import Config, MapConfig, TileLayerConfig


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} environment placeholder.

    Tile providers often need an access token in the URL; the token is kept
    out of the YAML file and read from the environment instead.

    Args:
        value: Value to resolve

    Returns:
        Resolved value, or the original value if no variable is set
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)
        return value

    # Inline placeholders, e.g. https://tiles.example.com/{z}/{x}/{y}?token=${TOKEN}
    return os.path.expandvars(value)


def _parse_tile_layer(data: dict[str, Any]) -> TileLayerConfig:
    """Parse a base tile layer from config data."""
    max_zoom = data.get("max_zoom")
    return TileLayerConfig(
        name=data["name"],
        url=_resolve_value(data["url"]),
        attribution=data.get("attribution", ""),
        tile_size=int(data.get("tile_size", 256)),
        zoom_offset=int(data.get("zoom_offset", 0)),
        max_zoom=int(max_zoom) if max_zoom is not None else None,
    )


def _parse_map(data: dict[str, Any]) -> MapConfig:
    """Parse the map section from config data."""
    defaults = MapConfig()

    center = data.get("center") or {}
    base_layers = defaults.base_layers
    if "base_layers" in data:
        base_layers = [_parse_tile_layer(layer) for layer in data["base_layers"]]

    return MapConfig(
        center_latitude=float(center.get("latitude", defaults.center_latitude)),
        center_longitude=float(center.get("longitude", defaults.center_longitude)),
        zoom_start=int(data.get("zoom_start", defaults.zoom_start)),
        base_layers=base_layers,
        default_base_layer=data.get("default_base_layer", defaults.default_base_layer),
        overlay_name=data.get("overlay_name", defaults.overlay_name),
        legend_position=data.get("legend_position", defaults.legend_position),
        collapsed_layer_control=bool(
            data.get("collapsed_layer_control", defaults.collapsed_layer_control)
        ),
    )


def _parse_optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()

    feed = data.get("feed") or {}
    feed_url = feed.get("url")

    return Config(
        feed_level=str(feed.get("level", defaults.feed_level)),
        feed_period=str(feed.get("period", defaults.feed_period)),
        feed_url=_resolve_value(feed_url) if feed_url else None,
        min_magnitude=_parse_optional_float(feed.get("min_magnitude")),
        request_timeout_seconds=int(
            feed.get("timeout_seconds", defaults.request_timeout_seconds)
        ),
        map=_parse_map(data.get("map") or {}),
        output_path=data.get("output_path", defaults.output_path),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: feed %s, %d base layers",
        config.feed_url or f"{config.feed_level}_{config.feed_period}",
        len(config.map.base_layers),
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for deployments without a YAML file.

    Environment variables:
        FEED_LEVEL: USGS summary feed level (significant, 4.5, 2.5, 1.0, all)
        FEED_PERIOD: USGS summary feed period (hour, day, week, month)
        FEED_URL: Explicit feed URL (overrides level and period)
        MIN_MAGNITUDE: Drop earthquakes below this magnitude
        OUTPUT_PATH: Where the CLI writes the HTML map

    Returns:
        Config object from environment
    """
    defaults = Config()

    return Config(
        feed_level=os.environ.get("FEED_LEVEL", defaults.feed_level),
        feed_period=os.environ.get("FEED_PERIOD", defaults.feed_period),
        feed_url=os.environ.get("FEED_URL") or None,
        min_magnitude=_parse_optional_float(os.environ.get("MIN_MAGNITUDE")),
        output_path=os.environ.get("OUTPUT_PATH", defaults.output_path),
    )
