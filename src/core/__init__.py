"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Earthquake data parsing
- Feed URL selection
- Visual-attribute mapping (marker size and depth color)
- Popup and legend formatting
- Configuration validation

All functions here are deterministic and have no I/O.
"""

from src.core.earthquake import Earthquake, parse_earthquakes, filter_by_magnitude
from src.core.feed import build_feed_url
from src.core.markers import (
    Marker,
    MarkerStyle,
    marker_size,
    color_for_depth,
    create_marker,
    create_markers,
    get_legend_entries,
)
from src.core.formatter import format_popup_html, format_legend_html
from src.core.config import Config, MapConfig, validate_config

__all__ = [
    # Earthquake
    "Earthquake",
    "parse_earthquakes",
    "filter_by_magnitude",
    # Feed
    "build_feed_url",
    # Markers
    "Marker",
    "MarkerStyle",
    "marker_size",
    "color_for_depth",
    "create_marker",
    "create_markers",
    "get_legend_entries",
    # Formatter
    "format_popup_html",
    "format_legend_html",
    # Config
    "Config",
    "MapConfig",
    "validate_config",
]
