"""Earthquake data models and parsing - Pure functions.

This module handles parsing USGS GeoJSON features into typed Earthquake
objects. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake data model.

    Attributes:
        id: Unique USGS event ID
        magnitude: Earthquake magnitude
        place: Human-readable location description
        time: Event timestamp (UTC)
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        depth_km: Depth in kilometers (negative above sea level)
        url: USGS event detail URL
    """
    id: str
    magnitude: float
    place: str
    time: datetime
    latitude: float
    longitude: float
    depth_km: float
    url: str = ""

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


def parse_earthquake(feature: dict[str, Any]) -> Earthquake | None:
    """Parse a single GeoJSON feature into an Earthquake.

    Pure function: takes raw dict, returns typed Earthquake or None if invalid.

    Args:
        feature: GeoJSON feature dict from the USGS feed

    Returns:
        Earthquake object or None if parsing fails
    """
    try:
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        coords = geometry.get("coordinates") or []

        # Depth is the third coordinate; without it there is nothing to color
        if len(coords) < 3 or coords[2] is None:
            return None

        # USGS uses milliseconds since epoch
        time_ms = props.get("time")
        if time_ms is None:
            return None

        event_time = datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)

        magnitude = props.get("mag")
        if magnitude is None:
            return None

        return Earthquake(
            id=feature.get("id", ""),
            magnitude=float(magnitude),
            place=props.get("place") or "Unknown location",
            time=event_time,
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            depth_km=float(coords[2]),
            url=props.get("url") or "",
        )
    except (AttributeError, KeyError, TypeError, ValueError, OverflowError, OSError):
        return None


def parse_earthquakes(geojson: dict[str, Any]) -> list[Earthquake]:
    """Parse a USGS GeoJSON FeatureCollection into a list of Earthquakes.

    Pure function: filters out invalid features, returns valid earthquakes.

    Args:
        geojson: Full GeoJSON FeatureCollection from the USGS feed

    Returns:
        List of valid Earthquake objects, sorted by time (newest first)
    """
    features = geojson.get("features") or []
    earthquakes = []

    for feature in features:
        earthquake = parse_earthquake(feature)
        if earthquake is not None:
            earthquakes.append(earthquake)

    return sorted(earthquakes, key=lambda e: e.time, reverse=True)


def filter_by_magnitude(
    earthquakes: list[Earthquake],
    min_magnitude: float | None = None,
) -> list[Earthquake]:
    """Drop earthquakes below a minimum magnitude.

    Pure function.

    Args:
        earthquakes: List of earthquakes to filter
        min_magnitude: Minimum magnitude (inclusive), None for no minimum

    Returns:
        Filtered list of earthquakes
    """
    if min_magnitude is None:
        return earthquakes

    return [e for e in earthquakes if e.magnitude >= min_magnitude]
