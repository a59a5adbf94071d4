"""Unit tests for earthquake parsing.

These tests demonstrate the benefit of the Functional Core pattern:
- No mocks needed
- Fast, deterministic execution
- Simple assertions on pure functions
"""

from datetime import datetime, timezone

import pytest

from src.core.earthquake import (
    Earthquake,
    parse_earthquake,
    parse_earthquakes,
    filter_by_magnitude,
)


# Sample USGS GeoJSON feature for testing
SAMPLE_FEATURE = {
    "type": "Feature",
    "id": "nc75095866",
    "properties": {
        "mag": 4.2,
        "place": "10km NE of San Francisco, CA",
        "time": 1703001600000,  # 2023-12-19 12:00:00 UTC
        "url": "https://earthquake.usgs.gov/earthquakes/eventpage/nc75095866",
        "tsunami": 0,
        "magType": "ml",
    },
    "geometry": {
        "type": "Point",
        "coordinates": [-122.4194, 37.7749, 10.5],  # lon, lat, depth
    },
}

SAMPLE_GEOJSON = {
    "type": "FeatureCollection",
    "metadata": {"count": 1},
    "features": [SAMPLE_FEATURE],
}


class TestParseEarthquake:
    """Tests for parse_earthquake() pure function."""

    def test_parses_valid_feature(self):
        """Should parse a valid GeoJSON feature into Earthquake."""
        result = parse_earthquake(SAMPLE_FEATURE)

        assert result is not None
        assert result.id == "nc75095866"
        assert result.magnitude == 4.2
        assert result.place == "10km NE of San Francisco, CA"
        assert result.latitude == 37.7749
        assert result.longitude == -122.4194
        assert result.depth_km == 10.5
        assert result.url.endswith("nc75095866")

    def test_parses_time_correctly(self):
        """Should convert milliseconds to datetime."""
        result = parse_earthquake(SAMPLE_FEATURE)

        assert result is not None
        expected_time = datetime(2023, 12, 19, 12, 0, 0, tzinfo=timezone.utc)
        assert result.time == expected_time

    def test_keeps_negative_depth(self):
        """Events above sea level have negative depth."""
        feature = {
            **SAMPLE_FEATURE,
            "geometry": {"coordinates": [-155.28, 19.41, -1.2]},
        }
        result = parse_earthquake(feature)

        assert result is not None
        assert result.depth_km == -1.2

    def test_defaults_missing_place(self):
        """Null place becomes a placeholder label."""
        feature = {
            **SAMPLE_FEATURE,
            "properties": {**SAMPLE_FEATURE["properties"], "place": None},
        }
        result = parse_earthquake(feature)

        assert result is not None
        assert result.place == "Unknown location"

    def test_returns_none_for_missing_magnitude(self):
        """Should return None if magnitude is missing."""
        feature = {
            "id": "test",
            "properties": {"place": "Test", "time": 1703001600000},
            "geometry": {"coordinates": [0, 0, 0]},
        }
        assert parse_earthquake(feature) is None

    def test_returns_none_for_missing_depth(self):
        """Should return None if only lon/lat are present."""
        feature = {
            "id": "test",
            "properties": {"mag": 3.0, "time": 1703001600000},
            "geometry": {"coordinates": [0, 0]},
        }
        assert parse_earthquake(feature) is None

    def test_returns_none_for_null_depth(self):
        """Should return None if depth is null."""
        feature = {
            "id": "test",
            "properties": {"mag": 3.0, "time": 1703001600000},
            "geometry": {"coordinates": [0, 0, None]},
        }
        assert parse_earthquake(feature) is None

    def test_returns_none_for_missing_time(self):
        """Should return None if time is missing."""
        feature = {
            "id": "test",
            "properties": {"mag": 3.0},
            "geometry": {"coordinates": [0, 0, 0]},
        }
        assert parse_earthquake(feature) is None

    def test_returns_none_for_null_geometry(self):
        """Should return None if geometry is null."""
        feature = {
            "id": "test",
            "properties": {"mag": 3.0, "time": 1703001600000},
            "geometry": None,
        }
        assert parse_earthquake(feature) is None

    def test_returns_none_for_non_numeric_magnitude(self):
        """Should return None if magnitude is not a number."""
        feature = {
            **SAMPLE_FEATURE,
            "properties": {**SAMPLE_FEATURE["properties"], "mag": "strong"},
        }
        assert parse_earthquake(feature) is None

    def test_returns_none_for_out_of_range_time(self):
        """Should return None if time is beyond the datetime range."""
        feature = {
            **SAMPLE_FEATURE,
            "properties": {**SAMPLE_FEATURE["properties"], "time": 10**22},
        }
        assert parse_earthquake(feature) is None


class TestParseEarthquakes:
    """Tests for parse_earthquakes() pure function."""

    def test_parses_geojson_response(self):
        """Should parse full GeoJSON response."""
        result = parse_earthquakes(SAMPLE_GEOJSON)

        assert len(result) == 1
        assert result[0].id == "nc75095866"

    def test_filters_invalid_features(self):
        """Should skip invalid features."""
        geojson = {
            "features": [
                SAMPLE_FEATURE,
                {"properties": {}, "geometry": {}},  # Invalid
            ]
        }
        result = parse_earthquakes(geojson)
        assert len(result) == 1

    def test_skips_out_of_range_time(self):
        """A feature with an unrepresentable time does not drop the rest."""
        bad_feature = {
            **SAMPLE_FEATURE,
            "id": "far-future",
            "properties": {**SAMPLE_FEATURE["properties"], "time": 10**22},
        }
        result = parse_earthquakes({"features": [SAMPLE_FEATURE, bad_feature]})

        assert [e.id for e in result] == ["nc75095866"]

    def test_sorts_by_time_newest_first(self):
        """Should sort earthquakes by time, newest first."""
        older_feature = {
            **SAMPLE_FEATURE,
            "id": "older",
            "properties": {
                **SAMPLE_FEATURE["properties"],
                "time": 1702915200000,  # 1 day earlier
            },
        }
        geojson = {"features": [older_feature, SAMPLE_FEATURE]}

        result = parse_earthquakes(geojson)

        assert len(result) == 2
        assert result[0].id == "nc75095866"  # Newer first
        assert result[1].id == "older"

    def test_handles_empty_features(self):
        """Should return empty list for no features."""
        assert parse_earthquakes({"features": []}) == []

    def test_handles_missing_features(self):
        """Should return empty list if features key missing."""
        assert parse_earthquakes({}) == []


class TestFilterByMagnitude:
    """Tests for filter_by_magnitude() pure function."""

    @pytest.fixture
    def earthquakes(self):
        """Create test earthquakes with various magnitudes."""
        base = parse_earthquake(SAMPLE_FEATURE)
        assert base is not None

        return [
            Earthquake(**{**base.__dict__, "id": "m2", "magnitude": 2.0}),
            Earthquake(**{**base.__dict__, "id": "m4", "magnitude": 4.0}),
            Earthquake(**{**base.__dict__, "id": "m6", "magnitude": 6.0}),
        ]

    def test_filters_by_min_magnitude(self, earthquakes):
        """Should filter out earthquakes below minimum."""
        result = filter_by_magnitude(earthquakes, min_magnitude=4.0)

        assert len(result) == 2
        assert all(e.magnitude >= 4.0 for e in result)

    def test_min_magnitude_is_inclusive(self, earthquakes):
        """Events exactly at the minimum are kept."""
        result = filter_by_magnitude(earthquakes, min_magnitude=6.0)

        assert [e.id for e in result] == ["m6"]

    def test_no_filter_returns_all(self, earthquakes):
        """Should return all if no filters specified."""
        assert len(filter_by_magnitude(earthquakes)) == 3


class TestEarthquakeModel:
    """Tests for Earthquake dataclass."""

    def test_is_immutable(self):
        """Earthquake should be immutable (frozen)."""
        eq = parse_earthquake(SAMPLE_FEATURE)
        assert eq is not None

        with pytest.raises(Exception):  # FrozenInstanceError
            eq.magnitude = 5.0  # type: ignore

    def test_coordinates_property(self):
        """Should return (lat, lon) tuple."""
        eq = parse_earthquake(SAMPLE_FEATURE)
        assert eq is not None

        assert eq.coordinates == (37.7749, -122.4194)
