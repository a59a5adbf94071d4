"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

import math
from dataclasses import dataclass, field

from src.core.feed import (
    DEFAULT_FEED_LEVEL,
    DEFAULT_FEED_PERIOD,
    FEED_LEVELS,
    FEED_PERIODS,
)
from src.core.formatter import LEGEND_POSITIONS


@dataclass(frozen=True)
class TileLayerConfig:
    """A base map tile layer.

    Attributes:
        name: Name shown in the layer control
        url: Tile URL template ({z}/{x}/{y}, optional {s})
        attribution: Attribution HTML required by the tile provider
        tile_size: Tile size in pixels
        zoom_offset: Zoom offset applied to tile requests
        max_zoom: Maximum zoom level (None for the provider default)
    """
    name: str
    url: str
    attribution: str
    tile_size: int = 256
    zoom_offset: int = 0
    max_zoom: int | None = None


SATELLITE_LAYER = TileLayerConfig(
    name="satellite map",
    url="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
    attribution=(
        "Tiles &copy; Esri &mdash; Source: Esri, i-cubed, USDA, USGS, AEX, GeoEye, "
        "Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the GIS User Community"
    ),
    tile_size=512,
    zoom_offset=-1,
)

TOPO_LAYER = TileLayerConfig(
    name="topo Map",
    url="https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png",
    attribution=(
        'Map data: &copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
        'contributors, <a href="http://viewfinderpanoramas.org">SRTM</a> | Map style: &copy; '
        '<a href="https://opentopomap.org">OpenTopoMap</a> '
        '(<a href="https://creativecommons.org/licenses/by-sa/3.0/">CC-BY-SA</a>)'
    ),
    tile_size=512,
    zoom_offset=-1,
)


def _default_base_layers() -> list[TileLayerConfig]:
    return [SATELLITE_LAYER, TOPO_LAYER]


@dataclass
class MapConfig:
    """Interactive map configuration.

    Attributes:
        center_latitude: Initial map center latitude
        center_longitude: Initial map center longitude
        zoom_start: Initial zoom level (0-18)
        base_layers: Selectable base tile layers
        default_base_layer: Name of the base layer shown on load
        overlay_name: Name of the earthquake overlay in the layer control
        legend_position: Map corner for the depth legend
        collapsed_layer_control: Whether the layer control starts collapsed
    """
    center_latitude: float = 37.0902
    center_longitude: float = -97.7129
    zoom_start: int = 4
    base_layers: list[TileLayerConfig] = field(default_factory=_default_base_layers)
    default_base_layer: str = "satellite map"
    overlay_name: str = "Earthquakes"
    legend_position: str = "bottomright"
    collapsed_layer_control: bool = False

    @property
    def center(self) -> tuple[float, float]:
        """Return (latitude, longitude) of the map center."""
        return (self.center_latitude, self.center_longitude)


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feed_level: USGS summary feed magnitude level
        feed_period: USGS summary feed time window
        feed_url: Explicit feed URL (overrides level/period)
        min_magnitude: Drop earthquakes below this magnitude (None keeps all)
        request_timeout_seconds: HTTP timeout for the feed request
        map: Map rendering configuration
        output_path: Where the CLI writes the HTML map
    """
    feed_level: str = DEFAULT_FEED_LEVEL
    feed_period: str = DEFAULT_FEED_PERIOD
    feed_url: str | None = None
    min_magnitude: float | None = None
    request_timeout_seconds: int = 30
    map: MapConfig = field(default_factory=MapConfig)
    output_path: str = "earthquake_map.html"


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_base_layers(map_config: MapConfig) -> list[ValidationError]:
    """Validate base tile layers.

    Pure function. Missing or duplicate layers are errors; a default layer
    that matches no configured layer is a warning (the first layer is shown).
    """
    errors = []

    if not map_config.base_layers:
        errors.append(ValidationError(
            field="map.base_layers",
            message="At least one base layer is required",
        ))
        return errors

    seen: set[str] = set()
    for i, layer in enumerate(map_config.base_layers):
        if layer.name in seen:
            errors.append(ValidationError(
                field=f"map.base_layers[{i}].name",
                message=f"Duplicate base layer name '{layer.name}'",
            ))
        seen.add(layer.name)

        if not layer.url or layer.url.startswith("${"):
            errors.append(ValidationError(
                field=f"map.base_layers[{i}].url",
                message="Tile URL not resolved (still contains placeholder)",
                severity="warning",
            ))

    if map_config.default_base_layer not in seen:
        errors.append(ValidationError(
            field="map.default_base_layer",
            message=(
                f"Base layer '{map_config.default_base_layer}' not found, "
                f"'{map_config.base_layers[0].name}' will be shown"
            ),
            severity="warning",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    # Feed selection only matters when no explicit URL is given
    if config.feed_url is None:
        if config.feed_level not in FEED_LEVELS:
            errors.append(ValidationError(
                field="feed_level",
                message=f"Unknown feed level '{config.feed_level}'",
            ))
        if config.feed_period not in FEED_PERIODS:
            errors.append(ValidationError(
                field="feed_period",
                message=f"Unknown feed period '{config.feed_period}'",
            ))

    if config.min_magnitude is not None and not math.isfinite(config.min_magnitude):
        errors.append(ValidationError(
            field="min_magnitude",
            message=f"Minimum magnitude must be a finite number, got {config.min_magnitude}",
        ))
    elif config.min_magnitude is not None and config.min_magnitude < 0:
        errors.append(ValidationError(
            field="min_magnitude",
            message=f"Negative minimum magnitude {config.min_magnitude} keeps every event",
            severity="warning",
        ))

    if config.request_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="request_timeout_seconds",
            message=f"Timeout must be positive, got {config.request_timeout_seconds}",
        ))

    map_config = config.map

    errors.extend(validate_coordinates(
        map_config.center_latitude,
        map_config.center_longitude,
        "map.center",
    ))

    if not 0 <= map_config.zoom_start <= 18:
        errors.append(ValidationError(
            field="map.zoom_start",
            message=f"Zoom {map_config.zoom_start} out of range [0, 18]",
        ))

    if map_config.legend_position not in LEGEND_POSITIONS:
        errors.append(ValidationError(
            field="map.legend_position",
            message=(
                f"Unknown legend position '{map_config.legend_position}', "
                f"expected one of {', '.join(LEGEND_POSITIONS)}"
            ),
        ))

    errors.extend(validate_base_layers(map_config))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
