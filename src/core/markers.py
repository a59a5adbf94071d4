"""Visual-attribute mapping - Pure functions.

This module turns earthquake data into map marker attributes: the circle
radius comes from the magnitude and the fill color from the depth.
The actual drawing (folium/Leaflet) is handled by the shell layer.
"""

from dataclasses import dataclass

from src.core.earthquake import Earthquake
from src.core.formatter import format_popup_html


# Meters of circle radius per unit of magnitude
MAGNITUDE_RADIUS_SCALE = 25000

# Depth thresholds in km, deepest first. The first threshold the depth
# reaches wins; anything shallower than the last one gets SHALLOW_COLOR.
DEPTH_COLOR_SCALE: tuple[tuple[float, str], ...] = (
    (90, "#800026"),
    (70, "#BD0026"),
    (50, "#E31A1C"),
    (30, "#FC4E2A"),
    (10, "#FD8D3C"),
)
SHALLOW_COLOR = "#FFEDA0"

# Lower bound of each legend band
LEGEND_DEPTHS = (-10, 10, 30, 50, 70, 90)


@dataclass(frozen=True)
class MarkerStyle:
    """Immutable rendering attributes for one earthquake circle.

    Attributes:
        radius: Circle radius in meters
        fill_color: Hex fill color
        fill_opacity: Fill opacity (0-1)
        stroke: Whether to draw the outline
        stroke_color: Outline color
        stroke_weight: Outline width in pixels
    """
    radius: float
    fill_color: str
    fill_opacity: float = 0.5
    stroke: bool = True
    stroke_color: str = "black"
    stroke_weight: float = 0.25


@dataclass(frozen=True)
class Marker:
    """A fully described map marker for one earthquake.

    Attributes:
        earthquake_id: ID of the source event
        position: (latitude, longitude) of the epicenter
        style: Rendering attributes
        popup_html: HTML shown when the marker is clicked
    """
    earthquake_id: str
    position: tuple[float, float]
    style: MarkerStyle
    popup_html: str


@dataclass(frozen=True)
class LegendEntry:
    """One row of the depth legend."""
    label: str
    color: str


def marker_size(magnitude: float) -> float:
    """Get the circle radius in meters for a magnitude.

    Pure function. No clamping: zero or negative magnitudes give a zero or
    negative radius.
    """
    return magnitude * MAGNITUDE_RADIUS_SCALE


def color_for_depth(depth: float) -> str:
    """Get the hex fill color for an earthquake depth in km.

    Pure function. Defined for every depth; boundary values take the
    deeper band's color.

    Args:
        depth: Depth in kilometers

    Returns:
        Hex color string (e.g., "#FC4E2A")
    """
    for threshold, color in DEPTH_COLOR_SCALE:
        if depth >= threshold:
            return color
    return SHALLOW_COLOR


def create_marker_style(magnitude: float, depth: float) -> MarkerStyle:
    """Create marker style from magnitude and depth.

    Pure function.
    """
    return MarkerStyle(
        radius=marker_size(magnitude),
        fill_color=color_for_depth(depth),
    )


def create_marker(earthquake: Earthquake) -> Marker:
    """Create the map marker for an earthquake.

    Pure function.

    Args:
        earthquake: Parsed earthquake

    Returns:
        Marker with position, style and popup set
    """
    return Marker(
        earthquake_id=earthquake.id,
        position=earthquake.coordinates,
        style=create_marker_style(earthquake.magnitude, earthquake.depth_km),
        popup_html=format_popup_html(earthquake),
    )


def create_markers(earthquakes: list[Earthquake]) -> list[Marker]:
    """Create markers for a list of earthquakes, preserving order."""
    return [create_marker(e) for e in earthquakes]


def get_legend_entries(depths: tuple[float, ...] = LEGEND_DEPTHS) -> list[LegendEntry]:
    """Build depth legend rows.

    Pure function. Each band is labelled "low - high"; the last band is
    open-ended ("90 +"). The swatch color is sampled just inside the band.

    Args:
        depths: Ascending lower bounds of the legend bands

    Returns:
        One LegendEntry per band
    """
    entries = []
    for i, depth in enumerate(depths):
        if i + 1 < len(depths):
            label = f"{depth} - {depths[i + 1]}"
        else:
            label = f"{depth} +"
        entries.append(LegendEntry(label=label, color=color_for_depth(depth + 1)))
    return entries
