"""HTML formatting - Pure functions.

This module formats earthquake data into the HTML fragments shown on the
map: marker popups and the depth legend.
All functions are pure with no side effects.
"""

import html
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from src.core.earthquake import Earthquake

if TYPE_CHECKING:
    from src.core.markers import LegendEntry


# CSS offsets for each Leaflet control corner
LEGEND_POSITIONS: dict[str, str] = {
    "bottomright": "bottom: 30px; right: 10px;",
    "bottomleft": "bottom: 30px; left: 10px;",
    "topright": "top: 10px; right: 10px;",
    "topleft": "top: 10px; left: 10px;",
}

LEGEND_HEADER = "<h3> Earthquake <br> Depth </h3><hr>"


def format_event_time(time: datetime) -> str:
    """Format an event time for display.

    Pure function.

    Example: "Tue Dec 19 2023 12:00:00 UTC"
    """
    return time.astimezone(timezone.utc).strftime("%a %b %d %Y %H:%M:%S UTC")


def format_popup_html(earthquake: Earthquake) -> str:
    """Format the popup shown when a marker is clicked.

    Pure function. The place text comes from the feed and is escaped.

    Args:
        earthquake: Earthquake to describe

    Returns:
        HTML fragment with magnitude, location, date and depth
    """
    return (
        f"<h3> Magnitude: {earthquake.magnitude}"
        f"<br> Location: {html.escape(earthquake.place)}</h3><hr>"
        f"<p><b> Date: {format_event_time(earthquake.time)}"
        f"<br>Depth: {earthquake.depth_km}</b></p>"
    )


def format_legend_html(
    entries: list["LegendEntry"],
    position: str = "bottomright",
) -> str:
    """Format the depth legend as a fixed-position HTML box.

    Pure function.

    Args:
        entries: Legend rows (label and swatch color)
        position: Map corner, one of LEGEND_POSITIONS

    Returns:
        HTML fragment for the legend

    Raises:
        ValueError: If position is not a known corner
    """
    if position not in LEGEND_POSITIONS:
        raise ValueError(f"Unknown legend position: {position}")

    rows = "".join(
        f'<i style="background:{entry.color}; width: 18px; height: 18px; '
        f'float: left; margin-right: 8px; opacity: 0.7;"></i> {entry.label}<br>'
        for entry in entries
    )

    return (
        f'<div class="info legend" style="position: fixed; {LEGEND_POSITIONS[position]} '
        "z-index: 9999; background: white; padding: 6px 8px; "
        "border-radius: 5px; box-shadow: 0 0 15px rgba(0,0,0,0.2); "
        'line-height: 18px; color: #555;">'
        f"{LEGEND_HEADER}{rows}</div>"
    )


def format_earthquake_summary(earthquake: Earthquake) -> str:
    """Format a one-line summary of an earthquake.

    Pure function.

    Example: "M4.5 - 10km NE of San Francisco, CA (10.5 km deep)"
    """
    return (
        f"M{earthquake.magnitude:.1f} - {earthquake.place} "
        f"({earthquake.depth_km:.1f} km deep)"
    )


def format_batch_summary(earthquakes: list[Earthquake]) -> str:
    """Format a summary of multiple earthquakes.

    Pure function.
    """
    if not earthquakes:
        return "No earthquakes to display"

    count = len(earthquakes)
    max_mag = max(e.magnitude for e in earthquakes)
    max_depth = max(e.depth_km for e in earthquakes)

    return (
        f"{count} earthquake{'s' if count != 1 else ''}, "
        f"largest M{max_mag:.1f}, deepest {max_depth:.1f} km"
    )
