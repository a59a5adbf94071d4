"""Interactive Map Renderer - Imperative Shell.

This module draws markers onto a Leaflet map using folium and writes the
resulting HTML. Marker attributes and legend rows come from the core module.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import folium

from src.core.config import MapConfig, TileLayerConfig
from src.core.formatter import format_legend_html
from src.core.markers import Marker, get_legend_entries


logger = logging.getLogger(__name__)


# Maximum popup width in pixels
POPUP_MAX_WIDTH = 320


@dataclass
class MapRenderResult:
    """Result of writing a map to disk.

    Attributes:
        success: Whether the map was written successfully
        path: Output file path if successful
        marker_count: Number of markers drawn
        error: Error message if failed
    """
    success: bool
    path: str | None = None
    marker_count: int = 0
    error: str | None = None


class MapRenderer:
    """Renders earthquake markers as an interactive folium map.

    This is part of the imperative shell - folium builds the Leaflet
    document and writing it is file I/O.
    """

    def __init__(self, config: MapConfig | None = None) -> None:
        """Initialize map renderer.

        Args:
            config: Map configuration. Defaults to MapConfig().
        """
        self.config = config or MapConfig()

    def _default_layer_name(self) -> str:
        names = [layer.name for layer in self.config.base_layers]
        if self.config.default_base_layer in names:
            return self.config.default_base_layer
        return names[0] if names else ""

    def _tile_layer(self, layer: TileLayerConfig, show: bool) -> folium.TileLayer:
        """Create a folium base layer from configuration."""
        options = {
            "tile_size": layer.tile_size,
            "zoom_offset": layer.zoom_offset,
        }
        if layer.max_zoom is not None:
            options["max_zoom"] = layer.max_zoom

        return folium.TileLayer(
            tiles=layer.url,
            attr=layer.attribution,
            name=layer.name,
            overlay=False,
            control=True,
            show=show,
            **options,
        )

    def _circle(self, marker: Marker) -> folium.Circle:
        """Create a folium circle (radius in meters) for a marker."""
        style = marker.style
        return folium.Circle(
            location=list(marker.position),
            radius=style.radius,
            popup=folium.Popup(marker.popup_html, max_width=POPUP_MAX_WIDTH),
            fill=True,
            fill_color=style.fill_color,
            fill_opacity=style.fill_opacity,
            stroke=style.stroke,
            color=style.stroke_color,
            weight=style.stroke_weight,
        )

    def build_map(self, markers: list[Marker]) -> folium.Map:
        """Build the interactive map.

        Args:
            markers: Markers to draw in the earthquake overlay

        Returns:
            folium.Map with base layers, overlay, layer control and legend
        """
        config = self.config

        fmap = folium.Map(
            location=list(config.center),
            zoom_start=config.zoom_start,
            tiles=None,
        )

        default_layer = self._default_layer_name()
        for layer in config.base_layers:
            self._tile_layer(layer, show=layer.name == default_layer).add_to(fmap)

        overlay = folium.FeatureGroup(
            name=config.overlay_name,
            overlay=True,
            control=True,
            show=True,
        )
        for marker in markers:
            self._circle(marker).add_to(overlay)
        overlay.add_to(fmap)

        folium.LayerControl(collapsed=config.collapsed_layer_control).add_to(fmap)

        legend_html = format_legend_html(
            get_legend_entries(),
            position=config.legend_position,
        )
        fmap.get_root().html.add_child(folium.Element(legend_html))

        logger.info(
            "Built map with %d markers and %d base layers",
            len(markers),
            len(config.base_layers),
        )

        return fmap

    def render_html(self, markers: list[Marker]) -> str:
        """Render the map as a standalone HTML document."""
        return self.build_map(markers).get_root().render()

    def save(self, markers: list[Marker], path: str | Path) -> MapRenderResult:
        """Write the map to an HTML file.

        This method performs file I/O.

        Args:
            markers: Markers to draw
            path: Output file path

        Returns:
            MapRenderResult with the written path or error
        """
        output = Path(path)

        try:
            fmap = self.build_map(markers)
            if output.parent != Path(""):
                output.parent.mkdir(parents=True, exist_ok=True)
            fmap.save(str(output))
        except OSError as e:
            logger.error("Failed to write map to %s: %s", output, str(e))
            return MapRenderResult(
                success=False,
                marker_count=len(markers),
                error=str(e),
            )

        logger.info("Wrote map with %d markers to %s", len(markers), output)

        return MapRenderResult(
            success=True,
            path=str(output),
            marker_count=len(markers),
        )
