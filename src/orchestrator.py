"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the I/O-performing shell components: fetch the feed, turn each
earthquake into a marker, and hand the markers to the map renderer.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import requests

from src.core.config import Config
from src.core.earthquake import Earthquake, filter_by_magnitude, parse_earthquakes
from src.core.feed import build_feed_url
from src.core.formatter import format_batch_summary, format_earthquake_summary
from src.core.markers import Marker, create_markers
from src.shell.map_renderer import MapRenderer
from src.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of a complete fetch-and-render cycle.

    Attributes:
        feed_url: Feed the earthquakes were fetched from
        earthquakes_fetched: Valid earthquakes parsed from the feed
        earthquakes_rendered: Earthquakes drawn after filtering
        markers: Markers handed to the renderer
        html: Rendered HTML document (when not written to a file)
        output_path: File the map was written to (when saved)
        errors: Any errors that occurred
    """
    feed_url: str
    earthquakes_fetched: int = 0
    earthquakes_rendered: int = 0
    markers: list[Marker] = field(default_factory=list)
    html: str | None = None
    output_path: str | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if no errors occurred."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the render result."""
        return (
            f"Fetched {self.earthquakes_fetched} earthquakes, "
            f"{self.earthquakes_rendered} rendered, "
            f"{len(self.errors)} errors"
        )


class Orchestrator:
    """Coordinates fetching and rendering of the earthquake map.

    This class wires together:
    - USGS client (fetches earthquake data)
    - Core functions (parsing, filtering, marker mapping)
    - Map renderer (draws the folium map)
    """

    def __init__(
        self,
        config: Config,
        usgs_client: USGSClient | None = None,
        renderer: MapRenderer | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            usgs_client: USGS client (created if not provided)
            renderer: Map renderer (created if not provided)
        """
        self.config = config
        self.usgs_client = usgs_client or USGSClient(
            timeout=config.request_timeout_seconds,
        )
        self.renderer = renderer or MapRenderer(config.map)

    @property
    def feed_url(self) -> str:
        """URL of the configured feed.

        Raises:
            ValueError: If the configured level or period is unknown
        """
        if self.config.feed_url:
            return self.config.feed_url
        return build_feed_url(
            self.config.feed_level,
            self.config.feed_period,
            self.usgs_client.base_url,
        )

    def _fetch_earthquakes(self, feed_url: str) -> list[Earthquake]:
        """Fetch and parse earthquakes from the feed.

        Returns:
            List of parsed earthquakes, newest first
        """
        geojson = self.usgs_client.fetch_feed(feed_url)

        # Pure core function
        return parse_earthquakes(geojson)

    def process(self, output_path: str | Path | None = None) -> RenderResult:
        """Run a complete fetch-and-render cycle.

        Args:
            output_path: Write the map here. If None, the HTML is returned
                in the result instead.

        Returns:
            RenderResult with statistics, markers and output
        """
        feed_url = self.feed_url
        result = RenderResult(feed_url=feed_url)

        # Step 1: Fetch earthquakes
        try:
            earthquakes = self._fetch_earthquakes(feed_url)
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to fetch earthquakes: %s", e)
            result.errors.append(f"Failed to fetch earthquakes: {e}")
            return result

        result.earthquakes_fetched = len(earthquakes)
        logger.info("Fetched %d earthquakes", len(earthquakes))

        # Step 2: Filter (pure core function)
        earthquakes = filter_by_magnitude(
            earthquakes,
            min_magnitude=self.config.min_magnitude,
        )
        result.earthquakes_rendered = len(earthquakes)

        for earthquake in earthquakes:
            logger.debug("Rendering %s", format_earthquake_summary(earthquake))

        # Step 3: Map to markers (pure core function)
        result.markers = create_markers(earthquakes)
        logger.info("Mapped %s", format_batch_summary(earthquakes))

        # Step 4: Render
        if output_path is None:
            result.html = self.renderer.render_html(result.markers)
        else:
            saved = self.renderer.save(result.markers, output_path)
            if saved.success:
                result.output_path = saved.path
            else:
                result.errors.append(f"Failed to write map: {saved.error}")

        logger.info("Completed: %s", result.summary)

        return result
