"""USGS Feed Client - Imperative Shell.

This module handles HTTP communication with the USGS real-time
earthquake feeds. All I/O is contained here; parsing is in the core module.
"""

import logging
from typing import Any

import requests

from src.core.feed import USGS_FEED_BASE


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 30


class USGSClient:
    """Client for fetching earthquake GeoJSON from the USGS feeds.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = USGS_FEED_BASE,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: USGS summary feed base URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    def fetch_feed(self, url: str) -> dict[str, Any]:
        """Fetch a GeoJSON FeatureCollection.

        This method performs HTTP I/O.

        Args:
            url: Full feed URL

        Returns:
            Raw GeoJSON response

        Raises:
            requests.RequestException: If the request fails
            ValueError: If the response is not a GeoJSON FeatureCollection
        """
        logger.info("Fetching earthquake feed %s", url)

        response = requests.get(
            url,
            headers={"Accept": "application/geo+json, application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict) or not isinstance(data.get("features"), list):
            raise ValueError(
                f"Feed response is not a GeoJSON FeatureCollection: {url}"
            )

        count = (data.get("metadata") or {}).get("count", len(data["features"]))

        logger.info(
            "Fetched %d earthquakes from USGS",
            count,
        )

        return data
