"""USGS summary feed addressing - Pure functions.

The USGS real-time summary feeds are published as one GeoJSON file per
(magnitude level, time period) pair, e.g. ``all_week.geojson``.
"""

# USGS real-time GeoJSON summary feed base URL
USGS_FEED_BASE = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

FEED_LEVELS = ("significant", "4.5", "2.5", "1.0", "all")
FEED_PERIODS = ("hour", "day", "week", "month")

DEFAULT_FEED_LEVEL = "all"
DEFAULT_FEED_PERIOD = "week"


def build_feed_url(
    level: str = DEFAULT_FEED_LEVEL,
    period: str = DEFAULT_FEED_PERIOD,
    base_url: str = USGS_FEED_BASE,
) -> str:
    """Build the URL of a USGS summary feed.

    Pure function.

    Args:
        level: Magnitude level, one of FEED_LEVELS
        period: Time window, one of FEED_PERIODS
        base_url: Feed base URL

    Returns:
        Full feed URL

    Raises:
        ValueError: If level or period is not a published feed
    """
    if level not in FEED_LEVELS:
        raise ValueError(
            f"Unknown feed level '{level}', expected one of {', '.join(FEED_LEVELS)}"
        )
    if period not in FEED_PERIODS:
        raise ValueError(
            f"Unknown feed period '{period}', expected one of {', '.join(FEED_PERIODS)}"
        )

    return f"{base_url.rstrip('/')}/{level}_{period}.geojson"
