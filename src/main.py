"""Entry Points - Cloud Function and command line.

This module provides the HTTP entry point for Google Cloud Functions and a
command line for writing the map to a file. Both are thin wrappers that
load configuration and invoke the orchestrator.
"""

import argparse
import dataclasses
import logging
import math
import os
import sys
from typing import Any

import functions_framework
from flask import Request

from src.core.config import Config, validate_config
from src.core.feed import FEED_LEVELS, FEED_PERIODS
from src.orchestrator import Orchestrator
from src.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


HTML_HEADERS = {"Content-Type": "text/html; charset=utf-8"}


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif any(os.environ.get(v) for v in ("FEED_URL", "FEED_LEVEL", "FEED_PERIOD")):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def apply_overrides(
    config: Config,
    level: str | None = None,
    period: str | None = None,
    min_magnitude: float | None = None,
    output_path: str | None = None,
) -> Config:
    """Return a copy of config with request or command line overrides.

    Choosing a level or period selects a summary feed, so an explicit
    feed URL from the configuration is dropped.
    """
    changes: dict[str, Any] = {}

    if level is not None or period is not None:
        changes["feed_url"] = None
    if level is not None:
        changes["feed_level"] = level
    if period is not None:
        changes["feed_period"] = period
    if min_magnitude is not None:
        changes["min_magnitude"] = min_magnitude
    if output_path is not None:
        changes["output_path"] = output_path

    return dataclasses.replace(config, **changes)


def _validation_messages(config: Config) -> list[str] | None:
    """Log validation problems and return error messages if invalid."""
    validation = validate_config(config)

    for warning in validation.warnings:
        logger.warning("Config warning: %s: %s", warning.field, warning.message)

    if validation.valid:
        return None

    return [f"{e.field}: {e.message}" for e in validation.critical_errors]


@functions_framework.http
def earthquake_map(request: Request) -> tuple[Any, int] | tuple[Any, int, dict[str, str]]:
    """HTTP Cloud Function entry point.

    Renders the earthquake map for the configured feed and returns it as
    an HTML page.

    Query parameters (all optional):
        level: USGS feed level (significant, 4.5, 2.5, 1.0, all)
        period: USGS feed period (hour, day, week, month)
        min_magnitude: Drop earthquakes below this magnitude

    Args:
        request: Flask request object

    Returns:
        Tuple of (body, HTTP status code[, headers])
    """
    logger.info("Rendering earthquake map")

    args = request.args

    try:
        raw_min = args.get("min_magnitude")
        try:
            min_magnitude = float(raw_min) if raw_min else None
            if min_magnitude is not None and not math.isfinite(min_magnitude):
                raise ValueError(raw_min)
        except ValueError:
            return {
                "status": "error",
                "message": f"Invalid min_magnitude: {raw_min}",
            }, 400

        config = apply_overrides(
            _get_config(),
            level=args.get("level") or None,
            period=args.get("period") or None,
            min_magnitude=min_magnitude,
        )

        errors = _validation_messages(config)
        if errors:
            return {
                "status": "error",
                "message": "Invalid configuration",
                "errors": errors,
            }, 400

        orchestrator = Orchestrator(config)
        result = orchestrator.process()

        if not result.success:
            for error in result.errors:
                logger.error("Error: %s", error)
            return {
                "status": "error",
                "message": "Earthquake feed unavailable",
                "errors": result.errors,
            }, 502

        logger.info("Completed: %s", result.summary)

        return result.html, 200, HTML_HEADERS

    except Exception as e:
        logger.exception("Unexpected error rendering earthquake map")
        return {
            "status": "error",
            "message": str(e),
        }, 500


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render the USGS earthquake feed as an interactive HTML map",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML config file (default: CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--level",
        choices=FEED_LEVELS,
        help="USGS summary feed magnitude level",
    )
    parser.add_argument(
        "--period",
        choices=FEED_PERIODS,
        help="USGS summary feed time window",
    )
    parser.add_argument(
        "--min-magnitude",
        type=float,
        help="Drop earthquakes below this magnitude",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output HTML file (default from config: earthquake_map.html)",
    )
    return parser


def cli(argv: list[str] | None = None) -> int:
    """Command line entry point.

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    args = _build_parser().parse_args(argv)

    config = load_config(args.config) if args.config else _get_config()
    config = apply_overrides(
        config,
        level=args.level,
        period=args.period,
        min_magnitude=args.min_magnitude,
        output_path=args.output,
    )

    errors = _validation_messages(config)
    if errors:
        for error in errors:
            logger.error("Invalid configuration: %s", error)
        return 1

    result = Orchestrator(config).process(output_path=config.output_path)

    if not result.success:
        for error in result.errors:
            logger.error("Error: %s", error)
        return 1

    print(f"{result.summary}. Map written to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(cli())
