#!/usr/bin/env python
"""CLI for looking up the weather at a place."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator, model_validator

from yweather_getter.config import create_from_config, get_default_config_path, load_config
from yweather_getter.data import (
    GeoPoint,
    GPSQuery,
    LatLonQuery,
    LocationQuery,
    PlaceNameQuery,
    Unit,
    WeatherReport,
)
from yweather_getter.location import FixedLocationProvider

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    place: str | None = None
    lat: float | None = None
    lon: float | None = None
    gps: bool = False
    config: Path
    unit: Unit | None = None
    icons: bool = False
    debug: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @model_validator(mode="after")
    def location_must_be_given(self) -> "CLIArgs":
        if (self.lat is None) != (self.lon is None):
            raise ValueError("--lat and --lon must be given together")
        if self.place is None and self.lat is None:
            raise ValueError("Give a place name or --lat/--lon")
        return self


def build_query(args: CLIArgs) -> LocationQuery:
    if args.gps:
        return GPSQuery()
    if args.lat is not None and args.lon is not None:
        return LatLonQuery(lat=str(args.lat), lon=str(args.lon))
    return PlaceNameQuery(text=args.place or "")


def log_report(report: WeatherReport) -> None:
    condition = report.condition
    logger.info(f"\n{report.title}")
    logger.info(
        f"{report.location.city}, {report.location.region}, {report.location.country}"
        f" ({condition.latitude}, {condition.longitude})"
    )
    logger.info(f"Now: {condition.text}, {condition.temperature}° ({condition.date})")
    logger.info(
        f"Wind: {report.wind.speed} from {report.wind.direction}, chill {report.wind.chill}"
    )
    logger.info(
        f"Humidity: {report.atmosphere.humidity}%  Pressure: {report.atmosphere.pressure}"
        f"  Visibility: {report.atmosphere.visibility}"
    )
    logger.info(f"Sunrise: {report.astronomy.sunrise}  Sunset: {report.astronomy.sunset}")
    logger.info("\n--- Forecast ---")
    for day in report.forecast:
        logger.info(f"{day.day} {day.date}: {day.text}, {day.low}° - {day.high}°")


async def run(args: CLIArgs) -> bool:
    """Execute one weather query with the given configuration.

    Args:
        args: Validated CLI arguments.

    Returns:
        True if a report was produced.
    """
    overrides: dict[str, object] = {}
    if args.unit is not None:
        overrides["unit"] = args.unit
    if args.icons:
        overrides["download_icons"] = True
    if args.debug:
        overrides["debug"] = True
    config = load_config(args.config, **overrides)

    location_provider = None
    if args.gps and args.lat is not None and args.lon is not None:
        location_provider = FixedLocationProvider(GeoPoint(latitude=args.lat, longitude=args.lon))

    pipeline = create_from_config(config, location_provider=location_provider)
    query = build_query(args)
    logger.info(f"Looking up weather for: {query}")

    result = await pipeline.run(query)
    if result.report is None:
        logger.error(f"No weather report: {result.status}")
        if result.error is not None:
            logger.error(f"Cause: {result.error}")
        return False

    log_report(result.report)
    return True


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Look up the weather at a place.")
    parser.add_argument(
        "place",
        nargs="?",
        help='Place name, e.g. "Tokyo, Japan"',
    )
    parser.add_argument("--lat", type=float, help="Latitude in decimal degrees")
    parser.add_argument("--lon", type=float, help="Longitude in decimal degrees")
    parser.add_argument(
        "--gps",
        action="store_true",
        default=False,
        help="Treat --lat/--lon as a device location fix",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument("--unit", choices=[u.value for u in Unit], help="Temperature unit")
    parser.add_argument(
        "--icons",
        action="store_true",
        default=False,
        help="Download condition icons",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            place=ns.place,
            lat=ns.lat,
            lon=ns.lon,
            gps=ns.gps,
            config=config_path,
            unit=ns.unit,
            icons=ns.icons,
            debug=ns.debug,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        ok = asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
