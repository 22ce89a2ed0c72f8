"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from weather_lookup import __version__
from weather_lookup.analysis import aggregate_by_day, aggregation_input_for
from weather_lookup.config import get_settings
from weather_lookup.datasources.geocoding import search_cities
from weather_lookup.datasources.weather import fetch_weather_data
from weather_lookup.exceptions import WeatherLookupError

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="City weather lookup backed by Open-Meteo",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Search cities by name")
    search_parser.add_argument("query", help="City name (at least 2 characters)")

    for name, help_text in (
        ("current", "Show current weather"),
        ("week", "Show the daily forecast summary"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("query", nargs="?", default=None, help="City name")
        sub.add_argument("--lat", type=float, default=None, help="Latitude (with --lon)")
        sub.add_argument("--lon", type=float, default=None, help="Longitude (with --lat)")

    subparsers.add_parser("info", help="Show application info")

    return parser


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _resolve_coordinates(args: argparse.Namespace) -> tuple[float, float] | None:
    """Coordinates from --lat/--lon, or from the first search match."""
    if args.lat is not None and args.lon is not None:
        return args.lat, args.lon
    if not args.query:
        print("Error: give a city name or both --lat and --lon", file=sys.stderr)
        return None

    matches = search_cities(args.query)
    if not matches:
        print(f"No city found for {args.query!r}", file=sys.stderr)
        return None
    city = matches[0]
    logger.info("Using %s (%s, %s)", city.label, city.latitude, city.longitude)
    return city.latitude, city.longitude


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    matches = search_cities(args.query)
    if not matches:
        print(f"No city found for {args.query!r}", file=sys.stderr)
        return 1
    for city in matches:
        print(f"{city.label}  ({city.value})")
    return 0


def cmd_current(args: argparse.Namespace) -> int:
    """Handle the 'current' command."""
    coords = _resolve_coordinates(args)
    if coords is None:
        return 1
    try:
        current, _forecast = fetch_weather_data(*coords)
    except WeatherLookupError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _print_json(current.to_dict())
    return 0


def cmd_week(args: argparse.Namespace) -> int:
    """Handle the 'week' command."""
    coords = _resolve_coordinates(args)
    if coords is None:
        return 1
    try:
        _current, forecast = fetch_weather_data(*coords)
    except WeatherLookupError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _print_json([day.to_dict() for day in aggregate_by_day(aggregation_input_for(forecast))])
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Geocoding API: {settings.geocoding_api_url}")
    print(f"Weather API: {settings.weather_api_url}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    debug = args.debug or get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "search": cmd_search,
        "current": cmd_current,
        "week": cmd_week,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
