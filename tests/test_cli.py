"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import json
from io import StringIO
from typing import Any
from unittest.mock import patch

import pytest

from weather_lookup.cli import cmd_current, cmd_info, cmd_search, cmd_week, create_parser, main
from weather_lookup.datasources.geocoding import CityMatch
from weather_lookup.datasources.weather.transform import to_current_weather, to_forecast_list
from weather_lookup.exceptions import RateLimitError

PARIS = CityMatch(48.85, 2.35, "Paris", "FR", "France", "Ile-de-France")


def _args(**kwargs: Any) -> argparse.Namespace:
    defaults: dict[str, Any] = {"query": None, "lat": None, "lon": None, "debug": False}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "weather-lookup"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        args = create_parser().parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_search_command(self) -> None:
        """Search requires a query."""
        args = create_parser().parse_args(["search", "Paris"])
        assert args.command == "search"
        assert args.query == "Paris"

    def test_parser_current_by_coordinates(self) -> None:
        """Current accepts --lat/--lon without a query."""
        args = create_parser().parse_args(["current", "--lat", "48.85", "--lon", "2.35"])
        assert args.command == "current"
        assert args.query is None
        assert args.lat == 48.85
        assert args.lon == 2.35

    def test_parser_week_by_name(self) -> None:
        """Week accepts a city name."""
        args = create_parser().parse_args(["week", "Paris"])
        assert args.command == "week"
        assert args.query == "Paris"
        assert args.lat is None


class TestCmdSearch:
    """Tests for cmd_search function."""

    def test_prints_matches(self) -> None:
        """Each match is printed with its coordinates."""
        with (
            patch("weather_lookup.cli.search_cities", return_value=[PARIS]),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_search(_args(query="Paris"))
            output = mock_stdout.getvalue()
        assert exit_code == 0
        assert "Paris, Ile-de-France, France" in output
        assert "48.85 2.35" in output

    def test_no_match_returns_one(self) -> None:
        """No matches returns exit code 1."""
        with patch("weather_lookup.cli.search_cities", return_value=[]):
            assert cmd_search(_args(query="zzzz")) == 1


class TestCmdCurrent:
    """Tests for cmd_current function."""

    def test_by_coordinates_skips_search(self, payload: dict[str, Any]) -> None:
        """--lat/--lon bypasses geocoding."""
        data = (to_current_weather(payload), to_forecast_list(payload))
        with (
            patch("weather_lookup.cli.search_cities") as mock_search,
            patch("weather_lookup.cli.fetch_weather_data", return_value=data) as mock_fetch,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_current(_args(lat=48.85, lon=2.35))
            output = mock_stdout.getvalue()
        assert exit_code == 0
        mock_search.assert_not_called()
        mock_fetch.assert_called_once_with(48.85, 2.35)
        assert json.loads(output)["main"]["temp"] == 8

    def test_by_name_uses_first_match(self, payload: dict[str, Any]) -> None:
        """A city name resolves to the first match."""
        data = (to_current_weather(payload), to_forecast_list(payload))
        with (
            patch("weather_lookup.cli.search_cities", return_value=[PARIS]),
            patch("weather_lookup.cli.fetch_weather_data", return_value=data) as mock_fetch,
            patch("sys.stdout", new=StringIO()),
        ):
            assert cmd_current(_args(query="Paris")) == 0
        mock_fetch.assert_called_once_with(48.85, 2.35)

    def test_no_location_returns_one(self) -> None:
        """Neither a name nor coordinates is an error."""
        with patch("sys.stderr", new=StringIO()):
            assert cmd_current(_args()) == 1

    def test_upstream_error_returns_one(self) -> None:
        """Fetch errors are reported, not raised."""
        error = RateLimitError("Rate limit exceeded. Please try again later.", 429, "")
        with (
            patch("weather_lookup.cli.fetch_weather_data", side_effect=error),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_current(_args(lat=1.0, lon=2.0))
            output = mock_stderr.getvalue()
        assert exit_code == 1
        assert "Rate limit exceeded" in output


class TestCmdWeek:
    """Tests for cmd_week function."""

    def test_prints_daily_summaries(self, payload: dict[str, Any]) -> None:
        """Week prints one summary per forecast day."""
        data = (to_current_weather(payload), to_forecast_list(payload))
        with (
            patch("weather_lookup.cli.fetch_weather_data", return_value=data),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_week(_args(lat=48.85, lon=2.35))
            days = json.loads(mock_stdout.getvalue())
        assert exit_code == 0
        assert [d["date"] for d in days] == ["2026-02-04", "2026-02-05"]
        assert days[0]["tempMax"] == 10

    def test_unknown_city_returns_one(self) -> None:
        with (
            patch("weather_lookup.cli.search_cities", return_value=[]),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_week(_args(query="zzzz")) == 1


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        assert cmd_info(argparse.Namespace()) == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()
        assert "weather-lookup" in output
        assert "api.open-meteo.com" in output


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        assert main([]) == 0

    @pytest.mark.parametrize("command", ["search", "current", "week", "info"])
    def test_dispatches_command(self, command: str) -> None:
        """Each subcommand reaches its handler."""
        argv = {"search": ["search", "Paris"], "info": ["info"]}.get(command, [command, "Paris"])
        with patch(f"weather_lookup.cli.cmd_{command}", return_value=0) as mock_cmd:
            assert main(argv) == 0
            mock_cmd.assert_called_once()

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with patch("weather_lookup.cli.create_parser") as mock_parser:
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(
                command="unknown", debug=False
            )
            assert main([]) == 1
