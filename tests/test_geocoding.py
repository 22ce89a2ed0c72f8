"""Tests for the geocoding city search."""

from __future__ import annotations

import logging
from unittest.mock import Mock, patch

import pytest
import requests

from weather_lookup.datasources.geocoding import CityMatch, search_cities


def _response(status: int = 200, json_data: object = None) -> Mock:
    resp = Mock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.json.return_value = json_data
    return resp


class TestCityMatch:
    """Test the CityMatch model."""

    def test_from_api_normalises_missing_fields(self) -> None:
        city = CityMatch.from_api({"latitude": 48.85, "longitude": 2.35, "name": "Paris"})
        assert city.country_code == ""
        assert city.country == ""
        assert city.admin1 == ""

    def test_label_full(self) -> None:
        city = CityMatch(45.52, -122.68, "Portland", "US", "United States", "Oregon")
        assert city.label == "Portland, Oregon, United States"

    def test_label_falls_back_to_country_code(self) -> None:
        city = CityMatch(45.52, -122.68, "Portland", country_code="US")
        assert city.label == "Portland, US"

    def test_label_name_only(self) -> None:
        assert CityMatch(0, 0, "Null Island").label == "Null Island"

    def test_value(self) -> None:
        assert CityMatch(48.85, 2.35, "Paris").value == "48.85 2.35"

    def test_to_dict(self) -> None:
        data = CityMatch(48.85, 2.35, "Paris", "FR", "France").to_dict()
        assert data == {
            "latitude": 48.85,
            "longitude": 2.35,
            "name": "Paris",
            "countryCode": "FR",
            "country": "France",
            "admin1": "",
        }


class TestSearchCities:
    """Test the search request and its fallbacks."""

    @pytest.mark.parametrize("query", ["a", " a ", "", "   ", None])
    @patch("weather_lookup.datasources.geocoding.search.session.get")
    def test_short_query_makes_no_request(self, mock_get: Mock, query: str | None) -> None:
        assert search_cities(query) == []
        mock_get.assert_not_called()

    @patch("weather_lookup.datasources.geocoding.search.session.get")
    def test_single_result(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(
            json_data={
                "results": [
                    {"latitude": 48.85, "longitude": 2.35, "name": "Paris", "country": "France"}
                ]
            }
        )

        (city,) = search_cities("par")

        assert city.latitude == 48.85
        assert city.longitude == 2.35
        assert city.name == "Paris"
        assert city.country == "France"
        assert city.admin1 == ""
        assert city.country_code == ""

    @patch("weather_lookup.datasources.geocoding.search.session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(json_data={})

        search_cities("  Portland  ")

        url = mock_get.call_args.args[0]
        params = mock_get.call_args.kwargs["params"]
        assert url == "https://geocoding-api.open-meteo.com/v1/search"
        assert params == {"name": "Portland", "count": 30, "language": "en", "format": "json"}

    @patch("weather_lookup.datasources.geocoding.search.session.get")
    def test_no_results_key(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(json_data={"generationtime_ms": 0.5})
        assert search_cities("zzzz") == []

    @patch("weather_lookup.datasources.geocoding.search.session.get")
    def test_http_error_degrades(self, mock_get: Mock, caplog: pytest.LogCaptureFixture) -> None:
        mock_get.return_value = _response(status=503)
        with caplog.at_level(logging.WARNING):
            assert search_cities("Paris") == []
        assert "503" in caplog.text

    @patch("weather_lookup.datasources.geocoding.search.session.get")
    def test_network_error_degrades(
        self, mock_get: Mock, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_get.side_effect = requests.ConnectionError("down")
        with caplog.at_level(logging.WARNING):
            assert search_cities("Paris") == []
        assert "down" in caplog.text

    @patch("weather_lookup.datasources.geocoding.search.session.get")
    def test_bad_json_degrades(self, mock_get: Mock) -> None:
        resp = _response()
        resp.json.side_effect = ValueError("not json")
        mock_get.return_value = resp
        assert search_cities("Paris") == []

    @patch("weather_lookup.datasources.geocoding.search.session.get")
    def test_malformed_entry_skipped(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(
            json_data={
                "results": [
                    {"name": "No coords"},
                    {"latitude": 1.0, "longitude": 2.0, "name": "Ok", "admin1": None},
                ]
            }
        )
        (city,) = search_cities("some")
        assert city.name == "Ok"
        assert city.admin1 == ""
