from __future__ import annotations

from datetime import timedelta

import pytest
import requests
from django.test import Client

from weatherservice.api import views
from weatherservice.api.views import format_duration
from weatherservice.core.services.weather_service import MultiProviderWeatherService


OPENWEATHER_URL = "http://openweather.test/data/2.5/weather"
WUNDERGROUND_URL = "http://wunderground.test/api"


def _mock_upstreams(requests_mock, city: str, *, kelvin: float = 290.0, celsius: float = 16.85) -> None:
    requests_mock.get(OPENWEATHER_URL, json={"main": {"temp": kelvin}})
    requests_mock.get(
        f"{WUNDERGROUND_URL}/wu-key/conditions/q/{city}.json",
        json={"current_observation": {"temp_c": celsius}},
    )


def test_weather_endpoint_returns_payload(requests_mock, api_keys) -> None:
    _mock_upstreams(requests_mock, "Boston")
    client = Client()

    response = client.get("/weather/Boston")

    assert response.status_code == 200
    assert response["Content-Type"] == "application/json; charset=utf-8"
    payload = response.json()
    assert payload["city"] == "Boston"
    assert isinstance(payload["temp"], float)
    assert payload["temp"] == pytest.approx(290.0)
    assert isinstance(payload["took"], str)


def test_weather_endpoint_sends_credentials_upstream(requests_mock, api_keys) -> None:
    _mock_upstreams(requests_mock, "Boston")

    Client().get("/weather/Boston")

    urls = sorted(request.url for request in requests_mock.request_history)
    assert urls == [
        f"{OPENWEATHER_URL}?APPID=ow-key&q=Boston",
        f"{WUNDERGROUND_URL}/wu-key/conditions/q/Boston.json",
    ]


def test_weather_endpoint_averages_providers(requests_mock, api_keys) -> None:
    _mock_upstreams(requests_mock, "Madrid", kelvin=300.0, celsius=6.85)

    response = Client().get("/weather/Madrid")

    assert response.status_code == 200
    assert response.json()["temp"] == pytest.approx(290.0)


def test_weather_endpoint_reports_provider_failure(requests_mock, api_keys) -> None:
    requests_mock.get(OPENWEATHER_URL, json={"main": {"temp": 290.0}})
    requests_mock.get(
        f"{WUNDERGROUND_URL}/wu-key/conditions/q/Boston.json",
        exc=requests.exceptions.ConnectionError("connection refused"),
    )

    response = Client().get("/weather/Boston")

    assert response.status_code == 500
    assert response["Content-Type"].startswith("text/plain")
    assert response.content.decode() == "connection refused\n"


def test_weather_endpoint_forwards_empty_city(requests_mock, api_keys) -> None:
    requests_mock.get(OPENWEATHER_URL, status_code=404, json={"cod": "404", "message": "city not found"})
    requests_mock.get(f"{WUNDERGROUND_URL}/wu-key/conditions/q/.json", status_code=404, text="not found")

    response = Client().get("/weather/")

    assert response.status_code == 500
    assert "404" in response.content.decode()
    assert requests_mock.request_history
    for request in requests_mock.request_history:
        assert request.url.endswith("&q=") or request.url.endswith("/q/.json")


def test_hello_endpoint() -> None:
    response = Client().get("/hello")

    assert response.status_code == 200
    assert response.content == b"Hello World!"
    assert response["Content-Type"].startswith("text/plain")


def test_endpoints_ignore_client_accept_header(requests_mock, api_keys) -> None:
    _mock_upstreams(requests_mock, "Boston")
    client = Client()

    hello = client.get("/hello", HTTP_ACCEPT="text/plain")
    weather = client.get("/weather/Boston", HTTP_ACCEPT="text/plain")

    assert hello.status_code == 200
    assert hello.content == b"Hello World!"
    assert weather.status_code == 200
    assert weather["Content-Type"] == "application/json; charset=utf-8"
    assert weather.json()["temp"] == pytest.approx(290.0)
    assert requests_mock.call_count == 2


def test_weather_endpoint_forwards_city_with_newline(monkeypatch) -> None:
    seen = []

    class _RecordingProvider:
        name = "recording"

        def temperature(self, city: str) -> float:
            seen.append(city)
            return 290.0

    monkeypatch.setattr(views, "get_weather_service", lambda: MultiProviderWeatherService([_RecordingProvider()]))

    response = Client().get("/weather/New%0AYork")

    assert response.status_code == 200
    assert response.json()["city"] == "New\nYork"
    assert seen == ["New\nYork"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(0), "0s"),
        (timedelta(microseconds=12), "12µs"),
        (timedelta(microseconds=12_500), "12.5ms"),
        (timedelta(milliseconds=312, microseconds=250), "312.25ms"),
        (timedelta(seconds=1, milliseconds=500), "1.5s"),
        (timedelta(minutes=1, seconds=2, milliseconds=500), "1m2.5s"),
        (timedelta(hours=1), "1h0m0s"),
    ],
)
def test_format_duration(value: timedelta, expected: str) -> None:
    assert format_duration(value) == expected
