"""REST API views for temperature information."""
from __future__ import annotations

from datetime import timedelta
import logging
import os
import time

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherservice.core.abstractions import TemperatureReading
from weatherservice.core.providers.openweather import OpenWeatherProvider
from weatherservice.core.providers.wunderground import WeatherUndergroundProvider
from weatherservice.core.services.weather_service import MultiProviderWeatherService


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def get_weather_service() -> MultiProviderWeatherService:
    """Build a fresh service with credentials read from the environment."""
    providers = (
        OpenWeatherProvider(
            api_key=os.environ.get("OPENWEATHER_API_KEY", ""),
            base_url=settings.OPENWEATHER_URL,
        ),
        WeatherUndergroundProvider(
            api_key=os.environ.get("WEATHERUNDERGROUND_API_KEY", ""),
            base_url=settings.WEATHERUNDERGROUND_URL,
        ),
    )
    return MultiProviderWeatherService(providers)


def fetch_reading(city: str) -> TemperatureReading:
    """Query all providers for ``city`` and time the whole round trip."""
    service = get_weather_service()
    begin = time.perf_counter()
    temp = service.temperature(city)
    took = timedelta(seconds=time.perf_counter() - begin)
    return TemperatureReading(city=city, temp=temp, took=took)


def format_duration(value: timedelta) -> str:
    """Render a duration compactly, e.g. ``312.25ms`` or ``1m2.5s``."""
    nanos = round(value.total_seconds() * 1e9)
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)
    if nanos < 1_000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return f"{sign}{_trim(nanos, 1_000)}µs"
    if nanos < 1_000_000_000:
        return f"{sign}{_trim(nanos, 1_000_000)}ms"

    hours, rest = divmod(nanos, 3_600 * 1_000_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000_000)
    text = f"{_trim(rest, 1_000_000_000)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{text}"
    if minutes:
        return f"{sign}{minutes}m{text}"
    return f"{sign}{text}"


def _trim(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def serialize_reading(reading: TemperatureReading) -> dict:
    return {
        "city": reading.city,
        "temp": reading.temp,
        "took": format_duration(reading.took),
    }


class IgnoreClientContentNegotiation(BaseContentNegotiation):
    """Always answer with the first configured renderer, whatever the Accept header says."""

    def select_parser(self, request, parsers):
        return parsers[0]

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class HelloView(APIView):
    """Plain text liveness greeting."""

    permission_classes = [AllowAny]
    content_negotiation_class = IgnoreClientContentNegotiation

    def get(self, request, *args, **kwargs):  # noqa: D401
        return HttpResponse("Hello World!", content_type=TEXT_CONTENT_TYPE)


class WeatherView(APIView):
    """Average temperature across all upstream providers for a city."""

    permission_classes = [AllowAny]
    content_negotiation_class = IgnoreClientContentNegotiation

    def get(self, request, city: str = "", *args, **kwargs):  # noqa: D401
        """Return the averaged Kelvin temperature for ``city``."""
        try:
            reading = fetch_reading(city)
        except Exception as exc:  # noqa: BLE001 - any provider failure becomes a 500
            logger.warning("Temperature lookup for %r failed: %s", city, exc)
            return HttpResponse(
                f"{exc}\n",
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content_type=TEXT_CONTENT_TYPE,
            )

        return Response(serialize_reading(reading), status=status.HTTP_200_OK, content_type=JSON_CONTENT_TYPE)
