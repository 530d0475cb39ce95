"""OpenWeather temperature provider."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from weatherservice.core.abstractions import TemperatureProvider


logger = logging.getLogger(__name__)


class OpenWeatherProvider(TemperatureProvider):
    """Integration with the OpenWeather current weather endpoint.

    OpenWeather reports ``main.temp`` in Kelvin unless asked for another unit
    system, so the value is returned as is.
    """

    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "http://api.openweathermap.org/data/2.5/weather",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.session = session or requests.Session()

    def temperature(self, city: str) -> float:  # noqa: D401
        """Return the current temperature reported by OpenWeather."""
        # city goes out unescaped
        url = f"{self.base_url}?APPID={self.api_key}&q={city}"
        with self.session.get(url) as response:
            response.raise_for_status()
            data = response.json()

        kelvin = float(data["main"]["temp"])
        logger.info("%s: %s, %.2f", self.name, city, kelvin)
        return kelvin
