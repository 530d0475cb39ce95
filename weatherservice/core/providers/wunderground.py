"""Weather Underground temperature provider."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from weatherservice.core.abstractions import TemperatureProvider, celsius_to_kelvin


logger = logging.getLogger(__name__)


class WeatherUndergroundProvider(TemperatureProvider):
    """Integration with the Weather Underground conditions endpoint."""

    name = "wunderground"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "http://api.wunderground.com/api",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def temperature(self, city: str) -> float:  # noqa: D401
        """Return the current temperature reported by Weather Underground."""
        url = f"{self.base_url}/{self.api_key}/conditions/q/{city}.json"
        with self.session.get(url) as response:
            response.raise_for_status()
            data = response.json()

        kelvin = celsius_to_kelvin(float(data["current_observation"]["temp_c"]))
        logger.info("%s: %s, %.2f", self.name, city, kelvin)
        return kelvin
