"""Core abstractions for the temperature domain."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol


KELVIN_OFFSET = 273.15


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + KELVIN_OFFSET


@dataclass(frozen=True, slots=True)
class TemperatureReading:
    """Aggregated temperature for a city, in Kelvin."""

    city: str
    temp: float
    took: timedelta


class TemperatureProvider(Protocol):
    """A data source capable of returning the current temperature of a city."""

    name: str

    def temperature(self, city: str) -> float:
        """Return the temperature in Kelvin for ``city``.

        Transport and decode errors are raised unchanged.
        """
        ...


class TemperatureService(Protocol):
    """High level service that exposes temperatures to the API layer."""

    def temperature(self, city: str) -> float:
        """Return a single Kelvin temperature for ``city``."""
        ...
