"""Temperature service that fans a request out to several providers."""
from __future__ import annotations

import queue
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Tuple, Union

from weatherservice.core.abstractions import TemperatureProvider, TemperatureService


Outcome = Union[float, BaseException]


class MultiProviderWeatherService(TemperatureService):
    """Query every provider concurrently and average their temperatures.

    Each provider runs on its own worker thread and reports exactly one
    outcome to a queue sized to the number of providers, so no worker ever
    blocks on it.  The first error taken from the queue is raised as is; the
    remaining workers are left to finish on their own and their outcomes are
    discarded.  There is no cancellation and no timeout: a hanging provider
    blocks the caller.
    """

    def __init__(self, providers: Iterable[TemperatureProvider]) -> None:
        self._providers: Tuple[TemperatureProvider, ...] = tuple(providers)
        if not self._providers:
            raise ValueError("at least one provider is required")

    def temperature(self, city: str) -> float:
        count = len(self._providers)
        outcomes: "queue.Queue[Outcome]" = queue.Queue(maxsize=count)
        executor = ThreadPoolExecutor(max_workers=count, thread_name_prefix="provider")
        try:
            for provider in self._providers:
                executor.submit(self._report, provider, city, outcomes)

            total = 0.0
            for _ in range(count):
                outcome = outcomes.get()
                if isinstance(outcome, BaseException):
                    raise outcome
                total += outcome
        finally:
            executor.shutdown(wait=False)

        return total / count

    @staticmethod
    def _report(provider: TemperatureProvider, city: str, outcomes: "queue.Queue[Outcome]") -> None:
        try:
            kelvin = provider.temperature(city)
        except BaseException as exc:  # noqa: BLE001 - every worker reports exactly one outcome
            outcomes.put(exc)
            return
        outcomes.put(kelvin)


__all__ = ["MultiProviderWeatherService"]
