"""Management command to fetch a temperature using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weatherservice.api.views import fetch_reading, serialize_reading


class Command(BaseCommand):
    help = "Fetch the averaged temperature (Kelvin) for the provided city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name, forwarded verbatim")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options["city"]
        try:
            reading = fetch_reading(city)
        except Exception as exc:  # noqa: BLE001 - reported to the operator
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(serialize_reading(reading), ensure_ascii=False))
