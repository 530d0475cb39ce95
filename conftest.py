from __future__ import annotations

import os

import django


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherservice.settings")
os.environ.setdefault("OPENWEATHER_URL", "http://openweather.test/data/2.5/weather")
os.environ.setdefault("WEATHERUNDERGROUND_URL", "http://wunderground.test/api")

django.setup()
