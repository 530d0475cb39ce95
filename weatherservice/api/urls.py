"""API URL configuration."""
from __future__ import annotations

from django.urls import path, re_path

from weatherservice.api.views import HelloView, WeatherView

urlpatterns = [
    path("hello", HelloView.as_view(), name="hello"),
    # Everything after "/weather/" is the city, including an empty string.
    re_path(r"^weather/(?P<city>[\s\S]*)\Z", WeatherView.as_view(), name="weather"),
]
