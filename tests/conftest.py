from __future__ import annotations

import pytest

from requests_mock import Mocker


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def api_keys(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "ow-key")
    monkeypatch.setenv("WEATHERUNDERGROUND_API_KEY", "wu-key")
    return {"openweather": "ow-key", "wunderground": "wu-key"}
