"""Shared fixtures."""

import json
from typing import Any, Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from weather_watcher.config import Settings
from weather_watcher.main import app
from weather_watcher.routes.alexa import get_weather_service
from weather_watcher.services.weather import WeatherService

LONDON_WEATHER = {
    "main": {"temp": 15.4, "temp_min": 10.0, "temp_max": 18.0},
    "weather": [{"description": "clear sky"}],
}


class FakeOpenWeatherMap:
    """Records requests and answers each with a fixed status and body."""

    def __init__(self, body: str = json.dumps(LONDON_WEATHER), status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def cities(self) -> list[str]:
        return [r.url.params.get("q") for r in self.requests]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        service_endpoint="https://api.openweathermap.test",
        app_id="test-key",
        request_timeout=2.0,
    )


@pytest.fixture
def provider() -> FakeOpenWeatherMap:
    return FakeOpenWeatherMap()


@pytest.fixture
def weather_service(test_settings: Settings, provider: FakeOpenWeatherMap) -> WeatherService:
    return WeatherService(test_settings, transport=httpx.MockTransport(provider))


@pytest.fixture
def client(weather_service: WeatherService) -> Iterator[TestClient]:
    app.dependency_overrides[get_weather_service] = lambda: weather_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def intent_request() -> Callable[..., dict[str, Any]]:
    """Build an IntentRequest envelope."""

    def build(
        name: str,
        slots: dict[str, str | None] | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return {
            "version": "1.0",
            "session": {
                "sessionId": "session-1",
                "new": False,
                "attributes": attributes or {},
            },
            "request": {
                "type": "IntentRequest",
                "requestId": "request-1",
                "intent": {
                    "name": name,
                    "slots": {
                        slot: {"name": slot, "value": value}
                        for slot, value in (slots or {}).items()
                    },
                },
            },
        }

    return build
