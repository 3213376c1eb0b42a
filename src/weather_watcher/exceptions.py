"""Exceptions raised while handling skill requests."""


class WeatherWatcherError(Exception):
    """Base class for all Weather Watcher errors."""


class InvalidIntent(WeatherWatcherError):
    """Intent name is missing or not one the skill handles."""

    def __init__(self, intent_name: str | None = None):
        self.intent_name = intent_name
        super().__init__(f"Invalid Intent: {intent_name!r}")


class WeatherProviderError(WeatherWatcherError):
    """OpenWeatherMap could not produce a usable result."""


class ProviderUnavailable(WeatherProviderError):
    """Network failure, timeout, error status or empty body."""


class MalformedProviderResponse(WeatherProviderError):
    """Body is present but not shaped like a current weather response."""


class UnsupportedRequest(WeatherWatcherError):
    """Request type other than launch, intent or session end."""

    def __init__(self, request_type: str):
        self.request_type = request_type
        super().__init__(f"Unsupported request type: {request_type!r}")
