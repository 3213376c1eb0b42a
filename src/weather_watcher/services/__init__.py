"""Business logic services."""

from .alexa_handler import handle_alexa_request, route_intent
from .weather import WeatherService

__all__ = [
    "handle_alexa_request",
    "route_intent",
    "WeatherService",
]
