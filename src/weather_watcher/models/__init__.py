"""Pydantic models for request/response schemas."""

from .alexa import (
    AlexaIntent,
    AlexaRequestEnvelope,
    AlexaResponse,
    AlexaSession,
    PlainTextSpeech,
    SsmlSpeech,
)
from .skill import SkillResponse
from .weather import OpenWeatherResponse, WeatherQuery, WeatherResult

__all__ = [
    "AlexaIntent",
    "AlexaRequestEnvelope",
    "AlexaResponse",
    "AlexaSession",
    "PlainTextSpeech",
    "SsmlSpeech",
    "SkillResponse",
    "OpenWeatherResponse",
    "WeatherQuery",
    "WeatherResult",
]
