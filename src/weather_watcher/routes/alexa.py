"""Alexa Skill webhook endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from ..config import settings
from ..exceptions import InvalidIntent, UnsupportedRequest
from ..models.alexa import AlexaRequestEnvelope
from ..services.alexa_handler import handle_alexa_request
from ..services.weather import WeatherService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


def get_weather_service() -> WeatherService:
    """Weather service bound to the process-wide settings."""
    return WeatherService(settings)


@router.post("/alexa")
async def alexa_webhook(
    envelope: AlexaRequestEnvelope,
    weather: WeatherService = Depends(get_weather_service),
) -> dict[str, Any]:
    """
    Handle Alexa Skill requests.

    This endpoint receives requests from the Alexa service when users
    interact with the Weather Watcher skill.

    Supported intents:
    - LaunchRequest: "Alexa, open Weather Watcher"
    - OneShotWeatherIntent: "Alexa, ask Weather Watcher for the weather in Newcastle upon Tyne"
    - DialogWeatherIntent: "Newcastle upon Tyne" (answer to the city prompt)
    - AMAZON.HelpIntent: "Alexa, ask Weather Watcher for help"
    - AMAZON.StopIntent: "Alexa, stop"

    Unroutable intents are rejected with a 400; the Alexa service then
    plays its own error message.
    """
    logger.info(f"Alexa request received: {envelope.request.type}")

    try:
        response = await handle_alexa_request(envelope, weather)
    except (InvalidIntent, UnsupportedRequest) as e:
        logger.warning(f"Rejected Alexa request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return response.model_dump(exclude_none=True)
