"""Alexa Skill request handling."""

import logging

from ..exceptions import InvalidIntent, UnsupportedRequest
from ..models.alexa import AlexaIntent, AlexaRequestEnvelope, AlexaResponse, AlexaSession
from ..models.skill import SkillResponse, plain, ssml
from .weather import WeatherService

logger = logging.getLogger(__name__)

# Intents
ONE_SHOT_WEATHER_INTENT = "OneShotWeatherIntent"
DIALOG_WEATHER_INTENT = "DialogWeatherIntent"
HELP_INTENT = "AMAZON.HelpIntent"
STOP_INTENT = "AMAZON.StopIntent"
CANCEL_INTENT = "AMAZON.CancelIntent"

CITY_SLOT = "City"
SESSION_CITY = "City"

WHICH_CITY_PROMPT = "Which city would you like current weather for?"
USAGE_TEXT = (
    "I can lead you through providing a city to get weather information, "
    "or you can simply open Weather Watcher and ask a question like, "
    "get current weather for Newcastle upon Tyne. "
)
GOODBYE_TEXT = "Goodbye and enjoy the weather!"


def welcome_response() -> SkillResponse:
    """Greeting for a launch without an intent."""
    speech = (
        "<speak>Welcome to Weather Watcher. I can provide the current weather for any city. "
        f"{WHICH_CITY_PROMPT}</speak>"
    )
    return SkillResponse.ask(ssml(speech), plain(USAGE_TEXT + WHICH_CITY_PROMPT))


def help_response() -> SkillResponse:
    return SkillResponse.ask(
        plain(USAGE_TEXT + "Or you can say Cancel. " + WHICH_CITY_PROMPT),
        plain(WHICH_CITY_PROMPT),
    )


def city_prompt_response() -> SkillResponse:
    """Ask for the city when neither the slot nor the session has one."""
    return SkillResponse.ask(
        plain(f"I can provide the current weather for any city. {WHICH_CITY_PROMPT}"),
        plain(WHICH_CITY_PROMPT),
    )


def goodbye_response() -> SkillResponse:
    return SkillResponse.tell(plain(GOODBYE_TEXT))


async def _weather_for_city(
    city: str, session: AlexaSession, weather: WeatherService
) -> SkillResponse:
    """Resolve the weather and remember the city for later turns."""
    response = await weather.weather_response(city)

    session.attributes[SESSION_CITY] = city

    return response


async def _handle_no_slot_dialog(session: AlexaSession, weather: WeatherService) -> SkillResponse:
    """
    Handle a dialog turn without a usable city slot.

    With no slot value we fall back to the city remembered in the session,
    and re-prompt when there is none.
    """
    city = session.attributes.get(SESSION_CITY)
    if isinstance(city, str) and city.strip():
        logger.info(f"Using city from session: {city}")
        return await _weather_for_city(city, session, weather)

    return city_prompt_response()


async def route_intent(
    intent: AlexaIntent | None,
    session: AlexaSession,
    weather: WeatherService,
) -> SkillResponse:
    """
    Dispatch an intent to its handler.

    Supported intents:
    - OneShotWeatherIntent: "ask Weather Watcher for the weather in London"
    - DialogWeatherIntent: city answer inside a dialog, or a bare follow-up
    - AMAZON.HelpIntent: Usage instructions
    - AMAZON.CancelIntent / AMAZON.StopIntent: Exit

    Args:
        intent: Intent from the request, None if the platform sent none
        session: Session whose attributes remember the city
        weather: Service used for weather lookups

    Returns:
        SkillResponse for the turn

    Raises:
        InvalidIntent: intent is missing or not handled by this skill
    """
    if intent is None or not intent.name:
        raise InvalidIntent(None)

    intent_name = intent.name
    logger.info(f"Alexa intent: {intent_name}")

    if intent_name in (ONE_SHOT_WEATHER_INTENT, DIALOG_WEATHER_INTENT):
        city = intent.slot_value(CITY_SLOT)
        if city:
            response = await _weather_for_city(city, session, weather)
        else:
            response = await _handle_no_slot_dialog(session, weather)
    elif intent_name == HELP_INTENT:
        response = help_response()
    elif intent_name in (STOP_INTENT, CANCEL_INTENT):
        response = goodbye_response()
    else:
        raise InvalidIntent(intent_name)

    # Alexa only keeps the attributes echoed back on each turn
    response.session_attributes = dict(session.attributes)
    return response


async def handle_alexa_request(
    envelope: AlexaRequestEnvelope, weather: WeatherService
) -> AlexaResponse:
    """
    Process Alexa skill request and return response.

    Args:
        envelope: Full Alexa request envelope
        weather: Service used for weather lookups

    Returns:
        Alexa response envelope

    Raises:
        InvalidIntent: for intent requests the skill cannot route
        UnsupportedRequest: for request types other than launch, intent and session end
    """
    request = envelope.request
    session = envelope.session

    logger.info(
        f"Alexa request type: {request.type}, requestId={request.requestId}, "
        f"sessionId={session.sessionId}"
    )

    if session.new:
        logger.info(f"Session started: {session.sessionId}")

    if request.type == "LaunchRequest":
        response = welcome_response()
        response.session_attributes = dict(session.attributes)
        return response.to_alexa()

    if request.type == "IntentRequest":
        response = await route_intent(request.intent, session, weather)
        return response.to_alexa()

    if request.type == "SessionEndedRequest":
        logger.info(f"Session ended: {session.sessionId}, reason={request.reason}")
        return SkillResponse.tell(plain("")).to_alexa()

    raise UnsupportedRequest(request.type)
