"""Tests for intent dispatch and the dialog session state."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_watcher.exceptions import InvalidIntent
from weather_watcher.models.alexa import AlexaIntent, AlexaSession, AlexaSlot
from weather_watcher.models.skill import SkillResponse, plain
from weather_watcher.services.alexa_handler import route_intent, welcome_response
from weather_watcher.services.weather import WeatherService


def _intent(name: str | None, city: str | None = None) -> AlexaIntent:
    slots = {"City": AlexaSlot(name="City", value=city)}
    return AlexaIntent(name=name, slots=slots)


@pytest.fixture
def weather() -> MagicMock:
    service = MagicMock(spec=WeatherService)
    service.weather_response = AsyncMock(
        side_effect=lambda city: SkillResponse.tell(
            plain(f"Weather for {city}"), card_title="Weather Watcher", card_body=f"Weather for {city}"
        )
    )
    return service


@pytest.mark.asyncio
async def test_one_shot_intent_calls_weather(weather: MagicMock) -> None:
    session = AlexaSession()

    response = await route_intent(_intent("OneShotWeatherIntent", "London"), session, weather)

    weather.weather_response.assert_awaited_once_with("London")
    assert response.should_end_session is True
    assert session.attributes == {"City": "London"}
    assert response.session_attributes == {"City": "London"}


@pytest.mark.asyncio
async def test_dialog_intent_with_slot_prefers_slot(weather: MagicMock) -> None:
    session = AlexaSession(attributes={"City": "Paris"})

    await route_intent(_intent("DialogWeatherIntent", "London"), session, weather)

    weather.weather_response.assert_awaited_once_with("London")
    assert session.attributes["City"] == "London"


@pytest.mark.asyncio
@pytest.mark.parametrize("city", [None, "", "  "])
async def test_dialog_intent_uses_remembered_city(weather: MagicMock, city: str | None) -> None:
    session = AlexaSession(attributes={"City": "Newcastle upon Tyne"})

    response = await route_intent(_intent("DialogWeatherIntent", city), session, weather)

    weather.weather_response.assert_awaited_once_with("Newcastle upon Tyne")
    assert response.spoken_text == "Weather for Newcastle upon Tyne"


@pytest.mark.asyncio
async def test_dialog_intent_without_any_city_reprompts(weather: MagicMock) -> None:
    response = await route_intent(_intent("DialogWeatherIntent"), AlexaSession(), weather)

    weather.weather_response.assert_not_awaited()
    assert response.should_end_session is False
    assert response.is_ssml is False
    assert response.reprompt_text == "Which city would you like current weather for?"


@pytest.mark.asyncio
async def test_dialog_intent_without_slots_reprompts(weather: MagicMock) -> None:
    response = await route_intent(AlexaIntent(name="DialogWeatherIntent"), AlexaSession(), weather)

    weather.weather_response.assert_not_awaited()
    assert response.should_end_session is False


@pytest.mark.asyncio
async def test_one_shot_intent_without_city_reprompts(weather: MagicMock) -> None:
    response = await route_intent(_intent("OneShotWeatherIntent", ""), AlexaSession(), weather)

    weather.weather_response.assert_not_awaited()
    assert response.should_end_session is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "intent_name, ends_session",
    [
        ("AMAZON.HelpIntent", False),
        ("AMAZON.StopIntent", True),
        ("AMAZON.CancelIntent", True),
    ],
)
async def test_builtin_intents(weather: MagicMock, intent_name: str, ends_session: bool) -> None:
    response = await route_intent(AlexaIntent(name=intent_name), AlexaSession(), weather)

    assert response.should_end_session is ends_session
    assert response.is_ssml is False
    assert (response.reprompt is None) is ends_session
    weather.weather_response.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("intent", [None, AlexaIntent(name=None), AlexaIntent(name="UnknownIntent")])
async def test_invalid_intent(weather: MagicMock, intent: AlexaIntent | None) -> None:
    with pytest.raises(InvalidIntent):
        await route_intent(intent, AlexaSession(), weather)


def test_welcome_response_is_ssml_ask() -> None:
    response = welcome_response()

    assert response.is_ssml is True
    assert response.spoken_text.startswith("<speak>")
    assert response.spoken_text.endswith("</speak>")
    assert response.should_end_session is False
    assert response.reprompt_text is not None


def test_skill_response_rejects_tell_with_reprompt() -> None:
    with pytest.raises(ValueError):
        SkillResponse(speech=plain("Bye"), reprompt=plain("Still there?"), should_end_session=True)


def test_skill_response_rejects_ask_without_reprompt() -> None:
    with pytest.raises(ValueError):
        SkillResponse(speech=plain("Which city?"), should_end_session=False)


def test_skill_response_to_alexa() -> None:
    response = SkillResponse.tell(plain("It is sunny."), card_title="Weather Watcher", card_body="It is sunny.")

    envelope = response.to_alexa().model_dump(exclude_none=True)

    assert envelope == {
        "version": "1.0",
        "sessionAttributes": {},
        "response": {
            "outputSpeech": {"type": "PlainText", "text": "It is sunny."},
            "card": {"type": "Simple", "title": "Weather Watcher", "content": "It is sunny."},
            "shouldEndSession": True,
        },
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("intent_name", ["AMAZON.HelpIntent", "AMAZON.StopIntent"])
async def test_prompts_echo_session_attributes(weather: MagicMock, intent_name: str) -> None:
    session = AlexaSession(attributes={"City": "Paris"})

    response = await route_intent(AlexaIntent(name=intent_name), session, weather)

    assert response.session_attributes == {"City": "Paris"}


@pytest.mark.asyncio
async def test_reprompt_echoes_session_attributes(weather: MagicMock) -> None:
    session = AlexaSession(attributes={"Units": "metric"})

    response = await route_intent(_intent("DialogWeatherIntent"), session, weather)

    assert response.should_end_session is False
    assert response.session_attributes == {"Units": "metric"}
