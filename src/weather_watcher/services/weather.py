"""Current weather lookup via OpenWeatherMap and its spoken rendering."""

import logging
import math

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..exceptions import MalformedProviderResponse, ProviderUnavailable, WeatherProviderError
from ..models.skill import SkillResponse, plain
from ..models.weather import OpenWeatherResponse, WeatherQuery, WeatherResult

logger = logging.getLogger(__name__)

CARD_TITLE = "Weather Watcher"

PROVIDER_APOLOGY = (
    "Sorry, the Open Weather Map service is experiencing a problem. "
    "Please try again later."
)


def round_half_up(value: float) -> int:
    """Round to the nearest whole degree, with halves rounding up."""
    return math.floor(value + 0.5)


def join_conditions(phrases: list[str]) -> str:
    """
    Join condition phrases for speech.

    Blank and repeated phrases are dropped. Two phrases read "a and b",
    more read "a, b and c".
    """
    distinct = list(dict.fromkeys(p.strip() for p in phrases if p and p.strip()))

    if not distinct:
        return ""
    if len(distinct) == 1:
        return distinct[0]
    return f"{', '.join(distinct[:-1])} and {distinct[-1]}"


def _degrees(value: int) -> str:
    unit = "degree" if abs(value) == 1 else "degrees"
    return f"{value} {unit} celsius"


def parse_weather(body: str) -> WeatherResult:
    """
    Parse an OpenWeatherMap current weather body.

    Raises:
        MalformedProviderResponse: body is not JSON or lacks the `main` block
    """
    try:
        payload = OpenWeatherResponse.model_validate_json(body)
    except ValidationError as e:
        raise MalformedProviderResponse(str(e)) from e

    return payload.to_result()


def render_weather(city: str, result: WeatherResult) -> str:
    """Render current conditions as a spoken sentence."""
    conditions = join_conditions(result.condition_phrases)

    speech = f"It is {_degrees(round_half_up(result.current_temp_c))}"
    if conditions:
        speech += f" with {conditions}"
    speech += (
        f" in {city}. Today's maximum temperature is "
        f"{_degrees(round_half_up(result.max_temp_c))} and minimum temperature is "
        f"{_degrees(round_half_up(result.min_temp_c))}."
    )
    return speech


def build_weather_response(speech: str) -> SkillResponse:
    """Weather answers always end the session and carry a card."""
    return SkillResponse.tell(plain(speech), card_title=CARD_TITLE, card_body=speech)


class WeatherService:
    """Client for the OpenWeatherMap current weather endpoint."""

    def __init__(self, config: Settings, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize weather service.

        Args:
            config: Settings holding the endpoint, paths and API key
            transport: Optional httpx transport, used by tests
        """
        self.config = config
        self.transport = transport

    @property
    def weather_url(self) -> str:
        return f"{self.config.service_endpoint}{self.config.context_path_weather}"

    def build_params(self, query: WeatherQuery) -> dict[str, str]:
        """Query string for the lookup; httpx escapes the city."""
        return {
            self.config.city_name_query_param: query.city,
            "APPID": self.config.app_id,
            "units": query.units,
        }

    async def fetch_current_weather(self, query: WeatherQuery) -> str:
        """
        Fetch the raw body for a city in a single attempt.

        Raises:
            ProviderUnavailable: on network error, timeout, error status or empty body
        """
        logger.info(f"OpenWeatherMap request: {self.weather_url} city={query.city}")

        try:
            async with httpx.AsyncClient(
                timeout=self.config.request_timeout,
                transport=self.transport,
            ) as client:
                response = await client.get(self.weather_url, params=self.build_params(query))
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"OpenWeatherMap request failed for {query.city}: {e!r}")
            raise ProviderUnavailable(str(e)) from e

        if not response.text.strip():
            logger.error(f"OpenWeatherMap returned an empty body for {query.city}")
            raise ProviderUnavailable("empty response body")

        return response.text

    async def get_current_weather(self, query: WeatherQuery) -> WeatherResult:
        body = await self.fetch_current_weather(query)
        return parse_weather(body)

    async def weather_response(self, city: str) -> SkillResponse:
        """
        Look up and render the current weather for a city.

        Provider failures are rendered as an apology; they never propagate.

        Args:
            city: City name exactly as the user said it

        Returns:
            Tell response with a "Weather Watcher" card
        """
        query = WeatherQuery(city=city)

        try:
            result = await self.get_current_weather(query)
        except MalformedProviderResponse:
            logger.exception(f"Could not parse OpenWeatherMap response for {city}")
            return build_weather_response(PROVIDER_APOLOGY)
        except WeatherProviderError:
            return build_weather_response(PROVIDER_APOLOGY)

        speech = render_weather(city, result)
        logger.info(f"Weather for {city}: {speech}")

        return build_weather_response(speech)
