"""Weather query/result models and the OpenWeatherMap payload."""

from typing import Literal

from pydantic import BaseModel, Field


class WeatherQuery(BaseModel):
    """One current-weather lookup."""

    city: str = Field(..., min_length=1)
    units: Literal["metric"] = "metric"


class WeatherResult(BaseModel):
    """Current conditions for a city, in degrees celsius."""

    current_temp_c: float
    min_temp_c: float
    max_temp_c: float
    condition_phrases: list[str] = Field(default_factory=list)


class OpenWeatherMain(BaseModel):
    """`main` block of an OpenWeatherMap response."""

    temp: float = Field(..., allow_inf_nan=False)
    temp_min: float = Field(..., allow_inf_nan=False)
    temp_max: float = Field(..., allow_inf_nan=False)


class OpenWeatherCondition(BaseModel):
    """One entry of the `weather` array."""

    description: str


class OpenWeatherResponse(BaseModel):
    """The parts of /data/2.5/weather the skill reads."""

    main: OpenWeatherMain
    weather: list[OpenWeatherCondition] = []

    def to_result(self) -> WeatherResult:
        return WeatherResult(
            current_temp_c=self.main.temp,
            min_temp_c=self.main.temp_min,
            max_temp_c=self.main.temp_max,
            condition_phrases=[w.description for w in self.weather],
        )
