"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "weather-watcher"

    # CORS
    cors_origins: list[str] = ["*"]

    # OpenWeatherMap - these build the REST endpoint
    service_endpoint: str = "https://api.openweathermap.org"
    context_path_weather: str = "/data/2.5/weather"
    context_path_forecast: str = "/data/2.5/forecast"  # Unused; forecasts are not rendered
    city_name_query_param: str = "q"
    app_id: str = ""  # OpenWeatherMap API key

    # Single attempt, no retry; Alexa gives up after ~8s
    request_timeout: float = 4.0

    class Config:
        env_prefix = "WEATHER_WATCHER_"
        case_sensitive = False
        frozen = True


settings = Settings()
