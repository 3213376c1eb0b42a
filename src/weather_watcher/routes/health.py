"""Health check endpoint."""

from fastapi import APIRouter

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str | bool]:
    """Report service status and whether OpenWeatherMap can be queried."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "weather_api_configured": bool(settings.app_id),
        "weather_endpoint": f"{settings.service_endpoint}{settings.context_path_weather}",
    }
