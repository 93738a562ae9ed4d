import structlog
from fastapi import APIRouter, Depends

from weather_assistant.api.auth import verify_token
from weather_assistant.models.weather import WeatherRecord
from weather_assistant.services.weather_service import weather_service

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get("/current/{location}", summary="Get Current Weather", response_model=WeatherRecord)
async def get_current_weather(location: str, authenticated: bool = Depends(verify_token)):
    """
    Get current weather data for a location.

    An unknown location or a provider outage yields the placeholder record
    whose description is "Information unavailable".

    Args:
        location: City or location name to query.
        authenticated: Dependency that enforces optional token verification.

    Returns:
        The weather record for the location.
    """
    logger.info("API request: Get current weather", location=location, authenticated=authenticated)

    weather_record = await weather_service.get_current_weather(location)

    if not weather_record.is_available:
        logger.warning("Weather unavailable for location", location=location)

    return weather_record
