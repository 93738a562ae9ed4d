from typing import Any, Dict
from urllib.parse import quote

import httpx
import structlog

from weather_assistant.config.config import config
from weather_assistant.exceptions.weather import (
    APIRequestError,
    InvalidLocationError,
    MalformedWeatherResponseError,
    WeatherServiceError,
)
from weather_assistant.models.weather.weather import WeatherRecord, WttrResponse
from weather_assistant.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class WeatherService(Singleton):
    """
    Service for collecting current weather data from wttr.in.

    `get_current_weather` always hands back a WeatherRecord: when the lookup
    fails for any reason the caller receives the degraded record instead of
    an exception.
    """

    def __init__(self):
        """Initialize the weather service."""
        super().__init__()

        if hasattr(self, "_weather_initialized"):
            return

        self.base_url = config.weather_base_url.rstrip("/")

        # HTTP client configuration
        self.timeout = httpx.Timeout(config.weather_request_timeout)

        self._weather_initialized = True

    def _build_url(self, location: str) -> str:
        return f"{self.base_url}/{quote(location, safe='')}"

    async def _make_request(self, location: str) -> Dict[str, Any]:
        """
        Make a single HTTP request to wttr.in for a location.

        Args:
            location: Free-text location name

        Returns:
            JSON response from the API

        Raises:
            InvalidLocationError: If wttr.in does not know the location (404)
            APIRequestError: For any other non-200 response
            MalformedWeatherResponseError: If the body is not JSON
            WeatherServiceError: For timeouts and transport errors
        """
        url = self._build_url(location)
        params = {"format": "j1"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                logger.info("Making API request", url=url, params=params)

                response = await client.get(url, params=params)

        except httpx.TimeoutException:
            logger.warning("Request timeout", location=location)
            raise WeatherServiceError(f"Request timeout for {location}")

        except httpx.RequestError as e:
            logger.warning("Request error", location=location, error=str(e))
            raise WeatherServiceError(f"Request failed: {str(e)}")

        if response.status_code == 404:
            raise InvalidLocationError(f"Unknown location: {location}")
        if response.status_code != 200:
            logger.warning(
                "API request failed",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise APIRequestError(f"Weather API returned status {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise MalformedWeatherResponseError(f"Weather API returned invalid JSON for {location}: {str(e)}")

    async def get_current_weather(self, location: str) -> WeatherRecord:
        """
        Get current weather data for a location.

        Args:
            location: Name of the city or location

        Returns:
            WeatherRecord with current weather data, or the degraded record
            (`WeatherRecord.unavailable`) if anything goes wrong
        """
        logger.info("Fetching current weather", location=location)
        try:
            data = await self._make_request(location)

            # Parse and validate the response
            response = WttrResponse.model_validate(data)
            weather_record = WeatherRecord.from_wttr_response(response)

            logger.info(
                "Successfully fetched current weather",
                location=location,
                resolved_location=weather_record.location,
            )
            return weather_record

        except Exception as e:
            # A missing reading degrades the answer instead of aborting the query
            logger.error("Error fetching weather data", location=location, error=str(e))
            return WeatherRecord.unavailable(location)


weather_service = WeatherService()
