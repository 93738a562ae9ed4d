from weather_assistant.exceptions.weather.api_request_error import APIRequestError
from weather_assistant.exceptions.weather.invalid_location_error import InvalidLocationError
from weather_assistant.exceptions.weather.malformed_weather_response_error import (
    MalformedWeatherResponseError,
)
from weather_assistant.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "APIRequestError",
    "InvalidLocationError",
    "MalformedWeatherResponseError",
    "WeatherServiceError",
]
