from weather_assistant.exceptions.base import WeatherAssistantError
from weather_assistant.exceptions.openai import OpenAIKeyError
from weather_assistant.exceptions.pipeline import (
    MissingWeatherDataError,
    PipelineContextError,
    PipelineError,
)
from weather_assistant.exceptions.telegram import TelegramServiceError, TelegramTokenError
from weather_assistant.exceptions.weather import (
    APIRequestError,
    InvalidLocationError,
    MalformedWeatherResponseError,
    WeatherServiceError,
)

__all__ = [
    "APIRequestError",
    "InvalidLocationError",
    "MalformedWeatherResponseError",
    "MissingWeatherDataError",
    "OpenAIKeyError",
    "PipelineContextError",
    "PipelineError",
    "TelegramServiceError",
    "TelegramTokenError",
    "WeatherAssistantError",
    "WeatherServiceError",
]
