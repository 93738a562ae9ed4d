from weather_assistant.exceptions.base import WeatherAssistantError


class OpenAIKeyError(WeatherAssistantError):
    """Exception raised when the OpenAI API key is missing."""

    pass
