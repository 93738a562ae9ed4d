from weather_assistant.exceptions.base import WeatherAssistantError


class PipelineError(WeatherAssistantError):
    """Base exception for query pipeline errors."""

    pass
