class WeatherAssistantError(Exception):
    """Base exception for all weather assistant errors."""

    pass
