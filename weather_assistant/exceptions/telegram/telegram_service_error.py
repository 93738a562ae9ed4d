from weather_assistant.exceptions.base import WeatherAssistantError


class TelegramServiceError(WeatherAssistantError):
    """Base exception for Telegram Bot API errors."""

    pass
