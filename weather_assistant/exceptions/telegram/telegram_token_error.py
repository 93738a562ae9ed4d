from weather_assistant.exceptions.telegram.telegram_service_error import TelegramServiceError


class TelegramTokenError(TelegramServiceError):
    """Exception raised when the Telegram bot token is missing."""

    pass
