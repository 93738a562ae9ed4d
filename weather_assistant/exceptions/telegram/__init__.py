from weather_assistant.exceptions.telegram.telegram_service_error import TelegramServiceError
from weather_assistant.exceptions.telegram.telegram_token_error import TelegramTokenError

__all__ = ["TelegramServiceError", "TelegramTokenError"]
