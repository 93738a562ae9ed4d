from weather_assistant.services.console_service import ConsoleService
from weather_assistant.services.telegram_service import TelegramService
from weather_assistant.services.weather_service import WeatherService, weather_service

__all__ = ["ConsoleService", "TelegramService", "WeatherService", "weather_service"]
