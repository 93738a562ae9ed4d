from weather_assistant.utils.logging_config import setup_logging
from weather_assistant.utils.singleton import Singleton

__all__ = ["Singleton", "setup_logging"]
