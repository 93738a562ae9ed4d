from weather_assistant.config.config import Config, config

__all__ = ["Config", "config"]
