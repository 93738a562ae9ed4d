from weather_assistant.exceptions.openai.openai_key_error import OpenAIKeyError

__all__ = ["OpenAIKeyError"]
