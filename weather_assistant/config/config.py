from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_assistant.exceptions.openai import OpenAIKeyError


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    This class handles all configuration for the weather assistant including
    the OpenAI credential, the weather provider, the front end to launch and
    logging.
    """

    # OpenAI Configuration
    openai_api_key: str = Field(..., description="OpenAI API key for the language model steps")
    openai_model: str = Field(default="gpt-4o-mini", description="Model used by every language model step")
    step_timeout: Optional[float] = Field(
        default=None, gt=0, description="Optional deadline in seconds for each language model call"
    )

    # Weather Provider Configuration
    weather_base_url: str = Field(default="https://wttr.in", description="wttr.in base URL")
    weather_request_timeout: float = Field(default=10.0, gt=0, description="Weather request timeout in seconds")

    # Front End Configuration
    mode: Literal["console", "telegram", "api"] = Field(default="console", description="Front end to launch")
    telegram_bot_token: Optional[str] = Field(default=None, description="Telegram bot token")
    telegram_api_base_url: str = Field(default="https://api.telegram.org", description="Telegram Bot API base URL")
    telegram_poll_timeout: int = Field(default=30, ge=0, description="Long polling timeout in seconds")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")
    api_token: Optional[str] = Field(default=None, description="API authentication token")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["text", "json"] = Field(default="text", description="Log format (json/text)")
    log_dir: str = Field(default="logs", description="Directory for log files")

    @field_validator("openai_api_key")
    def validate_openai_api_key(cls, v):
        # Check whether OpenAI Key is provided
        if not v:
            raise OpenAIKeyError("OpenAI API key is required")
        return v

    @field_validator("mode", "log_format", mode="before")
    def normalize_choice(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    def get_log_dir(self) -> Path:
        """Get the absolute path of the log directory."""
        return Path(self.log_dir).resolve()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
