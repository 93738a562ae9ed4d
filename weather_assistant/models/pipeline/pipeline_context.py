from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from weather_assistant.config.config import Config


class PipelineContext(BaseModel):
    """Shared, read-only settings every language model step of a run uses."""

    model_config = ConfigDict(frozen=True)

    openai_api_key: str = Field(..., min_length=1, repr=False, description="OpenAI API key for this run")
    model: str = Field(default="gpt-4o-mini", description="Model identifier for every step")
    step_timeout: Optional[float] = Field(default=None, gt=0, description="Deadline in seconds per model call")

    @classmethod
    def from_config(cls, settings: Config) -> "PipelineContext":
        return cls(
            openai_api_key=settings.openai_api_key,
            model=settings.openai_model,
            step_timeout=settings.step_timeout,
        )
