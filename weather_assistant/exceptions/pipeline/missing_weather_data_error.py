from weather_assistant.exceptions.pipeline.pipeline_error import PipelineError


class MissingWeatherDataError(PipelineError):
    """Raised when the weather service hands back no record at all."""

    pass
