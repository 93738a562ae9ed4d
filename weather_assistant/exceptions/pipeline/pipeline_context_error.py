from weather_assistant.exceptions.pipeline.pipeline_error import PipelineError


class PipelineContextError(PipelineError):
    """Raised when a language model step runs outside of a pipeline context."""

    pass
