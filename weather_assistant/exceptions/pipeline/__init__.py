from weather_assistant.exceptions.pipeline.missing_weather_data_error import MissingWeatherDataError
from weather_assistant.exceptions.pipeline.pipeline_context_error import PipelineContextError
from weather_assistant.exceptions.pipeline.pipeline_error import PipelineError

__all__ = ["MissingWeatherDataError", "PipelineContextError", "PipelineError"]
