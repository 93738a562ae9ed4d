from weather_assistant.models.pipeline.pipeline_context import PipelineContext

__all__ = ["PipelineContext"]
