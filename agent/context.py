from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from weather_assistant.exceptions.pipeline import PipelineContextError
from weather_assistant.models.pipeline import PipelineContext

# Each asyncio task works on its own copy, so concurrent runs stay isolated
_current_context: ContextVar[Optional[PipelineContext]] = ContextVar("pipeline_context", default=None)


@contextmanager
def pipeline_context(context: PipelineContext) -> Iterator[PipelineContext]:
    """Make `context` visible to every language model step run inside the block."""
    token = _current_context.set(context)
    try:
        yield context
    finally:
        _current_context.reset(token)


def get_pipeline_context() -> PipelineContext:
    """
    Return the context bound by the innermost `pipeline_context` block.

    Raises:
        PipelineContextError: If no context is bound
    """
    context = _current_context.get()
    if context is None:
        raise PipelineContextError("No pipeline context is active for this language model call")
    return context
