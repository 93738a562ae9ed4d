import asyncio

import structlog
from agents import Agent, OpenAIProvider, RunConfig, Runner, TResponseInputItem

from agent.context import get_pipeline_context
from weather_assistant.models.pipeline import PipelineContext
from weather_assistant.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class LanguageModelStep(Singleton):
    """
    A single text generation call with fixed instructions.

    Subclasses set `name` and `instructions`. The credential and the model
    come from the active pipeline context, never from the caller.
    """

    name: str = "Language Model Step"
    instructions: str = ""

    def __init__(self):
        super().__init__()

        if hasattr(self, "_step_initialized"):
            return

        self.agent = Agent(
            name=self.name,
            instructions=self.instructions,
        )

        self._step_initialized = True

    @staticmethod
    def _build_run_config(context: PipelineContext) -> RunConfig:
        return RunConfig(
            model=context.model,
            model_provider=OpenAIProvider(api_key=context.openai_api_key),
            tracing_disabled=True,
        )

    async def run(self, prompt: str | list[TResponseInputItem]) -> str:
        """Execute the step and return the model's text output.

        Args:
            prompt: User text or ordered, role-tagged input items.

        Returns:
            The final text output of the model.

        Raises:
            PipelineContextError: If called outside of a pipeline context.
            asyncio.TimeoutError: If the context's step timeout elapses.
        """
        context = get_pipeline_context()
        logger.debug("Running language model step", step=self.name, model=context.model)

        result = await asyncio.wait_for(
            Runner.run(
                starting_agent=self.agent,
                input=prompt,
                context=context,
                run_config=self._build_run_config(context),
            ),
            timeout=context.step_timeout,
        )

        return str(result.final_output or "")
