import asyncio
import json
from unittest.mock import MagicMock

import pytest
from agents import OpenAIProvider, RunConfig

from agent.context import pipeline_context as bind_context
from agent.extract_location_agent import ExtractLocationAgent
from agent.generate_response_agent import GenerateResponseAgent
from agent.language_model_step import LanguageModelStep
from weather_assistant.exceptions.pipeline import PipelineContextError
from weather_assistant.models.pipeline import PipelineContext
from weather_assistant.models.weather.weather import WeatherRecord


class QuietStep(LanguageModelStep):
    name = "Quiet Step"
    instructions = "Reply with OK."


class TestLanguageModelStep:
    """Test cases for the LanguageModelStep base class."""

    def test_construction_writes_nothing_to_stdout(self, capsys):
        """Test that building a step, as happens on import, prints nothing."""
        QuietStep.reset_instances()

        step = QuietStep()

        assert step.agent.name == "Quiet Step"
        assert capsys.readouterr().out == ""


class TestExtractLocationAgent:
    """Test cases for the ExtractLocationAgent class."""

    def test_initialization(self):
        """Test that the step wraps an agent with the extraction instructions."""
        agent = ExtractLocationAgent()

        assert agent.agent is not None
        assert "Return only the city/location name" in agent.agent.instructions
        assert agent is ExtractLocationAgent()

    @pytest.mark.asyncio
    async def test_extract_trims_output(self, pipeline_context, mock_runner_run):
        """Test that surrounding whitespace is removed from the location."""
        mock_runner_run.return_value.final_output = "  Paris\n"

        with bind_context(pipeline_context):
            location = await ExtractLocationAgent().extract("What's the weather in Paris?")

        assert location == "Paris"
        mock_runner_run.assert_called_once()
        call_kwargs = mock_runner_run.call_args.kwargs
        assert call_kwargs["input"] == "What's the weather in Paris?"
        assert call_kwargs["starting_agent"] is ExtractLocationAgent().agent

    @pytest.mark.asyncio
    async def test_extract_without_location(self, pipeline_context, mock_runner_run):
        """Test that an empty model answer stays empty."""
        mock_runner_run.return_value.final_output = ""

        with bind_context(pipeline_context):
            location = await ExtractLocationAgent().extract("Tell me a joke")

        assert location == ""

    @pytest.mark.asyncio
    async def test_run_uses_active_context(self, mock_runner_run):
        """Test that the model and credential come from the bound context."""
        context = PipelineContext(openai_api_key="run-key", model="gpt-4.1-mini")

        with bind_context(context):
            await ExtractLocationAgent().extract("Weather in Rome?")

        call_kwargs = mock_runner_run.call_args.kwargs
        assert call_kwargs["context"] is context
        run_config = call_kwargs["run_config"]
        assert isinstance(run_config, RunConfig)
        assert run_config.model == "gpt-4.1-mini"
        assert isinstance(run_config.model_provider, OpenAIProvider)
        assert run_config.tracing_disabled is True

    @pytest.mark.asyncio
    async def test_extract_outside_context(self, mock_runner_run):
        """Test that the step refuses to run without a context."""
        with pytest.raises(PipelineContextError):
            await ExtractLocationAgent().extract("Weather in Rome?")

        mock_runner_run.assert_not_called()

    @pytest.mark.asyncio
    async def test_extract_model_failure_propagates(self, pipeline_context, mock_runner_run):
        """Test that model errors are not swallowed by the step."""
        mock_runner_run.side_effect = RuntimeError("model unavailable")

        with bind_context(pipeline_context):
            with pytest.raises(RuntimeError, match="model unavailable"):
                await ExtractLocationAgent().extract("Weather in Rome?")

    @pytest.mark.asyncio
    async def test_step_timeout(self, mock_runner_run):
        """Test that a configured step timeout bounds the model call."""
        async def slow_run(**kwargs):
            await asyncio.sleep(1)
            return MagicMock(final_output="Rome")

        mock_runner_run.side_effect = slow_run
        context = PipelineContext(openai_api_key="test-openai-key", step_timeout=0.01)

        with bind_context(context):
            with pytest.raises(asyncio.TimeoutError):
                await ExtractLocationAgent().extract("Weather in Rome?")


class TestGenerateResponseAgent:
    """Test cases for the GenerateResponseAgent class."""

    def test_build_input(self, sample_weather_record):
        """Test the order and roles of the prompt items."""
        items = GenerateResponseAgent.build_input(sample_weather_record, "What's the weather in Paris?")

        assert items[0] == {"role": "user", "content": "What's the weather in Paris?"}
        assert items[1]["role"] == "system"
        assert items[1]["content"].startswith("Weather data: ")
        weather_data = json.loads(items[1]["content"][len("Weather data: "):])
        assert weather_data["location"] == "Paris"
        assert weather_data["description"] == "Sunny"

    @pytest.mark.asyncio
    async def test_generate_returns_output_unmodified(
            self,
            pipeline_context,
            mock_runner_run,
            sample_weather_record
    ):
        """Test that the answer is passed through as is."""
        mock_runner_run.return_value.final_output = "It's sunny in Paris! ☀️\n"

        with bind_context(pipeline_context):
            answer = await GenerateResponseAgent().generate(sample_weather_record, "Weather in Paris?")

        assert answer == "It's sunny in Paris! ☀️\n"
        call_kwargs = mock_runner_run.call_args.kwargs
        assert call_kwargs["starting_agent"] is GenerateResponseAgent().agent
        assert call_kwargs["input"] == GenerateResponseAgent.build_input(sample_weather_record, "Weather in Paris?")

    @pytest.mark.asyncio
    async def test_generate_with_degraded_record(self, pipeline_context, mock_runner_run):
        """Test that the degraded record is still handed to the model."""
        mock_runner_run.return_value.final_output = "Sorry, I couldn't find weather for Zzqqxx."

        with bind_context(pipeline_context):
            answer = await GenerateResponseAgent().generate(
                WeatherRecord.unavailable("Zzqqxx"),
                "Weather in Zzqqxx"
            )

        assert answer == "Sorry, I couldn't find weather for Zzqqxx."
        system_item = mock_runner_run.call_args.kwargs["input"][1]
        assert "Information unavailable" in system_item["content"]

    @pytest.mark.asyncio
    async def test_generate_model_failure_propagates(
            self,
            pipeline_context,
            mock_runner_run,
            sample_weather_record
    ):
        """Test that model errors are not swallowed by the step."""
        mock_runner_run.side_effect = RuntimeError("rate limited")

        with bind_context(pipeline_context):
            with pytest.raises(RuntimeError, match="rate limited"):
                await GenerateResponseAgent().generate(sample_weather_record, "Weather in Paris?")
