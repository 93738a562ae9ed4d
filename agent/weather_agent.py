from datetime import datetime
from typing import Optional

import structlog

from agent.context import pipeline_context
from agent.extract_location_agent import ExtractLocationAgent, extract_location_agent
from agent.generate_response_agent import GenerateResponseAgent, generate_response_agent
from weather_assistant.config.config import Config, config
from weather_assistant.exceptions.pipeline import MissingWeatherDataError
from weather_assistant.models.pipeline import PipelineContext
from weather_assistant.services.weather_service import WeatherService, weather_service

logger = structlog.get_logger(__name__)

LOCATION_REQUIRED_MESSAGE = "Please specify a city or location in your request."
ERROR_MESSAGE = "Sorry, an error occurred while processing your request. Please try again."


class WeatherAgent:
    """
    Answers weather questions: extract a location, fetch its weather, then
    let the model phrase the answer.

    Every step is injectable so tests can swap in doubles; by default the
    module-level singletons are used.
    """

    def __init__(
            self,
            extractor: Optional[ExtractLocationAgent] = None,
            weather_source: Optional[WeatherService] = None,
            responder: Optional[GenerateResponseAgent] = None,
            settings: Optional[Config] = None,
    ):
        """Initialize the weather agent."""
        self.extractor = extractor or extract_location_agent
        self.weather_source = weather_source or weather_service
        self.responder = responder or generate_response_agent
        self.settings = settings or config

    async def run(self, user_input: str) -> str:
        """
        Run the pipeline for one query.

        Must be called inside `pipeline_context`. Errors from the model
        steps propagate to the caller.

        Args:
            user_input: The user's question.

        Returns:
            The generated answer, or a request to name a location.

        Raises:
            MissingWeatherDataError: If the weather service returns nothing.
        """
        location = await self.extractor.extract(user_input)
        if not location.strip():
            logger.info("Query doesn't contain city/location", query=user_input)
            return LOCATION_REQUIRED_MESSAGE

        logger.info("Detected location", location=location)

        weather = await self.weather_source.get_current_weather(location)
        if weather is None:
            raise MissingWeatherDataError("Failed to fetch weather data.")

        logger.info("Received weather data", weather=weather.model_dump(exclude_none=True))

        return await self.responder.generate(weather, user_input)

    async def process_query(
            self,
            query: str,
            context: Optional[PipelineContext] = None,
            origin: str = "console",
    ) -> str:
        """
        Answer one raw query. Never raises.

        Args:
            query: The natural language query from the user.
            context: Context for this run; built from the settings when omitted.
            origin: Console session or chat the query came from, for logging.

        Returns:
            The answer, the location request, or a generic apology on failure.
        """
        start_time = datetime.now()

        with structlog.contextvars.bound_contextvars(origin=origin):
            logger.info("Processing weather query", query=query, query_length=len(query))

            try:
                run_context = context or PipelineContext.from_config(self.settings)
                with pipeline_context(run_context):
                    response = await self.run(query)

            except Exception as e:
                logger.error("Error processing weather query", query=query, error=str(e), exc_info=True)
                return ERROR_MESSAGE

            processing_time = (datetime.now() - start_time).total_seconds()
            logger.info(
                "Weather query processed successfully",
                query=query,
                processing_time=processing_time,
                response_length=len(response),
            )

            return response


weather_agent = WeatherAgent()
