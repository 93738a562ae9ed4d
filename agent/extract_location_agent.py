import structlog

from agent.language_model_step import LanguageModelStep

logger = structlog.get_logger(__name__)


class ExtractLocationAgent(LanguageModelStep):
    name = "Location Extractor"
    instructions = (
        "Extract the city or location name from the user's weather query. "
        "Return only the city/location name, nothing else. "
        "If the query doesn't contain a city/location, return an empty string."
    )

    async def extract(self, user_input: str) -> str:
        """
        Pull the location out of a free-text weather question.

        Args:
            user_input: The user's question.

        Returns:
            The trimmed location name, or an empty string if there is none.
        """
        location = (await self.run(user_input)).strip()
        logger.debug("Location extracted", user_input=user_input, location=location)
        return location


extract_location_agent = ExtractLocationAgent()
