from agent.language_model_step import LanguageModelStep
from weather_assistant.models.weather import WeatherRecord


class GenerateResponseAgent(LanguageModelStep):
    name = "Weather Assistant"
    instructions = (
        "You are a weather assistant. Use the provided weather data to answer the user's question. "
        "Do not answer or ask anything else. Be friendly and informative."
    )

    @staticmethod
    def build_input(weather: WeatherRecord, user_input: str) -> list:
        return [
            {"role": "user", "content": user_input},
            {"role": "system", "content": f"Weather data: {weather.to_prompt_json()}"},
        ]

    async def generate(self, weather: WeatherRecord, user_input: str) -> str:
        """Answer the user's question from the weather record; the text is returned as is."""
        return await self.run(self.build_input(weather, user_input))


generate_response_agent = GenerateResponseAgent()
