from agent.weather_agent import WeatherAgent, weather_agent

__all__ = ["WeatherAgent", "weather_agent"]
