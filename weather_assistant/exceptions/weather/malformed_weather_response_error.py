from weather_assistant.exceptions.weather.weather_service_error import WeatherServiceError


class MalformedWeatherResponseError(WeatherServiceError):
    """Exception for provider responses that are not valid weather documents."""

    pass
