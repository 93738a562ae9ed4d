from weather_assistant.exceptions.weather.weather_service_error import WeatherServiceError


class InvalidLocationError(WeatherServiceError):
    """Exception for locations the weather provider does not know."""

    pass
