from weather_assistant.models.weather.weather import (
    UNAVAILABLE_DESCRIPTION,
    WeatherRecord,
    WttrCurrentCondition,
    WttrNearestArea,
    WttrResponse,
    WttrValue,
)

__all__ = [
    "UNAVAILABLE_DESCRIPTION",
    "WeatherRecord",
    "WttrCurrentCondition",
    "WttrNearestArea",
    "WttrResponse",
    "WttrValue",
]
