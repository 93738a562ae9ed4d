import json
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

UNAVAILABLE_DESCRIPTION = "Information unavailable"


class WttrValue(BaseModel):
    """Single `{"value": ...}` wrapper used throughout the wttr.in document."""

    value: str = Field(..., description="Wrapped text value")


class WttrCurrentCondition(BaseModel):
    """Current conditions block of a wttr.in response."""

    temp_c: float = Field(..., alias="temp_C", description="Temperature in Celsius")
    feels_like_c: Optional[float] = Field(None, alias="FeelsLikeC", description="Feels like temperature in Celsius")
    humidity: Optional[float] = Field(None, ge=0, le=100, description="Humidity percentage")
    windspeed_kmph: Optional[float] = Field(None, alias="windspeedKmph", ge=0, description="Wind speed in km/h")
    weather_desc: List[WttrValue] = Field(..., alias="weatherDesc", min_length=1, description="Condition text")
    observation_time: Optional[str] = Field(None, description="Observation time (UTC)")
    local_obs_date_time: Optional[str] = Field(None, alias="localObsDateTime", description="Local observation time")


class WttrNearestArea(BaseModel):
    """Area wttr.in resolved the requested location to."""

    area_name: List[WttrValue] = Field(..., alias="areaName", min_length=1, description="Resolved area name")
    country: List[WttrValue] = Field(default_factory=list, description="Country of the area")
    region: List[WttrValue] = Field(default_factory=list, description="Region of the area")


class WttrResponse(BaseModel):
    """Subset of the wttr.in `format=j1` response used by the assistant."""

    current_condition: List[WttrCurrentCondition] = Field(..., min_length=1, description="Current conditions")
    nearest_area: List[WttrNearestArea] = Field(..., min_length=1, description="Nearest resolved areas")


class WeatherRecord(BaseModel):
    """Point-in-time weather observation for a location."""

    model_config = ConfigDict(frozen=True)

    location: str = Field(..., min_length=1, description="Resolved display name of the location")
    temperature_celsius: float = Field(..., description="Temperature in Celsius")
    description: str = Field(..., min_length=1, description="Human-readable weather condition")
    humidity_percent: Optional[float] = Field(None, description="Humidity percentage")
    wind_speed_kph: Optional[float] = Field(None, description="Wind speed in km/h")
    feels_like_celsius: Optional[float] = Field(None, description="Feels like temperature in Celsius")
    observed_at: Optional[str] = Field(None, description="Provider-supplied observation time")

    @property
    def is_available(self) -> bool:
        """False for the placeholder built when the lookup failed."""
        return self.description != UNAVAILABLE_DESCRIPTION

    @classmethod
    def unavailable(cls, location: str) -> "WeatherRecord":
        """
        Build the degraded record returned when the weather lookup fails.

        The temperature is 0 here and is not a real reading.
        """
        return cls(
            location=location,
            temperature_celsius=0,
            description=UNAVAILABLE_DESCRIPTION,
        )

    @classmethod
    def from_wttr_response(cls, response: WttrResponse) -> "WeatherRecord":
        """
        Create a WeatherRecord from a wttr.in API response.

        Args:
            response: Parsed wttr.in response

        Returns:
            WeatherRecord: Processed weather record
        """
        current = response.current_condition[0]
        area = response.nearest_area[0]

        return cls(
            location=area.area_name[0].value,
            temperature_celsius=current.temp_c,
            description=current.weather_desc[0].value,
            humidity_percent=current.humidity,
            wind_speed_kph=current.windspeed_kmph,
            feels_like_celsius=current.feels_like_c,
            observed_at=current.observation_time,
        )

    def to_prompt_json(self) -> str:
        """Serialize the record for a model prompt, skipping absent fields."""
        return json.dumps(self.model_dump(exclude_none=True), indent=2, ensure_ascii=False)
