import os

# Settings are read when the package is imported
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from weather_assistant.models.pipeline import PipelineContext
from weather_assistant.models.weather.weather import WeatherRecord


@pytest.fixture
def sample_wttr_response():
    """Trimmed wttr.in `format=j1` response for Paris."""
    return {
        "current_condition": [
            {
                "FeelsLikeC": "17",
                "humidity": "64",
                "localObsDateTime": "2024-05-01 02:10 PM",
                "observation_time": "12:10 PM",
                "temp_C": "18",
                "weatherDesc": [{"value": "Sunny"}],
                "windspeedKmph": "11",
            }
        ],
        "nearest_area": [
            {
                "areaName": [{"value": "Paris"}],
                "country": [{"value": "France"}],
                "region": [{"value": "Ile-de-France"}],
            }
        ],
        "weather": [],
    }


@pytest.fixture
def sample_weather_record():
    """Weather record for Paris with every field populated."""
    return WeatherRecord(
        location="Paris",
        temperature_celsius=18.0,
        description="Sunny",
        humidity_percent=64.0,
        wind_speed_kph=11.0,
        feels_like_celsius=17.0,
        observed_at="12:10 PM",
    )


@pytest.fixture
def pipeline_context():
    """Context used for language model calls in tests."""
    return PipelineContext(openai_api_key="test-openai-key", model="gpt-4o-mini")


@pytest.fixture
def mock_runner_run():
    """Mock agents Runner.run method."""
    with patch('agents.Runner.run', new_callable=AsyncMock) as mock_run:
        mock_result = MagicMock()
        mock_result.final_output = "Model output"
        mock_run.return_value = mock_result
        yield mock_run


@pytest.fixture
def mock_extractor():
    """Location extraction double."""
    extractor = AsyncMock()
    extractor.extract = AsyncMock(return_value="Paris")
    return extractor


@pytest.fixture
def mock_weather_source(sample_weather_record):
    """Weather service double."""
    source = AsyncMock()
    source.get_current_weather = AsyncMock(return_value=sample_weather_record)
    return source


@pytest.fixture
def mock_responder():
    """Response generation double."""
    responder = AsyncMock()
    responder.generate = AsyncMock(return_value="It's sunny and 18°C in Paris right now!")
    return responder


@pytest.fixture
def make_http_response():
    """Factory for stand-ins of httpx responses."""
    def _make(status_code=200, json_data=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        response.json.return_value = json_data
        return response

    return _make
