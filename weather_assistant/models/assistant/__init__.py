from weather_assistant.models.assistant.query_request import QueryRequest
from weather_assistant.models.assistant.query_response import QueryResponse

__all__ = ["QueryRequest", "QueryResponse"]
