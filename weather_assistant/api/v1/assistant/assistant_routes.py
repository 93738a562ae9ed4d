from datetime import datetime

import structlog
from fastapi import APIRouter, Depends

from agent.weather_agent import weather_agent
from weather_assistant.api.auth import verify_token
from weather_assistant.models.assistant import QueryRequest, QueryResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/assistant", tags=["Assistant"])


@router.post("/query", summary="Ask the Weather Assistant", response_model=QueryResponse)
async def query_assistant(
    request: QueryRequest,
        authenticated: bool = Depends(verify_token)
):
    """Answer a natural-language weather question.

    The assistant extracts the location, fetches its current weather and
    phrases an answer. Failures inside the pipeline come back as a friendly
    message in `response`, never as an HTTP error.

    Args:
        request: The request payload containing the user's query string.

    Returns:
        The answer together with the query and the processing time.
    """
    logger.info("Processing request query", query=request.query, origin=request.origin)

    start_time = datetime.now()
    response = await weather_agent.process_query(request.query, origin=request.origin)

    return QueryResponse(
        response=response,
        query=request.query,
        processing_time=(datetime.now() - start_time).total_seconds(),
    )
