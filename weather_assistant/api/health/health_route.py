from datetime import datetime, timezone

from fastapi import APIRouter

from weather_assistant import __version__
from weather_assistant.config.config import config

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health():
    """Basic health check endpoint."""

    return {
        "message": "Weather Assistant API is running",
        "model": config.openai_model,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    }
