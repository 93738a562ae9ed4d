from fastapi import APIRouter

from weather_assistant.api.v1.assistant import assistant_router
from weather_assistant.api.v1.weather import weather_router

# Create main router
router = APIRouter(prefix="/api/v1")

# Include all sub-routers
router.include_router(assistant_router)
router.include_router(weather_router)
