from weather_assistant.api.v1.assistant.assistant_routes import router as assistant_router

__all__ = ["assistant_router"]
