import asyncio
import sys
import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agent.weather_agent import weather_agent
from weather_assistant import __version__
from weather_assistant.api import v1_router
from weather_assistant.api.health import health_router
from weather_assistant.config.config import config
from weather_assistant.exceptions.telegram import TelegramTokenError
from weather_assistant.services.console_service import ConsoleService
from weather_assistant.services.telegram_service import TelegramService
from weather_assistant.utils.logging_config import setup_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log start-up and shutdown of the HTTP front end."""
    logger.info("Starting Weather Assistant API", model=config.openai_model)
    try:
        yield
    finally:
        logger.info("Shutting down Weather Assistant API")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Assistant API",
        description="""
        ## Weather Assistant API

        Answers natural-language weather questions.

        ### Features:
        - **Assistant**: Ask about the weather in plain language, the location is detected for you
        - **Current Weather**: Get the live conditions wttr.in reports for any location

        ### Authentication:
        If an API token is configured, include it as a Bearer token in the Authorization header.

        ### Example Queries:
        - "What's the weather in Paris?"
        - "Do I need an umbrella in London today?"
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time=process_time,
            )
            raise

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
                "timestamp": time.time(),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            url=str(request.url),
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "status_code": exc.status_code, "timestamp": time.time()},
        )

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


# Create the application instance
app = create_app()


def run_api():
    logger.info(
        f"Starting Weather Assistant server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
    )
    uvicorn.run(
        app,
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
        access_log=True,
        server_header=False,
        date_header=False,
    )


def main():
    setup_logging()
    logger.info("Starting Weather Assistant", mode=config.mode, environment=config.environment)

    try:
        if config.mode == "telegram":
            asyncio.run(TelegramService(weather_agent).start())
        elif config.mode == "api":
            run_api()
        else:
            logger.info("🖥️ Starting in console mode...")
            ConsoleService(weather_agent).start()

    except TelegramTokenError as e:
        logger.error("Cannot start Telegram mode", error=str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutdown requested")
    except Exception as e:
        logger.error("Weather Assistant failed", error=str(e), exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
