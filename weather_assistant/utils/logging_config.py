import logging
import sys
from pathlib import Path

import structlog

from weather_assistant.config.config import config


class CustomFormatter(logging.Formatter):
    """Custom formatter that implements the format: [yyyy-mm-dd hh:mm:ss] [log_type] [logger_name]: {message}"""

    def format(self, record):
        # Keep only the last component of dotted logger names
        logger_name = record.name.split('.')[-1] if '.' in record.name else record.name

        # Format timestamp as yyyy-mm-dd hh:mm:ss
        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{logger_name}]: {record.getMessage()}"

        # Add exception info if present
        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def ensure_logs_directory() -> Path:
    """Ensure the logs directory exists."""
    logs_dir = config.get_log_dir()
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_log_file_path() -> Path:
    """Get the log file path based on environment."""
    logs_dir = ensure_logs_directory()
    log_filename = f"weather_assistant_{config.environment}.log"
    return logs_dir / log_filename


def get_renderer():
    """Pick the structlog renderer that matches the configured log format."""
    if config.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True)


def setup_logging():
    """
    Configure logging for the application.

    structlog events are rendered to a single line and handed over to the
    standard library, which writes them to the log file and to stderr with
    the format:
    [yyyy-mm-dd hh:mm:ss] [log_type] [logger_name]: {message}
    """
    log_file_path = get_log_file_path()
    level = getattr(logging, config.log_level.upper())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    # stdout belongs to the console front end
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # The weather and model calls are logged by us, not by the HTTP clients
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    logging.getLogger("openai").setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            get_renderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(__name__)
    logger.info("Logging configured", log_file=str(log_file_path), log_format=config.log_format)
