import logging
import sys
from pathlib import Path

import structlog

from cityweather.config.config import config


class CustomFormatter(logging.Formatter):
    """Formats records as: [yyyy-mm-dd hh:mm:ss] [log_type] [logger_name]: {message}"""

    def format(self, record):
        # Keep only the last component of dotted logger names
        logger_name = record.name.split('.')[-1]

        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')
        formatted_message = f"[{timestamp}] [{record.levelname}] [{logger_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def get_log_file_path() -> Path:
    """Get the log file path based on environment, creating the logs directory."""
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)
    return logs_dir / f"city_weather_{config.environment}.log"


def _structlog_processors(log_format: str) -> list:
    shared = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        # Timestamp, level and logger name live inside the JSON document
        return shared + [
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    return shared + [structlog.dev.ConsoleRenderer(colors=False)]


def setup_logging():
    """
    Configure logging for the application.

    structlog events are rendered to a string (key/value text or JSON, see
    config.log_format) and handed to the stdlib root logger, which writes to
    stdout and, when config.log_to_file is set, to logs/city_weather_<env>.log.
    """
    level = getattr(logging, config.log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if config.log_format == "json":
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = CustomFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if config.log_to_file:
        log_file_path = get_log_file_path()
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=_structlog_processors(config.log_format),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging configured",
        level=config.log_level,
        format=config.log_format,
        log_file=str(log_file_path) if log_file_path else None,
    )
