"""
Structured logging for the scheduling service.
JSON lines in production, console rendering everywhere else.
"""

import logging
import sys
from typing import Any

import structlog
from asgi_correlation_id import correlation_id

from stagecrew.config import get_settings

settings = get_settings()


def _add_request_id(logger, method_name, event_dict):
    request_id = correlation_id.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def _renderer() -> Any:
    if settings.ENVIRONMENT == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging() -> None:
    """Route structlog and stdlib logging through the same processor chain."""
    shared_processors: list[Any] = [
        _add_request_id,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    processors = list(shared_processors)
    if settings.ENVIRONMENT == "production":
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(settings.LOG_LEVEL.upper())

    # SQL echo stays off unless explicitly raised
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
