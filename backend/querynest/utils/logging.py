"""Structured JSON logging for the API, the stores and the Celery worker"""

import logging
import sys
import uuid
import structlog
from pythonjsonlogger import jsonlogger

from ..config import settings

SERVICE_NAME = "query-nest"


def add_service_fields(logger, method_name: str, event_dict: dict) -> dict:
    """Tag every structlog event with the service and deployment environment"""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("environment", settings.ENVIRONMENT)
    return event_dict


def setup_logging(log_level: str = "INFO") -> None:
    """
    Route structlog events to stdout as one JSON object per line

    Args:
        log_level: Minimum level name, e.g. ``"INFO"``
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_service_fields,
            structlog.processors.add_log_level,
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(sort_keys=True)
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(method: str, path: str) -> str:
    """
    Start a per-request logging context

    Every event logged while handling the request, including store and
    cascade events, carries the same ``request_id``.

    Returns:
        The generated request id
    """
    request_id = uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, method=method, path=path)
    return request_id


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """stdlib JSON formatter matching the structlog event fields"""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = SERVICE_NAME
        log_record["environment"] = settings.ENVIRONMENT
        log_record["level"] = record.levelname.lower()
        log_record["logger"] = record.name


def configure_uvicorn_logging() -> None:
    """Send uvicorn's access and error logs through ``ServiceJsonFormatter``"""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceJsonFormatter("%(timestamp)s %(message)s", timestamp=True))

    for name in ("uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).handlers = [handler]
