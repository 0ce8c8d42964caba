"""
Structlog setup shared by application code and stdlib loggers.

Application code logs snake_case events through `get_logger`; uvicorn and
library loggers go through the same formatter so every line has one shape.
Request-scoped fields (request_id, client_ip, method, path) are merged from
contextvars bound by the request-id middleware.
"""
import json
import logging
from typing import Any, List

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter

from core.config import settings


# The access log is written by LoggingMiddleware.
_SILENCED_LOGGERS = ("uvicorn.access",)
_PROPAGATED_LOGGERS = ("uvicorn", "uvicorn.error", "stripe")


def _add_service(_, __, event_dict: dict) -> dict:
    event_dict.setdefault("service", settings.PROJECT_NAME)
    event_dict.setdefault("environment", settings.ENVIRONMENT)
    return event_dict


def get_renderer() -> Any:
    if settings.DEBUG:
        return ConsoleRenderer(colors=True)

    # JSONRenderer passes `default` (and sort_keys) through to the serializer
    def _dumps(obj, default=None, **kwargs):
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)

    return JSONRenderer(serializer=_dumps)


def configure_logging() -> None:
    """Configure structlog and route stdlib logging through the same processors.

    Called once from the application entry point.
    """
    shared_processors: List[Any] = [
        merge_contextvars,
        add_log_level,
        structlog.stdlib.add_logger_name,
        TimeStamper(fmt="iso", utc=True),
        _add_service,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[ProcessorFormatter.remove_processors_meta, get_renderer()],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    for name in _PROPAGATED_LOGGERS:
        lib_logger = logging.getLogger(name)
        lib_logger.handlers.clear()
        lib_logger.propagate = True
    for name in _SILENCED_LOGGERS:
        logging.getLogger(name).disabled = True


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
