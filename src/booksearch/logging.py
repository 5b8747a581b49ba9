"""
Structured logging for the API (structlog over stdlib logging)
"""

import logging
import secrets
import sys
from contextvars import ContextVar
from typing import Any

import structlog

# Fields merged into every log line emitted while a request is being served
_request_fields: ContextVar[dict[str, str] | None] = ContextVar("request_fields", default=None)


def add_request_fields(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: copy the current request's id and user id into the event."""
    _ = logger, method_name
    for key, value in (_request_fields.get() or {}).items():
        event_dict.setdefault(key, value)
    return event_dict


def configure_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging on stdout.

    Debug mode renders coloured console lines; otherwise every event is one
    JSON object.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_fields,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def begin_request(request_id: str | None = None) -> str:
    """Start a fresh logging context for one request and return its id."""
    request_id = request_id or secrets.token_hex(8)
    _request_fields.set({"request_id": request_id})
    return request_id


def bind_user_id(user_id: str) -> None:
    """Tag the rest of the current request's log lines with the caller's id."""
    fields = dict(_request_fields.get() or {})
    fields["user_id"] = user_id
    _request_fields.set(fields)


def clear_request_context() -> None:
    _request_fields.set(None)
