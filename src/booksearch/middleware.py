"""
Per-request logging context for the HTTP app
"""

import json
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import begin_request, clear_request_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "x-request-id"

# ``token`` carries a bearer token (see auth.middleware); GraphQL GET requests
# carry the whole operation, variables included, in the query string
REDACTED_PARAMS = {"token", "query", "variables", "extensions"}


def loggable_params(request: Request) -> dict[str, str] | None:
    """Query parameters safe to log, with credentials and operation payloads masked."""
    if not request.query_params:
        return None
    return {
        key: "[REDACTED]" if key.lower() in REDACTED_PARAMS else value
        for key, value in request.query_params.items()
    }


async def graphql_operation_name(request: Request) -> str | None:
    """The client-supplied ``operationName`` of a GraphQL request, if any."""
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        return request.query_params.get("operationName") or None

    if request.method == "POST":
        body = await request.body()
        try:
            payload = json.loads(body) if body else None
        except (UnicodeDecodeError, json.JSONDecodeError):
            return None
        if isinstance(payload, dict) and isinstance(payload.get("operationName"), str):
            return payload["operationName"] or None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Tag every log line of a request with its id and log start and finish."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = begin_request(request.headers.get(REQUEST_ID_HEADER))
        operation = await graphql_operation_name(request)

        try:
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=loggable_params(request),
                graphql_operation=operation,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                graphql_operation=operation,
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            logger.error("Request failed", method=request.method, path=request.url.path, error=str(e))
            raise

        finally:
            clear_request_context()
