"""Translate errors raised during request handling into plain-text responses.

``GuardMiddleware`` is the single boundary where ``asguard`` errors become
HTTP behaviour:

- ``GuardError``: the error's status code, body ``Validation failed: <message>``
- Starlette ``HTTPException`` escaping the route layer: its status code,
  body ``Validation failed: <detail>``
- anything else: 500, body ``An unexpected error occurred: <message>``

Register it last in the app factory so it wraps every other application
middleware. It never re-raises; each request gets exactly one response.
"""
from __future__ import annotations

from typing import Final

from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from asguard.errors import HTTP_500, GuardError
from asguard_api.logging import get_logger

logger = get_logger(__name__)

VALIDATION_FAILED: Final[str] = "Validation failed: {message}"
UNEXPECTED_ERROR: Final[str] = "An unexpected error occurred: {message}"


def _context(request: Request, status_code: int) -> dict[str, object]:
    return {
        "status_code": status_code,
        "path": request.url.path,
        "method": request.method,
    }


def guard_error_response(request: Request, exc: GuardError) -> Response:
    logger.warning(
        "Guard check failed: %s",
        exc.message,
        extra=_context(request, exc.status_code),
    )
    return PlainTextResponse(
        VALIDATION_FAILED.format(message=exc.message), status_code=exc.status_code
    )


def http_error_response(request: Request, exc: HTTPException) -> Response:
    logger.warning(
        "HTTP error escaped route handling: %s",
        exc.detail,
        extra=_context(request, exc.status_code),
    )
    return PlainTextResponse(
        VALIDATION_FAILED.format(message=exc.detail),
        status_code=exc.status_code,
        headers=exc.headers,
    )


def unexpected_error_response(request: Request, exc: Exception) -> Response:
    logger.error(
        "Unhandled %s during request",
        type(exc).__name__,
        exc_info=exc,
        extra=_context(request, HTTP_500),
    )
    return PlainTextResponse(
        UNEXPECTED_ERROR.format(message=str(exc)), status_code=HTTP_500
    )


class GuardMiddleware(BaseHTTPMiddleware):
    """Outermost application middleware mapping raised errors to responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except GuardError as exc:
            return guard_error_response(request, exc)
        except HTTPException as exc:
            return http_error_response(request, exc)
        except Exception as exc:
            return unexpected_error_response(request, exc)
