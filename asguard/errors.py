from __future__ import annotations

from collections.abc import Callable
from typing import Final

HTTP_400: Final[int] = 400
HTTP_404: Final[int] = 404
HTTP_500: Final[int] = 500


class GuardError(Exception):
    """Base error carrying the HTTP status code a failed check maps to.

    ``status_code`` and ``message`` are read-only; the middleware reads them to
    build the outgoing response.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self._message = message
        self._status_code = status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int:
        return self._status_code

    def __reduce__(self) -> tuple[Callable[..., GuardError], tuple[object, ...]]:
        # Subclasses fix the status code and take only the message.
        if type(self) is GuardError:
            return (GuardError, (self._message, self._status_code))
        return (type(self), (self._message,))


class BadRequestError(GuardError):
    """Caller-supplied input is invalid (400)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, HTTP_400)


class NotFoundError(GuardError):
    """An expected entity is missing (404)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, HTTP_404)


class InternalServerError(GuardError):
    """An internal invariant was violated (500)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, HTTP_500)
