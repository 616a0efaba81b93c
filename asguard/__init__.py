"""AsGuard core package.

Provides the fluent guard facade and the HTTP-status-coded error hierarchy it
raises. Framework-free; the HTTP translation layer lives in ``asguard_api``.
"""
from __future__ import annotations

from asguard.errors import (
    BadRequestError,
    GuardError,
    InternalServerError,
    NotFoundError,
)
from asguard.guard import Guard, GuardArgument, GuardEntity, GuardValue

__all__ = [
    "BadRequestError",
    "Guard",
    "GuardArgument",
    "GuardEntity",
    "GuardError",
    "GuardValue",
    "InternalServerError",
    "NotFoundError",
]
