"""Fluent guard checks for arguments, values and entities.

Usage::

    Guard.against.argument.null(payload, "payload").empty_string(name, "name")
    Guard.against.entity.null(user, "user")

Every check returns the group it was called on so checks can be chained, or
raises the group's ``GuardError`` subclass. The facade holds no state and is
safe to share between concurrent requests.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Sized
from typing import ClassVar, Final, NoReturn, TypeVar

from asguard.errors import (
    BadRequestError,
    GuardError,
    InternalServerError,
    NotFoundError,
)

_NULL: Final[str] = "cannot be null"
_NOT_POSITIVE: Final[str] = "must be greater than zero"
_EMPTY_COLLECTION: Final[str] = "cannot be null or an empty collection"
_EMPTY_STRING: Final[str] = "cannot be null or empty"

_EXHAUSTED: Final[object] = object()

_G = TypeVar("_G", bound="GuardGroup")


def _is_empty(items: Iterable[object]) -> bool:
    if isinstance(items, Sized):
        return len(items) == 0
    # Single-pass iterables are advanced once at most.
    return next(iter(items), _EXHAUSTED) is _EXHAUSTED


class GuardGroup:
    """Shared check semantics; subclasses pick the category and error kind."""

    category: ClassVar[str]
    error_type: ClassVar[Callable[[str], GuardError]]

    __slots__ = ()

    def _fail(self, name: str, reason: str) -> NoReturn:
        raise self.error_type(f"{self.category} {name} {reason}.")

    def null(self: _G, value: object | None, name: str) -> _G:
        """Fail when ``value`` is ``None``; falsy values such as ``0`` pass."""
        if value is None:
            self._fail(name, _NULL)
        return self

    def negative_or_zero(self: _G, number: int, name: str) -> _G:
        """Fail when ``number <= 0``."""
        if number <= 0:
            self._fail(name, _NOT_POSITIVE)
        return self

    def empty_collection(self: _G, items: Iterable[object] | None, name: str) -> _G:
        """Fail when ``items`` is ``None`` or yields no element.

        Sized collections are checked with ``len`` and never iterated; other
        iterables (generators, iterators) have their first element consumed.
        """
        if items is None or _is_empty(items):
            self._fail(name, _EMPTY_COLLECTION)
        return self

    def empty_string(self: _G, value: str | None, name: str) -> _G:
        """Fail when ``value`` is ``None``, empty, or whitespace only."""
        if not value or value.isspace():
            self._fail(name, _EMPTY_STRING)
        return self


class GuardArgument(GuardGroup):
    """Checks for parameters passed by a caller; failures map to 400."""

    category = "Argument"
    error_type = BadRequestError
    __slots__ = ()


class GuardValue(GuardGroup):
    """Checks for values computed inside the application; failures map to 500."""

    category = "Value"
    error_type = InternalServerError
    __slots__ = ()


class GuardEntity(GuardGroup):
    """Checks for looked-up records; failures map to 404."""

    category = "Entity"
    error_type = NotFoundError
    __slots__ = ()


class Guard:
    """Entry point for fluent guard statements; use ``Guard.against``."""

    against: ClassVar[Guard]

    __slots__ = ("_argument", "_entity", "_value")

    def __init__(self) -> None:
        if "against" in type(self).__dict__:
            raise TypeError("Guard is a singleton; use Guard.against")
        self._argument = GuardArgument()
        self._value = GuardValue()
        self._entity = GuardEntity()

    @property
    def argument(self) -> GuardArgument:
        return self._argument

    @property
    def value(self) -> GuardValue:
        return self._value

    @property
    def entity(self) -> GuardEntity:
        return self._entity


Guard.against = Guard()
