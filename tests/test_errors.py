from __future__ import annotations

import copy
import pickle

import pytest

from asguard.errors import (
    BadRequestError,
    GuardError,
    InternalServerError,
    NotFoundError,
)


@pytest.mark.parametrize(
    ("error_type", "status_code"),
    [
        (BadRequestError, 400),
        (NotFoundError, 404),
        (InternalServerError, 500),
    ],
)
def test_concrete_errors_fix_status_code(
    error_type: type[GuardError], status_code: int
) -> None:
    exc = error_type("boom")  # each subclass only takes the message
    assert isinstance(exc, GuardError)
    assert exc.status_code == status_code
    assert exc.message == "boom"
    assert str(exc) == "boom"


def test_base_error_carries_given_status() -> None:
    exc = GuardError("teapot", 418)
    assert exc.status_code == 418
    assert exc.message == "teapot"


def test_error_attributes_are_read_only() -> None:
    exc = BadRequestError("bad input")
    with pytest.raises(AttributeError):
        setattr(exc, "status_code", 500)
    with pytest.raises(AttributeError):
        setattr(exc, "message", "other")
    assert exc.status_code == 400
    assert exc.message == "bad input"


def test_errors_propagate_as_exceptions() -> None:
    with pytest.raises(GuardError) as info:
        raise NotFoundError("Entity user cannot be null.")
    assert info.value.status_code == 404


@pytest.mark.parametrize(
    "exc",
    [
        GuardError("teapot", 418),
        BadRequestError("bad input"),
        NotFoundError("order missing"),
        InternalServerError("total broke"),
    ],
    ids=["base", "bad-request", "not-found", "internal"],
)
def test_errors_survive_pickle_and_copy(exc: GuardError) -> None:
    for clone in (pickle.loads(pickle.dumps(exc)), copy.copy(exc)):
        assert type(clone) is type(exc)
        assert clone.status_code == exc.status_code
        assert clone.message == exc.message
