"""Tests for validation errors and error combining helpers."""

from typing import Any, Optional

import pytest

from deepvalidate import (
    MultiError,
    ValidationError,
    append,
    append_error,
    append_field_error,
    errors,
    find_validation_error,
)


@pytest.mark.parametrize(
    "err, expected",
    [
        (ValidationError(), "unknown error"),
        (ValidationError(path="foo"), "foo: unknown error"),
        (ValidationError(message="is required"), "is required"),
        (ValidationError(path="foo", message="is required"), "foo: is required"),
        (ValidationError(cause=ValueError("oops")), "oops"),
        (ValidationError(path="foo.bar", cause=ValueError("oops")), "foo.bar: oops"),
        (
            ValidationError(path="foo", message="is required", cause=ValueError("oops")),
            "foo: is required",
        ),
        (ValidationError(cause=ValueError("")), "unknown error"),
    ],
)
def test_validation_error_str(err: ValidationError, expected: str) -> None:
    """Test the rendered text of a ValidationError."""
    assert str(err) == expected


def test_validation_error_is_immutable() -> None:
    """Test ValidationError attributes cannot be reassigned."""
    err = ValidationError(path="foo", message="bar")
    with pytest.raises(AttributeError):
        err.path = "other"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        err.message = "other"  # type: ignore[misc]


def test_validation_error_with_path() -> None:
    """Test with_path returns a relocated copy."""
    cause = ValueError("oops")
    err = ValidationError(path="foo", message="bar", cause=cause)
    moved = err.with_path("parent.foo")

    assert moved is not err
    assert (moved.path, moved.message, moved.cause) == ("parent.foo", "bar", cause)
    assert err.path == "foo"


class CodedError(ValidationError):
    def __init__(self, code: int, path: str = "", message: str = ""):
        super().__init__(path=path, message=message)
        self.code = code


def test_with_path_keeps_subclass() -> None:
    """Test with_path works for subclasses with their own constructor."""
    err = CodedError(7, path="foo", message="bad")
    moved = err.with_path("parent.foo")

    assert type(moved) is CodedError
    assert (moved.code, moved.path, moved.message) == (7, "parent.foo", "bad")
    assert str(moved) == "parent.foo: bad"
    assert err.path == "foo"


def test_with_path_keeps_cause_chain() -> None:
    """Test the relocated copy still chains to the original cause."""
    cause = KeyError("missing")
    moved = ValidationError(path="a", cause=cause).with_path("b.a")

    assert moved.__cause__ is cause
    assert moved.matches(KeyError)


@pytest.mark.parametrize(
    "chain, expected_path",
    [
        (None, None),
        (ValueError("plain"), None),
        (ValidationError(path="direct"), "direct"),
        (ValidationError(path="outer", cause=ValidationError(path="inner")), "outer"),
    ],
)
def test_find_validation_error(chain: Any, expected_path: Optional[str]) -> None:
    """Test finding the first ValidationError in a chain."""
    found = find_validation_error(chain)
    assert (found.path if found is not None else None) == expected_path


def test_find_validation_error_follows_causes() -> None:
    """Test ValidationErrors are found behind plain exceptions."""
    target = ValidationError(path="title", message="is required")
    middle = RuntimeError("middle")
    middle.__cause__ = target
    top = LookupError("top")
    top.__cause__ = middle

    assert find_validation_error(top) is target


def test_find_validation_error_stops_on_cycles() -> None:
    """Test cyclic cause chains terminate."""
    a = RuntimeError("a")
    b = RuntimeError("b")
    a.__cause__ = b
    b.__cause__ = a

    assert find_validation_error(a) is None


def test_validation_error_matches() -> None:
    """Test matching targets against the chain of wrapped causes."""
    root = KeyError("missing")
    wrapped = RuntimeError("wrapped")
    wrapped.__cause__ = root
    err = ValidationError(message="bad", cause=wrapped)

    assert err.matches(wrapped)
    assert err.matches(root)
    assert err.matches(KeyError)
    assert err.matches(RuntimeError)
    assert not err.matches(ValueError)
    assert not err.matches(ValueError("missing"))
    assert not err.matches(err)


def test_validation_error_matches_nested_validation_errors() -> None:
    """Test matching follows ValidationError causes."""
    root = ValueError("oops")
    err = ValidationError(path="a", cause=ValidationError(path="b", cause=root))

    assert err.matches(root)
    assert err.matches(ValueError)


def test_validation_error_without_cause_matches_nothing() -> None:
    """Test a ValidationError without cause matches no target."""
    err = ValidationError(message="bad")
    assert not err.matches(ValueError)
    assert not err.matches(None)


def test_validation_error_unwrap() -> None:
    """Test unwrap returns the cause, also exposed as __cause__."""
    cause = ValueError("oops")
    err = ValidationError(cause=cause)

    assert err.unwrap() is cause
    assert err.__cause__ is cause
    assert ValidationError().unwrap() is None


def test_validation_error_can_be_raised() -> None:
    """Test ValidationError behaves like a normal exception."""
    with pytest.raises(ValidationError, match="foo: bar"):
        raise ValidationError(path="foo", message="bar")


def test_append_absent() -> None:
    """Test combining nothing with nothing yields nothing."""
    assert append(None, None) is None


def test_append_single_side() -> None:
    """Test combining with nothing returns the other side unchanged."""
    err = ValidationError(message="bad")
    assert append(None, err) is err
    assert append(err, None) is err


def test_append_flattens() -> None:
    """Test chained appends produce one flat, ordered MultiError."""
    e1 = ValidationError(message="one")
    e2 = ValueError("two")
    e3 = ValidationError(message="three")
    e4 = ValidationError(message="four")

    errs = append(None, e1)
    errs = append(errs, e2)
    errs = append(errs, None)
    errs = append(errs, append(e3, e4))

    assert isinstance(errs, MultiError)
    assert errors(errs) == [e1, e2, e3, e4]
    assert all(not isinstance(e, MultiError) for e in errs.errors)


def test_append_does_not_mutate_inputs() -> None:
    """Test appending to a MultiError leaves it unchanged."""
    e1 = ValidationError(message="one")
    e2 = ValidationError(message="two")
    first = append(e1, e2)
    second = append(first, ValidationError(message="three"))

    assert len(first) == 2
    assert len(second) == 3


def test_append_error() -> None:
    """Test appending a message-only ValidationError."""
    errs = append_error(None, "is bad")
    assert isinstance(errs, ValidationError)
    assert (errs.path, errs.message) == ("", "is bad")


def test_append_field_error() -> None:
    """Test appending a ValidationError for a field."""
    errs = append_field_error(ValueError("first"), "name", "is required")
    got = errors(errs)

    assert len(got) == 2
    assert (got[1].path, got[1].message) == ("name", "is required")


def test_errors() -> None:
    """Test enumerating combined errors."""
    e1 = ValidationError(message="one")
    e2 = ValidationError(message="two")

    assert errors(None) == []
    assert errors(e1) == [e1]
    assert errors(MultiError([e1, None, e2])) == [e1, e2]
    assert errors(MultiError([])) == []


def test_multierror_str() -> None:
    """Test MultiError renders all contained errors."""
    errs = MultiError([ValidationError(path="a", message="one"), ValueError("two")])
    assert str(errs) == "a: one; two"
