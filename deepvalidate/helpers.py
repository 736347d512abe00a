"""Helper checks for use within validate() methods.

Each helper returns None when the check passes, or a ValidationError for the
given field when it does not, so results can be combined with ``append()``.
"""

import dataclasses
import numbers
import re
import weakref
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from .exceptions import ValidationError
from .validator import Ref, deref


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_zero(value: Any) -> bool:
    # A reference is zero only when it points at nothing.
    if isinstance(value, (Ref, weakref.ReferenceType)):
        return deref(value) is None
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray, Sequence, Mapping)):
        return len(value) == 0
    if isinstance(value, numbers.Number):
        return value == 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(
            _is_zero(getattr(value, fld.name, None))
            for fld in dataclasses.fields(value)
        )
    return False


def require_field(field: str, value: Any) -> Optional[ValidationError]:
    """Check that ``value`` is not empty or zero.

    A top-level reference is followed, so the value it points at is checked.
    """
    if _is_zero(deref(value)):
        return ValidationError(path=field, message="is required")

    return None


def in_range(
    field: str, value: Any, min: float, max: float
) -> Optional[ValidationError]:
    """Check that a numeric ``value`` lies within ``[min, max]``."""
    if value is None:
        return ValidationError(path=field, message="cannot be nil")

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return ValidationError(
            path=field, message=f"unsupported type {_type_name(value)} for in_range"
        )

    if value < min or value > max:
        return ValidationError(
            path=field, message=f"must be in range [{min:.6f}, {max:.6f}]"
        )

    return None


def _length(field: str, value: Any, bound: int, check: str) -> Union[int, ValidationError]:
    if value is None:
        return ValidationError(path=field, message="cannot be nil")

    if bound < 0:
        return ValidationError(path=field, message=f"{check} must be non-negative")

    if isinstance(value, (str, bytes, bytearray, Sequence, Mapping)):
        return len(value)

    return ValidationError(
        path=field, message=f"unsupported type {_type_name(value)} for {check}"
    )


def min_length(field: str, value: Any, min_length: int) -> Optional[ValidationError]:
    """Check that a string, sequence or mapping has at least ``min_length`` items."""
    length = _length(field, value, min_length, "min_length")
    if isinstance(length, ValidationError):
        return length

    if length < min_length:
        return ValidationError(
            path=field, message=f"must have a minimum length of {min_length}"
        )

    return None


def max_length(field: str, value: Any, max_length: int) -> Optional[ValidationError]:
    """Check that a string, sequence or mapping has at most ``max_length`` items."""
    length = _length(field, value, max_length, "max_length")
    if isinstance(length, ValidationError):
        return length

    if length > max_length:
        return ValidationError(
            path=field, message=f"must have a maximum length of {max_length}"
        )

    return None


def match_regexp(
    field: str, value: Any, pattern: Union[str, "re.Pattern", None]
) -> Optional[ValidationError]:
    """Check that ``value`` matches the regular expression ``pattern``.

    The pattern is searched for anywhere in the value; anchor it with ``^``
    and ``$`` to match the whole value.
    """
    if pattern is None:
        return ValidationError(path=field, message="pattern cannot be nil")

    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    if isinstance(value, (bytes, bytearray)):
        data = bytes(value)
        text = data.decode("utf-8", errors="replace")
    elif isinstance(value, str):
        data = value.encode("utf-8")
        text = value
    else:
        return ValidationError(
            path=field,
            message=f"unsupported type {_type_name(value)} for match_regexp",
        )

    if isinstance(pattern.pattern, bytes):
        matched = pattern.search(data) is not None
        shown = pattern.pattern.decode("utf-8", errors="replace")
    else:
        matched = pattern.search(text) is not None
        shown = pattern.pattern

    if not matched:
        return ValidationError(
            path=field, message=f"does not match pattern '{shown}': '{text}'"
        )

    return None


def not_nil(field: str, value: Any) -> Optional[ValidationError]:
    """Check that ``value`` is not None, nor a reference to None."""
    if deref(value) is None:
        return ValidationError(path=field, message="must not be nil")

    return None
