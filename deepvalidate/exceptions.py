"""Validation errors and helpers for combining them."""

from typing import Any, Iterable, Iterator, List, Optional, Tuple

UNKNOWN_ERROR = "unknown error"


class ConfigurationError(Exception):
    """Raised when a validator cannot be configured as requested."""


class ValidationError(Exception):
    """A single validation failure.

    ``path`` is the nested location of the failure relative to the top-level
    value being validated, ``message`` describes the failure and ``cause``
    optionally wraps an underlying error.

    Instances are immutable; use :meth:`with_path` to get a copy located
    somewhere else.
    """

    def __init__(
        self, path: str = "", message: str = "", cause: Optional[BaseException] = None
    ):
        super().__init__(path, message, cause)
        self._path = path
        self._message = message
        self._cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def path(self) -> str:
        return self._path

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    def __str__(self) -> str:
        msg = self._message
        if not msg and self._cause is not None:
            msg = str(self._cause)

        if not msg:
            msg = UNKNOWN_ERROR

        if not self._path:
            return msg

        return f"{self._path}: {msg}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self._path!r}, "
            f"message={self._message!r}, cause={self._cause!r})"
        )

    def unwrap(self) -> Optional[BaseException]:
        """Return the wrapped cause, if any."""
        return self._cause

    def matches(self, target: Any) -> bool:
        """Check whether ``target`` is found in the chain of wrapped causes.

        ``target`` may be an exception instance (compared by identity, then
        equality) or an exception class (compared with ``isinstance``).
        """
        return _chain_matches(self._cause, target)

    def with_path(self, path: str) -> "ValidationError":
        """Return a copy of this error located at ``path``.

        The copy keeps the concrete type and any extra attributes of the
        original without calling its ``__init__`` again.
        """
        clone = Exception.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.args = (path, self._message, self._cause)
        clone._path = path
        if isinstance(self._cause, BaseException):
            clone.__cause__ = self._cause
        return clone


class MultiError(Exception):
    """Several errors combined into one.

    The contained errors are always flat: a MultiError never holds another
    MultiError.
    """

    def __init__(self, errors: Iterable[BaseException]):
        flat = tuple(_flatten(errors))
        super().__init__(*flat)
        self._errors = flat

    @property
    def errors(self) -> Tuple[BaseException, ...]:
        return self._errors

    def __str__(self) -> str:
        return "; ".join(str(err) for err in self._errors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._errors)!r})"

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self):
        return iter(self._errors)


def _flatten(errs: Iterable[Any]):
    for err in errs:
        if err is None:
            continue
        if isinstance(err, MultiError):
            yield from err.errors
        else:
            yield err


def _chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    seen = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if isinstance(err, ValidationError):
            err = err.unwrap()
        else:
            err = getattr(err, "__cause__", None)


def _chain_matches(err: Optional[BaseException], target: Any) -> bool:
    for link in _chain(err):
        if link is target:
            return True
        if isinstance(target, type):
            if isinstance(link, target):
                return True
        elif link == target:
            return True
    return False


def find_validation_error(err: Any) -> Optional[ValidationError]:
    """Return the first ValidationError in the chain starting at ``err``.

    The chain is followed through :meth:`ValidationError.unwrap` and
    ``__cause__``. Returns None when no ValidationError is found.
    """
    for link in _chain(err):
        if isinstance(link, ValidationError):
            return link
    return None


def append(errs: Optional[BaseException], err: Optional[BaseException]):
    """Combine two errors into one.

    Either side may be None. When both sides are present the result is a
    MultiError holding a flattened list of all errors from both sides.
    """
    if errs is None:
        return err
    if err is None:
        return errs
    return MultiError([errs, err])


def append_error(errs: Optional[BaseException], message: str):
    """Append a ValidationError with only a message."""
    return append(errs, ValidationError(message=message))


def append_field_error(errs: Optional[BaseException], field: str, message: str):
    """Append a ValidationError for ``field`` with the given message."""
    return append(errs, ValidationError(path=field, message=message))


def errors(err: Any) -> List[Any]:
    """Return all errors combined into ``err`` as a list.

    Returns an empty list for None.
    """
    if err is None:
        return []
    if isinstance(err, MultiError):
        return list(err.errors)
    return [err]
