"""Deep validation of nested values.

A value takes part in validation by implementing the :class:`Validatable`
protocol, a single ``validate()`` method returning ``None`` when valid, or an
error (possibly a :class:`~deepvalidate.exceptions.MultiError`) when not.

Dataclass instances, mappings, lists and tuples are walked recursively and
every nested value implementing the protocol is validated. Returned errors are
wrapped in :class:`~deepvalidate.exceptions.ValidationError` with a path relative
to the top-level value, e.g. ``items.1.book.author``.
"""

import dataclasses
import logging
import threading
import weakref
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Generic,
    List,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from .exceptions import (
    ConfigurationError,
    ValidationError,
    append,
    errors,
    find_validation_error,
)
from .naming import (
    FieldJoinFunc,
    FieldNameFunc,
    default_field_join,
    default_field_name,
    find_field,
    record_fields,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TEXT_TYPES = (str, bytes, bytearray)


@runtime_checkable
class Validatable(Protocol):
    """Anything with a ``validate()`` method can be validated."""

    def validate(self) -> Optional[BaseException]:
        ...


@dataclass(frozen=True)
class Ref(Generic[T]):
    """An optional reference to another value.

    The validator looks through a Ref to the value it points at. A Ref to None
    is treated exactly like None.
    """

    target: Optional[T] = None

    def get(self) -> Optional[T]:
        return self.target


class Shape(Enum):
    """The kinds of values the validator knows how to walk."""

    SCALAR = "scalar"
    RECORD = "record"
    SEQUENCE = "sequence"
    FIXED_SEQUENCE = "fixed_sequence"
    MAPPING = "mapping"
    REFERENCE = "reference"


def shape_of(value: Any) -> Shape:
    """Determine the Shape of a value."""
    if isinstance(value, (Ref, weakref.ReferenceType)):
        return Shape.REFERENCE
    if isinstance(value, _TEXT_TYPES):
        return Shape.SCALAR
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return Shape.RECORD
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, tuple):
        return Shape.FIXED_SEQUENCE
    if isinstance(value, Sequence):
        return Shape.SEQUENCE
    return Shape.SCALAR


def deref(value: Any) -> Any:
    """Follow a single level of reference, returning None for empty ones."""
    if isinstance(value, Ref):
        return value.get()
    if isinstance(value, weakref.ReferenceType):
        return value()
    return value


def is_validatable(value: Any) -> bool:
    """Check if ``value`` is an object implementing Validatable."""
    return (
        not isinstance(value, type)
        and isinstance(value, Validatable)
        and callable(value.validate)
    )


class Validator:
    """Validates Validatable objects.

    The field naming and path joining strategies can be customised per
    instance; when not set, :func:`default_field_name` and
    :func:`default_field_join` are used.
    """

    def __init__(
        self,
        field_name: Optional[FieldNameFunc] = None,
        field_join: Optional[FieldJoinFunc] = None,
    ):
        self._field_name = field_name or default_field_name
        self._field_join = field_join or default_field_join
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Validator":
        """Prevent any further configuration changes."""
        self._frozen = True
        return self

    def field_name_func(self, func: Optional[FieldNameFunc]) -> None:
        """Set the function converting a field to its name.

        If the function returns an empty string for a field, the field's value
        and anything nested within it is not validated.
        """
        self._check_mutable()
        self._field_name = func or default_field_name

    def field_join_func(self, func: Optional[FieldJoinFunc]) -> None:
        """Set the function joining parent path segments with a field name."""
        self._check_mutable()
        self._field_join = func or default_field_join

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ConfigurationError(
                "Validator is frozen and cannot be reconfigured, "
                "create a new Validator instead"
            )

    def validate(self, value: Any) -> Optional[BaseException]:
        """Validate ``value`` and everything nested within it.

        Returns None when no errors were found, a single ValidationError when
        exactly one was found, and a MultiError otherwise.
        """
        errs = self._validate((), value)
        logger.debug("Validation found %d error(s)", len(errors(errs)))
        return errs

    def _validate(self, path: Tuple[str, ...], value: Any) -> Optional[BaseException]:
        errs: Optional[BaseException] = None
        if value is None:
            return None

        shape = shape_of(value)
        if shape is Shape.REFERENCE:
            value = deref(value)
            if value is None:
                return None
            shape = shape_of(value)

        if is_validatable(value):
            errs = self._run_contract(path, value, shape)

        if shape in (Shape.SEQUENCE, Shape.FIXED_SEQUENCE):
            for i, item in enumerate(value):
                errs = append(errs, self._validate(path + (str(i),), item))
        elif shape is Shape.MAPPING:
            for key, item in value.items():
                errs = append(errs, self._validate(path + (f"{key}",), item))
        elif shape is Shape.RECORD:
            for info in record_fields(type(value)):
                if not info.exported:
                    continue
                name = self._field_name(info)
                if not name:
                    logger.debug("Skipping field %s.%s", type(value).__name__, info.name)
                    continue
                item = getattr(value, info.name, None)
                errs = append(errs, self._validate(path + (name,), item))

        return errs

    def _run_contract(
        self, path: Tuple[str, ...], value: Any, shape: Shape
    ) -> Optional[BaseException]:
        errs: Optional[BaseException] = None
        raw: List[Any] = errors(value.validate())
        if raw:
            logger.debug(
                "%s reported %d error(s) at %r",
                type(value).__name__,
                len(raw),
                self._field_join(path, ""),
            )

        # Re-home every reported error onto its path relative to the root.
        for err in raw:
            found = find_validation_error(err)
            if found is not None:
                field = found.path
                if field and shape is Shape.RECORD:
                    info = find_field(type(value), field)
                    if info is not None:
                        field = self._field_name(info)
                new_err = found.with_path(self._field_join(path, field))
            else:
                new_err = ValidationError(path=self._field_join(path, ""), cause=err)

            errs = append(errs, new_err)

        return errs


_default: Optional[Validator] = None
_default_lock = threading.Lock()


def get_validator() -> Validator:
    """Get or create the global default validator instance.

    The returned instance is frozen; configure a new Validator to customise
    field naming or path joining.
    """
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Validator().freeze()
    return _default


def validate(value: Any) -> Optional[BaseException]:
    """Validate ``value`` with the default validator.

    Dataclasses, mappings, lists and tuples have each of their fields/items
    validated, effectively performing a deep validation.
    """
    return get_validator().validate(value)
