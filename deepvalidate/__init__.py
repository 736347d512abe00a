"""Deep validation of nested Python values.

To add validation to any type, give it a ``validate()`` method returning None
when valid, or an error when not. Dataclasses, mappings, lists and tuples are
walked recursively, and every error is reported with its path relative to the
value being validated::

    @dataclass
    class Book:
        title: str = ""
        author: str = ""

        def validate(self):
            errs = None
            errs = append(errs, require_field("title", self.title))
            errs = append(errs, require_field("author", self.author))
            return errs

    @dataclass
    class Order:
        items: List[Book] = field(default_factory=list, metadata={"json": "items"})

    for err in errors(validate(Order(items=[Book(title="The Firm")]))):
        print(err)  # items.0.author: is required

Field names are taken from ``json``, ``yaml`` or ``form`` field metadata when
present; a value of ``"-"`` excludes the field from validation.
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfigurationError,
    MultiError,
    ValidationError,
    append,
    append_error,
    append_field_error,
    errors,
    find_validation_error,
)
from .helpers import (
    in_range,
    match_regexp,
    max_length,
    min_length,
    not_nil,
    require_field,
)
from .naming import (
    FieldInfo,
    FieldJoinFunc,
    FieldNameFunc,
    default_field_join,
    default_field_name,
)
from .validator import (
    Ref,
    Shape,
    Validatable,
    Validator,
    get_validator,
    shape_of,
    validate,
)

__all__ = [
    "__version__",
    # Errors
    "ConfigurationError",
    "MultiError",
    "ValidationError",
    "append",
    "append_error",
    "append_field_error",
    "errors",
    "find_validation_error",
    # Helpers
    "in_range",
    "match_regexp",
    "max_length",
    "min_length",
    "not_nil",
    "require_field",
    # Naming
    "FieldInfo",
    "FieldJoinFunc",
    "FieldNameFunc",
    "default_field_join",
    "default_field_name",
    # Validation
    "Ref",
    "Shape",
    "Validatable",
    "Validator",
    "get_validator",
    "shape_of",
    "validate",
]
