"""Field naming and path joining strategies."""

import dataclasses
import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

from .constants import PATH_SEPARATOR, SKIP_MARKER, TAG_CONVENTIONS


@dataclass(frozen=True)
class FieldInfo:
    """Describes a single dataclass field for naming purposes.

    ``tags`` holds ``(convention, value)`` pairs for every recognised
    convention present in the field's metadata, in priority order.
    """

    name: str
    exported: bool
    tags: Tuple[Tuple[str, str], ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def tag(self, convention: str) -> str:
        """Return the tag value for ``convention``, or an empty string."""
        for key, value in self.tags:
            if key == convention:
                return value
        return ""


FieldNameFunc = Callable[[FieldInfo], str]
FieldJoinFunc = Callable[[Sequence[str], str], str]


def _field_info(fld: dataclasses.Field) -> FieldInfo:
    tags = []
    for convention in TAG_CONVENTIONS:
        value = fld.metadata.get(convention)
        if isinstance(value, str):
            tags.append((convention, value))

    return FieldInfo(
        name=fld.name,
        exported=not fld.name.startswith("_"),
        tags=tuple(tags),
        metadata=fld.metadata,
    )


@functools.lru_cache(maxsize=None)
def record_fields(cls: type) -> Tuple[FieldInfo, ...]:
    """Return the field descriptors of a dataclass type in declared order."""
    return tuple(_field_info(fld) for fld in dataclasses.fields(cls))


def find_field(cls: type, name: str) -> Optional[FieldInfo]:
    """Look up a field of a dataclass type by its declared name."""
    for info in record_fields(cls):
        if info.name == name:
            return info
    return None


def default_field_name(info: FieldInfo) -> str:
    """Default FieldNameFunc.

    Uses the json, yaml and form metadata keys (in that order) to look up the
    field name first, falling back to the declared name. A ``"-"`` value marks
    the field as skipped, returned as an empty string.
    """
    name = ""
    for convention in TAG_CONVENTIONS:
        name = info.tag(convention).split(",", 1)[0]
        if name:
            break

    if name == SKIP_MARKER:
        return ""

    if not name:
        return info.name

    return name


def default_field_join(path: Sequence[str], field: str) -> str:
    """Default FieldJoinFunc, joining all path segments with a dot."""
    segments = list(path)
    if field:
        segments.append(field)

    return PATH_SEPARATOR.join(segments)
