"""ValueKind StrEnum and Row dataclass for path-addressed JSON nodes.

ValueKind is the tagged union over the six JSON value kinds.  Every shape
decision in the package (merge vs replace, row filtering) dispatches on a
ValueKind rather than on raw Python types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# A path segment: object key (non-empty str) or array index (non-negative int)
PathSegment = str | int


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names (Python 3.11+):
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"   : JSON array []
    - OBJECT  -> "object"  : JSON object {}
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def kind_of(value: Any) -> ValueKind:
    """Classify a parsed JSON value.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if value is None:
        return ValueKind.NULL
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass(frozen=True, slots=True)
class Row:
    """A flattened field of a node as shown in a tree view.

    Attributes:
        key:   Object key of the field; None for keyless rows (array elements
               and root scalars).
        value: Scalar value of the field.  Rows of container type carry the
               child count instead, since their content is rendered elsewhere.
        type:  ValueKind of the field.
    """

    key: str | None
    value: Any
    type: ValueKind
