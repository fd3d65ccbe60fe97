"""Tree subpackage for path-addressed JSON node primitives.

Re-exports the public API for the tree module:
- ValueKind / kind_of: tagged union over the six JSON value kinds
- Row: flattened node field shown by a tree view
- Location / locate: path lookup against a parsed document
- normalize_rows / rows_for_value: node text for display and editing
- path_to_display_string / parse_display_string / validate_path: path codec
"""

from json_inplace_edit.tree.locator import Location, locate
from json_inplace_edit.tree.nodes import JsonValue, PathSegment, Row, ValueKind, kind_of
from json_inplace_edit.tree.normalizer import normalize_rows, rows_for_value
from json_inplace_edit.tree.paths import (
    parse_display_string,
    path_to_display_string,
    validate_path,
)

__all__ = [
    "JsonValue",
    "Location",
    "PathSegment",
    "Row",
    "ValueKind",
    "kind_of",
    "locate",
    "normalize_rows",
    "parse_display_string",
    "path_to_display_string",
    "rows_for_value",
    "validate_path",
]
