"""json-inplace-edit - formatting-preserving, path-addressed JSON edits."""

from __future__ import annotations

from json_inplace_edit.algorithm.config import EditConfig
from json_inplace_edit.algorithm.decider import EditStrategy
from json_inplace_edit.algorithm.engine import EditEngine
from json_inplace_edit.api import (
    apply_value,
    mutate,
    normalize_rows,
    path_to_display_string,
)
from json_inplace_edit.errors import (
    DocumentParseError,
    InvalidPathError,
    InvalidValueError,
    JsonEditError,
    PathConflictError,
)
from json_inplace_edit.result import MutationError, MutationErrorKind, MutationResult
from json_inplace_edit.session import NodeEditSession
from json_inplace_edit.tree.nodes import Row, ValueKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "DocumentParseError",
    "EditConfig",
    "EditEngine",
    "EditStrategy",
    "InvalidPathError",
    "InvalidValueError",
    "JsonEditError",
    "MutationError",
    "MutationErrorKind",
    "MutationResult",
    "NodeEditSession",
    "PathConflictError",
    "Row",
    "ValueKind",
    "apply_value",
    "mutate",
    "normalize_rows",
    "path_to_display_string",
]
