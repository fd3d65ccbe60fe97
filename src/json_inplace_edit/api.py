"""Public API functions for json-inplace-edit.

This module provides the user-facing functions: mutate, apply_value,
path_to_display_string and normalize_rows.  Each call creates a fresh
EditEngine, so nothing carries over between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_inplace_edit.algorithm.config import EditConfig
from json_inplace_edit.algorithm.engine import EditEngine
from json_inplace_edit.algorithm.spans import load_value
from json_inplace_edit.errors import JsonEditError
from json_inplace_edit.result import MutationError, MutationErrorKind, MutationResult
from json_inplace_edit.tree.nodes import PathSegment
from json_inplace_edit.tree.normalizer import normalize_rows
from json_inplace_edit.tree.paths import path_to_display_string

__all__ = ["apply_value", "mutate", "normalize_rows", "path_to_display_string"]


def mutate(
    document_text: str,
    path: Sequence[PathSegment],
    proposed_json_text: str,
    config: EditConfig | None = None,
) -> MutationResult:
    """Write the JSON in ``proposed_json_text`` at ``path`` of ``document_text``.

    When both the node at ``path`` and the proposed value are objects, the
    proposed keys are merged into the node one by one; otherwise the node is
    replaced.  Formatting outside the edited ranges is preserved.

    Args:
        document_text:      The current document text.
        path:               Keys and indices addressing the node; [] is the root.
        proposed_json_text: The new value as JSON text.  Parsed before the
                            document is looked at.
        config:             Formatting options.  Defaults to ``EditConfig()``.

    Returns:
        A ``MutationResult``.  On failure ``document_text`` is returned
        unchanged together with the error kind and message.
    """
    try:
        proposed = load_value(proposed_json_text)
        new_text = EditEngine(config=config).apply(document_text, path, proposed)
    except JsonEditError as exc:
        error = MutationError(kind=MutationErrorKind(exc.kind), message=exc.message)
        return MutationResult(document_text=document_text, error=error)
    return MutationResult(document_text=new_text)


def apply_value(
    document_text: str,
    path: Sequence[PathSegment],
    value: Any,
    config: EditConfig | None = None,
) -> str:
    """Write an already-parsed ``value`` at ``path``; raising variant of mutate().

    Raises:
        JsonEditError: Any of its subclasses, see ``EditEngine.apply``.
    """
    return EditEngine(config=config).apply(document_text, path, value)
