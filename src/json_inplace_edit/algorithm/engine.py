"""EditEngine: writes a value at a path while preserving unrelated formatting.

Architecture:
- apply() parses the document, resolves the target with ``locate`` and asks
  the merge decider for a strategy.
- REPLACE computes one edit for the whole subtree at the path.
- MERGE sets each key of the proposed object in turn.  Every key's edit is
  computed against the working copy produced by the previous key, because
  each applied edit shifts the offsets of everything after it.
- The engine holds no state besides its config; nothing is cached between
  calls, and an exception leaves the caller's text untouched since only the
  final text is ever returned.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from json_inplace_edit.algorithm.config import EditConfig
from json_inplace_edit.algorithm.decider import EditStrategy, decide
from json_inplace_edit.algorithm.edits import apply_edits, compute_set_edit
from json_inplace_edit.algorithm.spans import load_document
from json_inplace_edit.errors import InvalidValueError
from json_inplace_edit.tree.locator import locate
from json_inplace_edit.tree.nodes import PathSegment, kind_of
from json_inplace_edit.tree.paths import path_to_display_string, validate_path

__all__ = ["EditEngine"]

logger = logging.getLogger(__name__)


class EditEngine:
    """Formatting-preserving, path-addressed JSON mutation.

    Example::

        engine = EditEngine()
        engine.apply('{"a": 1,\\n "b": [1, 2]}', ["b", 1], 3)
        # '{"a": 1,\\n "b": [1, 3]}'
    """

    def __init__(self, config: EditConfig | None = None) -> None:
        self.config = config if config is not None else EditConfig()

    def apply(self, document_text: str, path: Sequence[PathSegment], proposed: Any) -> str:
        """Return ``document_text`` with ``proposed`` written at ``path``.

        Raises:
            InvalidPathError: If ``path`` has an invalid segment.
            DocumentParseError: If ``document_text`` is not valid JSON.
            InvalidValueError: If ``proposed`` is not a JSON value.
            PathConflictError: If ``path`` runs through a scalar or mixes
                keys and indices with the container types it meets.
        """
        segments = validate_path(path)
        document = load_document(document_text)
        try:
            proposed_kind = kind_of(proposed)
        except TypeError as exc:
            raise InvalidValueError(str(exc)) from exc

        location = locate(document, segments)
        strategy = decide(location.kind, proposed_kind)
        logger.debug(
            "%s at %s (target %s, proposed %s)",
            strategy,
            path_to_display_string(segments),
            location.kind if location.found else "missing",
            proposed_kind,
        )

        if strategy is EditStrategy.MERGE:
            return self._merge(document_text, segments, proposed)

        edit = compute_set_edit(document_text, segments, proposed, self.config)
        return apply_edits(document_text, [edit])

    def _merge(
        self,
        document_text: str,
        segments: list[PathSegment],
        proposed: dict[str, Any],
    ) -> str:
        working = document_text
        for key, value in proposed.items():
            edit = compute_set_edit(working, [*segments, key], value, self.config)
            working = apply_edits(working, [edit])
        logger.debug("merged %d key(s) at %s", len(proposed), path_to_display_string(segments))
        return working
