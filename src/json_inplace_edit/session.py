"""NodeEditSession: the select / edit / save / cancel flow for one document.

The session owns the authoritative document text and a list of sinks (a
graph store, a mirrored text editor, a file...).  The edit engine only ever
returns text; the session is the one place that adopts it and writes it to
every sink, so all consumers see the same text after each save.

Example::

    session = NodeEditSession('{"user": {"name": "Ada"}}', sinks=[editor])
    session.select(["user"])
    session.draft                       # '{\\n  "name": "Ada"\\n}'
    session.begin_edit()
    session.update_draft('{"age": 36}')
    session.save().ok                   # True; editor received the new text
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from json_inplace_edit.algorithm.config import EditConfig
from json_inplace_edit.algorithm.spans import load_document
from json_inplace_edit.api import mutate
from json_inplace_edit.protocols import DocumentSink
from json_inplace_edit.result import MutationResult
from json_inplace_edit.tree.locator import locate
from json_inplace_edit.tree.nodes import PathSegment, Row
from json_inplace_edit.tree.normalizer import normalize_rows, rows_for_value
from json_inplace_edit.tree.paths import path_to_display_string, validate_path

__all__ = ["NodeEditSession"]

logger = logging.getLogger(__name__)


class NodeEditSession:
    """Edit state for the node currently selected in a document.

    Args:
        document_text: The initial authoritative document text.
        sinks:   Objects satisfying ``DocumentSink``; each receives the full
                 new text after every successful save.
        config:  Formatting options passed to every mutation.
    """

    def __init__(
        self,
        document_text: str,
        sinks: Iterable[DocumentSink] = (),
        config: EditConfig | None = None,
    ) -> None:
        self._text = document_text
        self._sinks: list[DocumentSink] = list(sinks)
        self._config = config
        self._path: list[PathSegment] | None = None
        self._rows: list[Row] = []
        self._draft = normalize_rows(self._rows)
        self._editing = False
        self._draft_changed = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The authoritative document text."""
        return self._text

    @property
    def path(self) -> list[PathSegment] | None:
        """Path of the selected node, or None when nothing is selected."""
        return None if self._path is None else list(self._path)

    @property
    def rows(self) -> list[Row]:
        return list(self._rows)

    @property
    def draft(self) -> str:
        """The text in the edit box."""
        return self._draft

    @property
    def is_editing(self) -> bool:
        return self._editing

    @property
    def display_text(self) -> str:
        """Read-only node text, independent of the draft."""
        return normalize_rows(self._rows)

    @property
    def display_path(self) -> str:
        return path_to_display_string(self._path)

    # ------------------------------------------------------------------
    # Flow
    # ------------------------------------------------------------------

    def add_sink(self, sink: DocumentSink) -> None:
        self._sinks.append(sink)

    def select(self, path: Sequence[PathSegment]) -> str:
        """Select the node at ``path``, reset the draft and leave edit mode.

        Returns:
            The new draft.  A path that does not resolve selects no rows.

        Raises:
            InvalidPathError: If ``path`` has an invalid segment.
            DocumentParseError: If the document text is not valid JSON.
        """
        self._path = validate_path(path)
        self._load_rows()
        self._draft = normalize_rows(self._rows)
        self._editing = False
        self._draft_changed = False
        return self._draft

    def begin_edit(self) -> None:
        self._editing = True

    def update_draft(self, text: str) -> None:
        self._draft = text
        self._draft_changed = True

    def cancel(self) -> str:
        """Drop the draft and leave edit mode."""
        self._draft = normalize_rows(self._rows)
        self._editing = False
        self._draft_changed = False
        return self._draft

    def save(self) -> MutationResult:
        """Write the draft at the selected path (the root when nothing is selected).

        On success the new text is adopted, written to every sink, the node
        is reloaded and edit mode ends.  On failure nothing changes: the
        document, the sinks, the draft and the edit mode are left as they
        were, and the result carries the error for the caller to present.

        A draft untouched since the last select, cancel or save is not written.
        """
        path = self._path or []
        if not self._draft_changed:
            self._editing = False
            return MutationResult(self._text)

        result = mutate(self._text, path, self._draft, config=self._config)
        if result.error is not None:
            logger.warning(
                "Rejected save at %s: %s (%s)",
                path_to_display_string(path),
                result.error.message,
                result.error.kind,
            )
            return result

        self._text = result.document_text
        for sink in self._sinks:
            sink.write(self._text)
        logger.info(
            "Saved node at %s (%d sink(s) updated)",
            path_to_display_string(path),
            len(self._sinks),
        )

        if self._path is not None:
            self._load_rows()
        self._draft = normalize_rows(self._rows)
        self._editing = False
        self._draft_changed = False
        return result

    def _load_rows(self) -> None:
        location = locate(load_document(self._text), self._path or [])
        self._rows = rows_for_value(location.target) if location.found else []
