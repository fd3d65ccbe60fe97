"""Localized text edits: computing and applying a single "set value at path".

``compute_set_edit`` returns ONE ``TextEdit`` that makes the value at a path
equal to a given value, touching only the range it has to:

- an existing value: its own character range is replaced;
- a new object member / array element: text is inserted after the last
  sibling (or into the body of an empty container);
- missing ancestors: the value is wrapped (``{key: value}`` or ``[value]``)
  once per missing level and inserted at the deepest existing parent.

Written fragments are rendered with ``json.dumps`` using the configured
indentation, re-indented relative to the line they start on.

Edits are always computed against one specific snapshot of the text.  A
caller that applies several edits in sequence must recompute each edit
against the text produced by the previous one.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from json_inplace_edit.algorithm.config import EditConfig
from json_inplace_edit.algorithm.spans import Span, scan
from json_inplace_edit.errors import InvalidValueError, PathConflictError
from json_inplace_edit.tree.nodes import PathSegment, ValueKind
from json_inplace_edit.tree.paths import path_to_display_string

__all__ = ["TextEdit", "apply_edits", "compute_set_edit", "render_value"]

_LINE_INDENT = re.compile(r"[ \t]*")


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``length`` characters at ``offset`` with ``content``."""

    offset: int
    length: int
    content: str

    @property
    def end(self) -> int:
        return self.offset + self.length


def apply_edits(text: str, edits: Sequence[TextEdit]) -> str:
    """Apply edits that were all computed against ``text``.

    Raises:
        ValueError: If two edits overlap or an edit falls outside ``text``.
    """
    ordered = sorted(edits, key=lambda edit: edit.offset)
    last_end = 0
    for edit in ordered:
        if edit.offset < last_end:
            msg = f"overlapping edit at offset {edit.offset}"
            raise ValueError(msg)
        if edit.length < 0 or edit.end > len(text):
            msg = f"edit [{edit.offset}, {edit.end}) is outside the text (length {len(text)})"
            raise ValueError(msg)
        last_end = edit.end

    # apply back to front so pending offsets stay valid
    for edit in reversed(ordered):
        text = text[: edit.offset] + edit.content + text[edit.end :]
    return text


def render_value(value: Any, base_indent: str, config: EditConfig, eol: str) -> str:
    """Render ``value`` as JSON whose continuation lines start with ``base_indent``.

    Raises:
        InvalidValueError: If ``value`` is not JSON serializable (including NaN).
    """
    try:
        body = json.dumps(value, indent=config.indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise InvalidValueError(f"value cannot be written as JSON: {exc}") from exc
    # json.dumps escapes newlines inside strings, so every "\n" here is structural
    return (eol + base_indent).join(body.split("\n"))


def compute_set_edit(
    text: str,
    path: Sequence[PathSegment],
    value: Any,
    config: EditConfig,
) -> TextEdit:
    """Compute the single edit that sets ``path`` to ``value`` in ``text``.

    Raises:
        DocumentParseError: If ``text`` is not valid JSON.
        PathConflictError: If the deepest existing ancestor cannot hold the
            next segment (a scalar, or a key into an array / index into an object).
        InvalidValueError: If ``value`` is not JSON serializable.
    """
    root = scan(text)
    eol = config.line_ending(text)

    remaining = list(path)
    parent: Span | None = None
    segment: PathSegment | None = None
    while remaining:
        segment = remaining.pop()
        parent = root.find(remaining)
        if parent is not None:
            break
        value = {segment: value} if isinstance(segment, str) else [value]

    if parent is None or segment is None:
        return _replace(text, root, value, config, eol)

    if parent.kind is ValueKind.OBJECT and isinstance(segment, str):
        existing = parent.child(segment)
        if existing is not None:
            return _replace(text, existing, value, config, eol)
        prefix = json.dumps(segment, ensure_ascii=False) + ": "
        return _insert_child(text, parent, prefix, value, config, eol)

    if parent.kind is ValueKind.ARRAY and isinstance(segment, int):
        existing = parent.child(segment)
        if existing is not None:
            return _replace(text, existing, value, config, eol)
        return _insert_child(text, parent, "", value, config, eol)

    where = path_to_display_string(remaining)
    msg = f"cannot set {segment!r} inside the {parent.kind} at {where}"
    raise PathConflictError(msg)


def _line_indent(text: str, offset: int) -> str:
    """Leading whitespace of the line containing ``offset``."""
    line_start = max(text.rfind("\n", 0, offset), text.rfind("\r", 0, offset)) + 1
    return _LINE_INDENT.match(text, line_start).group()  # type: ignore[union-attr]


def _starts_line(text: str, offset: int) -> bool:
    line_start = max(text.rfind("\n", 0, offset), text.rfind("\r", 0, offset)) + 1
    return not text[line_start:offset].strip(" \t")


def _replace(text: str, span: Span, value: Any, config: EditConfig, eol: str) -> TextEdit:
    content = render_value(value, _line_indent(text, span.offset), config, eol)
    return TextEdit(offset=span.offset, length=span.length, content=content)


def _insert_child(
    text: str,
    parent: Span,
    prefix: str,
    value: Any,
    config: EditConfig,
    eol: str,
) -> TextEdit:
    if not parent.children:
        # empty container: rewrite its body as an indented block
        base = _line_indent(text, parent.offset)
        indent = base + config.indent
        member = prefix + render_value(value, indent, config, eol)
        body_start = parent.offset + 1
        return TextEdit(
            offset=body_start,
            length=(parent.end - 1) - body_start,
            content=f"{eol}{indent}{member}{eol}{base}",
        )

    last = parent.children[-1]
    indent = _line_indent(text, last.start)
    member = prefix + render_value(value, indent, config, eol)
    if _starts_line(text, last.start):
        content = f",{eol}{indent}{member}"
    else:
        content = f", {member}"
    return TextEdit(offset=last.end, length=0, content=content)
