"""Span scanner: maps every value of a JSON text to its character range.

``scan`` walks the text once and returns a ``Span`` tree mirroring the
document.  Containers are walked by hand so each child's range is known;
scalars and keys are decoded with the standard ``json`` decoder primitives,
so the accepted grammar is exactly the one ``json.loads`` accepts (minus the
NaN/Infinity extensions).

Example::

    root = scan('{"a": [1, 2]}')
    root.find(["a", 1])          # Span(kind=NUMBER, offset=10, end=11)
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from json.decoder import scanstring
from typing import Any, NoReturn

from json_inplace_edit.errors import DocumentParseError, InvalidValueError
from json_inplace_edit.tree.nodes import PathSegment, ValueKind, kind_of

__all__ = ["Span", "load_document", "load_value", "scan"]

# JSON insignificant whitespace (RFC 8259 section 2)
_WHITESPACE = re.compile(r"[ \t\n\r]*")


@dataclass(slots=True)
class Span:
    """Character range of one value inside a JSON text.

    Attributes:
        kind:       ValueKind of the value.
        offset:     Index of the value's first character.
        end:        Index one past the value's last character.
        key:        Member key when the value belongs to an object.
        key_offset: Index of the member key's opening quote.
        children:   Element spans (arrays) or member value spans (objects),
                    in text order.
    """

    kind: ValueKind
    offset: int
    end: int
    key: str | None = None
    key_offset: int | None = None
    children: list[Span] = field(default_factory=list)

    @property
    def length(self) -> int:
        return self.end - self.offset

    @property
    def start(self) -> int:
        """Start of the whole member (its key for object members)."""
        return self.key_offset if self.key_offset is not None else self.offset

    def child(self, segment: PathSegment) -> Span | None:
        """Direct child addressed by ``segment``, or None."""
        if self.kind is ValueKind.OBJECT and isinstance(segment, str):
            # last occurrence wins, as with json.loads
            for candidate in reversed(self.children):
                if candidate.key == segment:
                    return candidate
            return None
        if (
            self.kind is ValueKind.ARRAY
            and isinstance(segment, int)
            and not isinstance(segment, bool)
            and 0 <= segment < len(self.children)
        ):
            return self.children[segment]
        return None

    def find(self, path: Sequence[PathSegment]) -> Span | None:
        """Descendant addressed by ``path``; the empty path is this span."""
        node: Span | None = self
        for segment in path:
            if node is None:
                return None
            node = node.child(segment)
        return node


def _fail(message: str, pos: int) -> NoReturn:
    raise DocumentParseError(f"{message} at offset {pos}", pos)


def _reject_document_constant(name: str) -> NoReturn:
    raise DocumentParseError(f"{name} is not valid JSON")


def _reject_value_constant(name: str) -> NoReturn:
    raise InvalidValueError(f"{name} is not valid JSON")


_decoder = json.JSONDecoder(parse_constant=_reject_document_constant)


def load_document(text: str) -> Any:
    """Parse a stored document, raising ``DocumentParseError`` on failure."""
    try:
        return json.loads(text, parse_constant=_reject_document_constant)
    except json.JSONDecodeError as exc:
        msg = f"document is not valid JSON: {exc.msg} (line {exc.lineno} column {exc.colno})"
        raise DocumentParseError(msg, exc.pos) from exc
    except RecursionError as exc:
        raise DocumentParseError("document is nested too deeply") from exc


def load_value(text: str) -> Any:
    """Parse user-supplied replacement text, raising ``InvalidValueError`` on failure."""
    try:
        return json.loads(text, parse_constant=_reject_value_constant)
    except json.JSONDecodeError as exc:
        msg = f"value is not valid JSON: {exc.msg} (line {exc.lineno} column {exc.colno})"
        raise InvalidValueError(msg) from exc
    except RecursionError as exc:
        raise InvalidValueError("value is nested too deeply") from exc


def scan(text: str) -> Span:
    """Scan a complete JSON text into a Span tree.

    Containers are tracked on an explicit stack, so nesting depth is bounded
    by memory rather than the interpreter's recursion limit.

    Raises:
        DocumentParseError: If ``text`` is not a single valid JSON value.
    """
    stack: list[Span] = []
    key: str | None = None
    key_offset: int | None = None
    pos = _skip(text, 0)

    while True:
        node, pos = _open_value(text, pos, key, key_offset)
        if stack:
            stack[-1].children.append(node)

        if node.kind.is_container and node.end == node.offset:
            stack.append(node)
            if node.kind is ValueKind.OBJECT:
                key, key_offset, pos = _scan_key(text, pos)
            else:
                key = key_offset = None
            continue

        # close finished containers until the next sibling or the end
        while True:
            if not stack:
                pos = _skip(text, pos)
                if pos != len(text):
                    _fail("extra data after the document", pos)
                return node
            parent = stack[-1]
            close = "}" if parent.kind is ValueKind.OBJECT else "]"
            pos = _skip(text, pos)
            if text.startswith(",", pos):
                pos = _skip(text, pos + 1)
                if parent.kind is ValueKind.OBJECT:
                    key, key_offset, pos = _scan_key(text, pos)
                else:
                    key = key_offset = None
                break
            if text.startswith(close, pos):
                parent.end = pos = pos + 1
                node = stack.pop()
                continue
            _fail(f"expected ',' or '{close}'", pos)


def _skip(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()  # type: ignore[union-attr]


def _open_value(
    text: str, pos: int, key: str | None, key_offset: int | None
) -> tuple[Span, int]:
    """Span of the value at ``pos``.

    Scalars come back complete.  A non-empty container comes back open, with
    ``end == offset`` and the position of its first child; an empty one comes
    back closed.
    """
    if pos >= len(text):
        _fail("unexpected end of document", pos)
    char = text[pos]
    if char in "{[":
        kind = ValueKind.OBJECT if char == "{" else ValueKind.ARRAY
        node = Span(kind=kind, offset=pos, end=pos, key=key, key_offset=key_offset)
        inner = _skip(text, pos + 1)
        if text.startswith("}" if char == "{" else "]", inner):
            node.end = inner + 1
            return node, node.end
        return node, inner
    try:
        value, end = _decoder.raw_decode(text, pos)
    except json.JSONDecodeError as exc:
        _fail(exc.msg, exc.pos)
    return Span(kind=kind_of(value), offset=pos, end=end, key=key, key_offset=key_offset), end


def _scan_key(text: str, pos: int) -> tuple[str, int, int]:
    """Member key at ``pos``: returns the key, its offset and the value position."""
    if not text.startswith('"', pos):
        _fail("expected a property name", pos)
    try:
        key, end = scanstring(text, pos + 1)
    except json.JSONDecodeError as exc:
        _fail(exc.msg, exc.pos)
    end = _skip(text, end)
    if not text.startswith(":", end):
        _fail("expected ':'", end)
    return key, pos, _skip(text, end + 1)
