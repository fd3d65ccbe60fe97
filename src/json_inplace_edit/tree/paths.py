"""Path codec: validation and display rendering of node paths.

A path is a sequence of segments, each either a non-empty object key (str)
or a non-negative array index (int).  The display form is a bracketed index
expression rooted at ``$``:

    []                          -> $
    ["customer", 0, "name"]     -> $["customer"][0]["name"]

Keys are quoted with JSON string rules, so ``parse_display_string`` can
recover the exact segments from any rendered path.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from json.decoder import scanstring

from json_inplace_edit.errors import InvalidPathError
from json_inplace_edit.tree.nodes import PathSegment

__all__ = ["ROOT_MARKER", "parse_display_string", "path_to_display_string", "validate_path"]

ROOT_MARKER = "$"

_INDEX = re.compile(r"\d+")


def validate_path(path: Iterable[PathSegment]) -> list[PathSegment]:
    """Check every segment of ``path`` and return it as a list.

    Raises:
        InvalidPathError: On an empty key, a negative index, a bool, or any
            segment that is neither str nor int.
    """
    segments = list(path)
    for position, segment in enumerate(segments):
        # bool MUST be rejected before the int check: bool subclasses int
        if isinstance(segment, bool):
            msg = f"segment {position} must be a key or an index, got bool {segment!r}"
            raise InvalidPathError(msg)
        if isinstance(segment, str):
            if not segment:
                msg = f"segment {position} is an empty key"
                raise InvalidPathError(msg)
        elif isinstance(segment, int):
            if segment < 0:
                msg = f"segment {position} is a negative index: {segment}"
                raise InvalidPathError(msg)
        else:
            msg = (
                f"segment {position} must be a key or an index, "
                f"got {type(segment).__name__}"
            )
            raise InvalidPathError(msg)
    return segments


def path_to_display_string(path: Iterable[PathSegment] | None) -> str:
    """Render ``path`` as ``$[...][...]``; the root (empty or None) renders as ``$``."""
    if path is None:
        return ROOT_MARKER
    parts = [ROOT_MARKER]
    for segment in validate_path(path):
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(f"[{json.dumps(segment, ensure_ascii=False)}]")
    return "".join(parts)


def parse_display_string(text: str) -> list[PathSegment]:
    """Parse a display string produced by ``path_to_display_string``.

    Raises:
        InvalidPathError: If ``text`` is not a well-formed display string.
    """
    text = text.strip()
    if not text.startswith(ROOT_MARKER):
        msg = f"path must start with {ROOT_MARKER!r}: {text!r}"
        raise InvalidPathError(msg)

    segments: list[PathSegment] = []
    pos = len(ROOT_MARKER)
    while pos < len(text):
        if text[pos] != "[":
            msg = f"expected '[' at offset {pos} in {text!r}"
            raise InvalidPathError(msg)
        pos += 1
        if text.startswith('"', pos):
            try:
                key, pos = scanstring(text, pos + 1)
            except json.JSONDecodeError as exc:
                msg = f"malformed key at offset {pos} in {text!r}: {exc.msg}"
                raise InvalidPathError(msg) from exc
            segments.append(key)
        else:
            match = _INDEX.match(text, pos)
            if match is None:
                msg = f"expected a quoted key or an index at offset {pos} in {text!r}"
                raise InvalidPathError(msg)
            segments.append(int(match.group()))
            pos = match.end()
        if not text.startswith("]", pos):
            msg = f"expected ']' at offset {pos} in {text!r}"
            raise InvalidPathError(msg)
        pos += 1

    return validate_path(segments)
