"""NodeNormalizer: converts a node's rows to editable JSON text.

``normalize_rows`` is what a node panel displays and what the edit box is
seeded with.  Container rows are dropped because nested structure is
presented by the tree view itself, not inlined into the node text.
``rows_for_value`` builds those rows from a parsed node.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from json_inplace_edit.tree.nodes import Row, ValueKind, kind_of

__all__ = ["normalize_rows", "rows_for_value"]


def normalize_rows(rows: Sequence[Row] | None) -> str:
    """Render a node's rows as JSON text.

    - No rows: ``{}``.
    - A single keyless scalar row: that value as JSON text (root scalars).
    - Otherwise: the keyed scalar rows as a two-space indented object.
    """
    if not rows:
        return "{}"
    if len(rows) == 1 and not rows[0].key and not rows[0].type.is_container:
        return json.dumps(rows[0].value, ensure_ascii=False)

    obj: dict[str, Any] = {}
    for row in rows:
        if row.type.is_container:
            continue
        if row.key:
            obj[row.key] = row.value
    return json.dumps(obj, indent=2, ensure_ascii=False)


def rows_for_value(value: Any) -> list[Row]:
    """Flatten a parsed node into rows.

    Objects yield one row per key, arrays one keyless row per element, and
    scalars a single keyless row.  Container rows carry their child count.
    """
    kind = kind_of(value)
    if kind is ValueKind.OBJECT:
        return [_row(key, child) for key, child in value.items()]
    if kind is ValueKind.ARRAY:
        return [_row(None, child) for child in value]
    return [Row(key=None, value=value, type=kind)]


def _row(key: str | None, value: Any) -> Row:
    kind = kind_of(value)
    if kind.is_container:
        return Row(key=key, value=len(value), type=kind)
    return Row(key=key, value=value, type=kind)
