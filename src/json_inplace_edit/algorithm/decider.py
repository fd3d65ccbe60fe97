"""MergeDecider: chooses between a key-level merge and a whole-node replace.

Merging only makes sense when both sides have named fields that can be
reconciled one by one.  Everything else (missing target, scalars, arrays on
either side) replaces the node at the path.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

from json_inplace_edit.tree.locator import Location
from json_inplace_edit.tree.nodes import ValueKind, kind_of

__all__ = ["EditStrategy", "decide", "decide_for"]


class EditStrategy(StrEnum):
    """How a proposed value is written at a path.

    - MERGE:   Set each key of the proposed object individually.
    - REPLACE: Substitute the whole subtree at the path.
    """

    MERGE = auto()
    REPLACE = auto()


def decide(target: ValueKind | None, proposed: ValueKind) -> EditStrategy:
    """Pure decision over two kind tags; ``target`` is None when not found."""
    if target is ValueKind.OBJECT and proposed is ValueKind.OBJECT:
        return EditStrategy.MERGE
    return EditStrategy.REPLACE


def decide_for(location: Location, proposed: Any) -> EditStrategy:
    """Decide for a located target and a parsed proposed value."""
    return decide(location.kind, kind_of(proposed))
