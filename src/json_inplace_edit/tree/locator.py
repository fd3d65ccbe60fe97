"""TreeLocator: resolves a path against a parsed JSON document.

Absence is an expected outcome (editing a key that does not exist yet), so
``locate`` reports it through ``Location.found`` instead of raising.  A found
node whose value is JSON null is distinct from a missing one.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from json_inplace_edit.tree.nodes import PathSegment, ValueKind, kind_of

__all__ = ["Location", "locate"]


@dataclass(frozen=True, slots=True)
class Location:
    """Result of a path lookup.

    Attributes:
        target: The value at the path; None when not found (check ``found``).
        found:  Whether every segment resolved.
        depth:  Number of segments that resolved before the walk stopped.
    """

    target: Any
    found: bool
    depth: int = 0

    @property
    def kind(self) -> ValueKind | None:
        """ValueKind of the target, or None when nothing was found."""
        return kind_of(self.target) if self.found else None


def locate(document: Any, path: Sequence[PathSegment]) -> Location:
    """Walk ``document`` one segment at a time.

    A str segment resolves only against an object containing that key; an
    int segment only against an array with that index in range.
    """
    current = document
    for depth, segment in enumerate(path):
        # bool MUST be excluded: bool subclasses int in Python
        if isinstance(segment, str) and isinstance(current, dict):
            if segment not in current:
                return Location(target=None, found=False, depth=depth)
            current = current[segment]
        elif (
            isinstance(segment, int)
            and not isinstance(segment, bool)
            and isinstance(current, list)
            and 0 <= segment < len(current)
        ):
            current = current[segment]
        else:
            return Location(target=None, found=False, depth=depth)
    return Location(target=current, found=True, depth=len(path))
