"""MutationResult and MutationError for mutate() output.

mutate() never raises for the error kinds below; it returns a
MutationResult whose ``document_text`` is the unchanged input on failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["MutationError", "MutationErrorKind", "MutationResult"]


class MutationErrorKind(StrEnum):
    """Why a mutation was rejected.

    - INVALID_INPUT: The proposed text is not valid JSON.
    - PARSE_ERROR:   The stored document itself is not valid JSON.
    - INVALID_PATH:  The path has an empty key, a negative index, or a
                     segment of an unsupported type.
    - PATH_CONFLICT: The path runs through a scalar, or uses a key on an
                     array (an index on an object) where it must create a child.
    """

    INVALID_INPUT = auto()
    PARSE_ERROR = auto()
    INVALID_PATH = auto()
    PATH_CONFLICT = auto()


@dataclass(frozen=True, slots=True)
class MutationError:
    """A rejected mutation.

    Attributes:
        kind:    The error kind.
        message: Human-readable description for the caller to present.
    """

    kind: MutationErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of a mutate() call.

    Attributes:
        document_text: The new document text on success; the original,
            unchanged text on failure.
        error: None on success, otherwise why the mutation was rejected.
    """

    document_text: str
    error: MutationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
