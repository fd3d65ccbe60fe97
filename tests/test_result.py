"""Tests for MutationResult, MutationError and MutationErrorKind.

Covers:
- Construction of success and failure results
- ok property
- Frozen (immutable) enforcement
- Error kinds line up with the exception kinds
- __all__ export
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_inplace_edit import errors
from json_inplace_edit.result import MutationError, MutationErrorKind, MutationResult


class TestMutationResult:
    def test_success(self) -> None:
        result = MutationResult(document_text="{}")
        assert result.ok is True
        assert result.error is None

    def test_failure(self) -> None:
        error = MutationError(kind=MutationErrorKind.INVALID_INPUT, message="bad")
        result = MutationResult(document_text="{}", error=error)
        assert result.ok is False
        assert result.error is error

    def test_frozen(self) -> None:
        result = MutationResult(document_text="{}")
        with pytest.raises(FrozenInstanceError):
            result.document_text = "[]"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert MutationResult("1") == MutationResult("1")
        assert MutationResult("1") != MutationResult("2")


class TestMutationError:
    def test_frozen(self) -> None:
        error = MutationError(kind=MutationErrorKind.PARSE_ERROR, message="x")
        with pytest.raises(FrozenInstanceError):
            error.message = "y"  # type: ignore[misc]


class TestMutationErrorKind:
    def test_values(self) -> None:
        assert MutationErrorKind.INVALID_INPUT == "invalid_input"
        assert MutationErrorKind.PARSE_ERROR == "parse_error"
        assert MutationErrorKind.INVALID_PATH == "invalid_path"
        assert MutationErrorKind.PATH_CONFLICT == "path_conflict"

    @pytest.mark.parametrize(
        "exception",
        [
            errors.InvalidValueError,
            errors.DocumentParseError,
            errors.InvalidPathError,
            errors.PathConflictError,
        ],
    )
    def test_every_exception_kind_is_a_member(self, exception: type[errors.JsonEditError]) -> None:
        assert MutationErrorKind(exception.kind) in MutationErrorKind


def test_all_exports() -> None:
    from json_inplace_edit import result

    assert set(result.__all__) == {"MutationError", "MutationErrorKind", "MutationResult"}
