"""Unit tests for the public API functions: mutate, apply_value and the display helpers."""

from __future__ import annotations

import json

import pytest

from json_inplace_edit import (
    EditConfig,
    InvalidValueError,
    MutationErrorKind,
    MutationResult,
    Row,
    ValueKind,
    apply_value,
    mutate,
    normalize_rows,
    path_to_display_string,
)


class TestMutate:
    """Tests for the mutate() function."""

    def test_success_returns_new_text(self) -> None:
        result = mutate('{"a": 1}', [], '{"b": 2}')
        assert isinstance(result, MutationResult)
        assert result.ok is True
        assert result.error is None
        assert json.loads(result.document_text) == {"a": 1, "b": 2}

    def test_invalid_input_leaves_text_unchanged(self) -> None:
        text = '{"a": 1}'
        result = mutate(text, ["a"], "{invalid")
        assert result.ok is False
        assert result.error is not None
        assert result.error.kind is MutationErrorKind.INVALID_INPUT
        assert result.document_text == text

    def test_invalid_input_checked_before_document(self) -> None:
        result = mutate("{also invalid", [], "{invalid")
        assert result.error is not None
        assert result.error.kind is MutationErrorKind.INVALID_INPUT

    def test_parse_error(self) -> None:
        result = mutate("{broken", [], "1")
        assert result.error is not None
        assert result.error.kind is MutationErrorKind.PARSE_ERROR
        assert result.document_text == "{broken"

    def test_invalid_path(self) -> None:
        result = mutate('{"a": 1}', [-1], "1")
        assert result.error is not None
        assert result.error.kind is MutationErrorKind.INVALID_PATH

    def test_path_conflict(self) -> None:
        result = mutate('{"a": 1}', ["a", "b"], "1")
        assert result.error is not None
        assert result.error.kind is MutationErrorKind.PATH_CONFLICT
        assert "number" in result.error.message

    def test_deeply_nested_document(self) -> None:
        depth = 600
        text = "[" * depth + "]" * depth
        assert mutate(text, [], "1").document_text == "1"
        result = mutate(text, [0] * (depth - 1), "1")
        assert result.ok
        assert result.document_text == "[" * (depth - 1) + "1" + "]" * (depth - 1)

    def test_root_replace(self) -> None:
        result = mutate('{"a": 1}', [], "42")
        assert json.loads(result.document_text) == 42

    def test_config_passthrough(self) -> None:
        result = mutate("{}", [], '{"a": 1}', config=EditConfig(tab_size=4))
        assert result.document_text == '{\n    "a": 1\n}'

    def test_no_state_between_calls(self) -> None:
        first = mutate('{"a": 1}', ["a"], "2")
        second = mutate('{"a": 1}', ["a"], "2")
        assert first == second


class TestApplyValue:
    def test_parsed_value(self) -> None:
        assert apply_value('{"a": [1, 2]}', ["a", 0], "x") == '{"a": ["x", 2]}'

    def test_raises_instead_of_returning(self) -> None:
        with pytest.raises(InvalidValueError):
            apply_value('{"a": 1}', ["a"], {1, 2})


class TestDisplayHelpers:
    def test_path_to_display_string(self) -> None:
        assert path_to_display_string(["customer", 0, "name"]) == '$["customer"][0]["name"]'

    def test_normalize_rows(self) -> None:
        assert normalize_rows([Row(key=None, value="x", type=ValueKind.STRING)]) == '"x"'
