"""Tests for the path codec: validate_path, path_to_display_string, parse_display_string."""

from __future__ import annotations

import pytest

from json_inplace_edit.errors import InvalidPathError
from json_inplace_edit.tree.locator import locate
from json_inplace_edit.tree.paths import (
    parse_display_string,
    path_to_display_string,
    validate_path,
)


class TestValidatePath:
    def test_empty_path_is_root(self) -> None:
        assert validate_path([]) == []

    def test_returns_list_copy(self) -> None:
        assert validate_path(("a", 0)) == ["a", 0]

    def test_rejects_empty_key(self) -> None:
        with pytest.raises(InvalidPathError, match="empty key"):
            validate_path(["a", ""])

    def test_rejects_negative_index(self) -> None:
        with pytest.raises(InvalidPathError, match="negative index"):
            validate_path(["a", -1])

    def test_rejects_bool(self) -> None:
        with pytest.raises(InvalidPathError, match="bool"):
            validate_path([True])

    @pytest.mark.parametrize("segment", [1.5, None, ("a",), b"a"])
    def test_rejects_unsupported_types(self, segment: object) -> None:
        with pytest.raises(InvalidPathError):
            validate_path([segment])  # type: ignore[list-item]

    def test_invalid_path_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_path([""])


class TestPathToDisplayString:
    def test_root(self) -> None:
        assert path_to_display_string([]) == "$"

    def test_none_is_root(self) -> None:
        assert path_to_display_string(None) == "$"

    def test_keys_and_indices(self) -> None:
        assert path_to_display_string(["customer", 0, "name"]) == '$["customer"][0]["name"]'

    def test_key_quotes_are_escaped(self) -> None:
        assert path_to_display_string(['say "hi"']) == '$["say \\"hi\\""]'

    def test_non_ascii_key_kept(self) -> None:
        assert path_to_display_string(["café"]) == '$["café"]'

    def test_numeric_looking_key_stays_quoted(self) -> None:
        assert path_to_display_string(["0"]) == '$["0"]'

    def test_rejects_invalid_path(self) -> None:
        with pytest.raises(InvalidPathError):
            path_to_display_string([""])


class TestParseDisplayString:
    @pytest.mark.parametrize(
        "path",
        [
            [],
            ["customer", 0, "name"],
            ["0", 0],
            ['say "hi"', "back\\slash", "]["],
            ["café", 12],
        ],
    )
    def test_inverse_of_rendering(self, path: list[str | int]) -> None:
        assert parse_display_string(path_to_display_string(path)) == path

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_display_string('  $["a"]\n') == ["a"]

    @pytest.mark.parametrize(
        "text",
        ["", '["a"]', "$[a]", '$["a"', "$[-1]", '$[""]', '$["a"]x', '$["a\\q"]'],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(InvalidPathError):
            parse_display_string(text)

    def test_decoded_path_resolves_same_location(self) -> None:
        document = {"customer": [{"name": "Ada"}]}
        path = ["customer", 0, "name"]
        decoded = parse_display_string(path_to_display_string(path))
        assert locate(document, decoded) == locate(document, path)
        assert locate(document, decoded).target == "Ada"
