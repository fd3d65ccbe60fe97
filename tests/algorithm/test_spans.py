"""Tests for the span scanner and the document/value loaders."""

from __future__ import annotations

import sys

import pytest

from json_inplace_edit.algorithm.spans import load_document, load_value, scan
from json_inplace_edit.errors import DocumentParseError, InvalidValueError
from json_inplace_edit.tree.nodes import ValueKind


class TestScan:
    def test_offsets_of_nested_values(self) -> None:
        text = '{"a": [1, 2]}'
        root = scan(text)
        assert (root.offset, root.end) == (0, len(text))

        array = root.find(["a"])
        assert array is not None
        assert array.kind is ValueKind.ARRAY
        assert text[array.offset : array.end] == "[1, 2]"
        assert array.key == "a"
        assert array.key_offset == 1
        assert array.start == 1

        element = root.find(["a", 1])
        assert element is not None
        assert (element.offset, element.end) == (10, 11)

    def test_every_span_covers_its_text(self) -> None:
        text = '{\n  "s": "x\\"y",\n  "n": -1.5e3,\n  "b": true,\n  "z": null,\n  "o": {}\n}'
        root = scan(text)
        assert [text[child.offset : child.end] for child in root.children] == [
            '"x\\"y"',
            "-1.5e3",
            "true",
            "null",
            "{}",
        ]
        assert [child.kind for child in root.children] == [
            ValueKind.STRING,
            ValueKind.NUMBER,
            ValueKind.BOOLEAN,
            ValueKind.NULL,
            ValueKind.OBJECT,
        ]

    def test_surrounding_whitespace_not_in_root(self) -> None:
        root = scan("  \n[ ]\n")
        assert (root.offset, root.end) == (3, 6)
        assert root.children == []

    def test_scalar_root(self) -> None:
        root = scan('"x"')
        assert root.kind is ValueKind.STRING
        assert root.length == 3

    def test_duplicate_keys_resolve_to_last(self) -> None:
        text = '{"a": 1, "a": 2}'
        span = scan(text).find(["a"])
        assert span is not None
        assert text[span.offset : span.end] == "2"

    def test_find_missing(self) -> None:
        root = scan('{"a": [1]}')
        assert root.find(["b"]) is None
        assert root.find(["a", 1]) is None
        assert root.find(["a", "0"]) is None
        assert root.find(["a", 0, "x"]) is None

    def test_mixed_nesting_closes_every_container(self) -> None:
        text = '{"a": [{"b": []}, 2], "c": {}}'
        root = scan(text)
        assert [(child.key, text[child.offset : child.end]) for child in root.children] == [
            ("a", '[{"b": []}, 2]'),
            ("c", "{}"),
        ]
        inner = root.find(["a", 0, "b"])
        assert inner is not None
        assert (inner.offset, inner.end) == (13, 15)

    def test_deep_nesting_beyond_recursion_limit(self) -> None:
        depth = sys.getrecursionlimit() * 3
        text = "[" * depth + "]" * depth
        root = scan(text)
        span = root.find([0] * (depth - 1))
        assert span is not None
        assert (span.offset, span.end) == (depth - 1, depth + 1)

    @pytest.mark.parametrize(
        "text",
        ["", "{", '{"a" 1}', '{"a": 1,}', "[1 2]", "[1,]", "{} {}", "{a: 1}", '"open'],
    )
    def test_invalid_text(self, text: str) -> None:
        with pytest.raises(DocumentParseError):
            scan(text)

    def test_error_carries_position(self) -> None:
        with pytest.raises(DocumentParseError) as exc_info:
            scan("[1 2]")
        assert exc_info.value.position == 3


class TestLoaders:
    def test_load_document(self) -> None:
        assert load_document('{"a": [1]}') == {"a": [1]}

    def test_load_document_invalid(self) -> None:
        with pytest.raises(DocumentParseError, match="line 1 column 2"):
            load_document("{invalid")

    def test_load_document_rejects_nan(self) -> None:
        with pytest.raises(DocumentParseError, match="NaN"):
            load_document('{"a": NaN}')

    def test_load_value(self) -> None:
        assert load_value("42") == 42

    def test_load_value_invalid(self) -> None:
        with pytest.raises(InvalidValueError):
            load_value("{invalid")

    def test_load_value_rejects_infinity(self) -> None:
        with pytest.raises(InvalidValueError, match="Infinity"):
            load_value("[Infinity]")
