"""pytest plugin for json-inplace-edit.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import pytest

from json_inplace_edit import EditConfig, mutate, path_to_display_string


@pytest.fixture(scope="session")
def assert_json_mutation() -> Any:
    """Fixture that returns a callable mutation asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to mutate() which creates a fresh EditEngine per call).

    Usage in tests::

        def test_merge(assert_json_mutation):
            assert_json_mutation('{"a": 1}', [], '{"b": 2}', {"a": 1, "b": 2})

    Returns:
        A callable ``_assert(document_text, path, proposed, expected, config=None)``
        that returns the new document text, or raises ``AssertionError`` when
        the mutation fails or its parsed result differs from ``expected``.
    """

    def _assert(
        document_text: str,
        path: Sequence[str | int],
        proposed: str,
        expected: Any,
        config: EditConfig | None = None,
    ) -> str:
        """Assert that writing ``proposed`` at ``path`` yields ``expected``.

        Args:
            document_text: The document before the mutation.
            path:          Keys and indices of the edited node.
            proposed:      The new value as JSON text.
            expected:      The whole parsed document expected afterwards.
            config:        Optional EditConfig for the mutation.

        Raises:
            AssertionError: When the mutation is rejected or produces a
                document that does not parse to ``expected``.
        """
        result = mutate(document_text, path, proposed, config=config)
        where = path_to_display_string(path)
        if result.error is not None:
            raise AssertionError(
                f"mutation at {where} rejected: "
                f"{result.error.kind}: {result.error.message}\n"
                f"  proposed: {proposed}"
            )
        actual = json.loads(result.document_text)
        if actual != expected:
            raise AssertionError(
                f"mutation at {where} produced an unexpected document\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}\n"
                f"  text:\n{result.document_text}"
            )
        return result.document_text

    return _assert
