"""DocumentSink Protocol: where a committed document text is written.

Any object with a conformant ``write`` method passes ``isinstance`` checks,
no inheritance required.

Example::

    from json_inplace_edit.protocols import DocumentSink

    class EditorPane:
        def write(self, text: str) -> None:
            self.contents = text

    assert isinstance(EditorPane(), DocumentSink)  # True - structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentSink(Protocol):
    """Structural protocol for consumers of committed document text.

    ``write`` receives the complete new document text after every
    successful save; it is never called with an intermediate working copy.
    """

    def write(self, text: str) -> None: ...
