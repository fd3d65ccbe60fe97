"""EditConfig: formatting options for inserted and replaced fragments.

EditConfig is a frozen (immutable) dataclass.  It only governs the text the
engine writes; untouched regions of a document keep their own formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

_LINE_ENDINGS = ("\n", "\r\n", "\r")


@dataclass(frozen=True, slots=True)
class EditConfig:
    """Immutable formatting configuration for the edit engine.

    Attributes:
        tab_size: Width of one indentation level in spaces (>= 1).
        insert_spaces: Indent with spaces when True, with a tab when False.
        eol: Line ending for written fragments.  None detects it from the
            document (``\\r\\n`` if the document contains one, else ``\\n``).
    """

    tab_size: int = 2
    insert_spaces: bool = True
    eol: str | None = None

    def __post_init__(self) -> None:
        if self.tab_size < 1:
            msg = f"tab_size must be >= 1, got {self.tab_size}"
            raise ValueError(msg)
        if self.eol is not None and self.eol not in _LINE_ENDINGS:
            msg = f"eol must be one of {_LINE_ENDINGS!r}, got {self.eol!r}"
            raise ValueError(msg)

    @property
    def indent(self) -> str:
        """One indentation level."""
        return " " * self.tab_size if self.insert_spaces else "\t"

    def line_ending(self, text: str) -> str:
        """The line ending to write into ``text``."""
        if self.eol is not None:
            return self.eol
        return "\r\n" if "\r\n" in text else "\n"
