"""Edit algorithm subpackage.

Exports:
- EditConfig: formatting options for written fragments
- EditStrategy / decide / decide_for: merge-or-replace decision
- EditEngine: applies a value at a path to a document text
- TextEdit / apply_edits / compute_set_edit: localized edit primitive
- Span / scan: character ranges of a JSON text's values
"""

from json_inplace_edit.algorithm.config import EditConfig
from json_inplace_edit.algorithm.decider import EditStrategy, decide, decide_for
from json_inplace_edit.algorithm.edits import TextEdit, apply_edits, compute_set_edit
from json_inplace_edit.algorithm.engine import EditEngine
from json_inplace_edit.algorithm.spans import Span, scan

__all__ = [
    "EditConfig",
    "EditEngine",
    "EditStrategy",
    "Span",
    "TextEdit",
    "apply_edits",
    "compute_set_edit",
    "decide",
    "decide_for",
    "scan",
]
