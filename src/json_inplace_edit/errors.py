"""
Exception types and exit codes for json-inplace-edit.

Each exception carries a ``kind`` matching a ``MutationErrorKind`` value so
``api.mutate`` can turn it into a typed result, and an ``exit_code`` used by
the command line.
"""

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INPUT_ERROR = 2
EXIT_PARSE_ERROR = 3


class JsonEditError(Exception):
    """Base exception for json-inplace-edit errors."""

    kind = "error"
    exit_code = EXIT_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidValueError(JsonEditError):
    """The proposed replacement text is not valid JSON."""

    kind = "invalid_input"
    exit_code = EXIT_INPUT_ERROR


class DocumentParseError(JsonEditError):
    """The stored document text is not valid JSON."""

    kind = "parse_error"
    exit_code = EXIT_PARSE_ERROR

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        super().__init__(message)


class InvalidPathError(JsonEditError, ValueError):
    """A path segment is empty, negative, or of an unsupported type."""

    kind = "invalid_path"
    exit_code = EXIT_INPUT_ERROR


class PathConflictError(JsonEditError):
    """A path runs through a scalar, or uses a key on an array (or an index on an object)."""

    kind = "path_conflict"
    exit_code = EXIT_INPUT_ERROR
