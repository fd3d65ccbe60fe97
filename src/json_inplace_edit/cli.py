"""
Command-line interface for json-inplace-edit.

Provides the `json-inplace-edit` command with the following subcommands:
- set: Write a JSON value at a path of a document, keeping its formatting
- show: Print the editable text of the node at a path
- path: Render path segments as a display string
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .algorithm.config import EditConfig
from .api import mutate
from .errors import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    DocumentParseError,
    InvalidPathError,
    InvalidValueError,
    JsonEditError,
    PathConflictError,
)
from .logging_config import setup_logging
from .result import MutationErrorKind
from .session import NodeEditSession
from .tree.nodes import PathSegment
from .tree.paths import parse_display_string, path_to_display_string

logger = logging.getLogger(__name__)

_EXIT_CODES = {
    MutationErrorKind.INVALID_INPUT: InvalidValueError.exit_code,
    MutationErrorKind.PARSE_ERROR: DocumentParseError.exit_code,
    MutationErrorKind.INVALID_PATH: InvalidPathError.exit_code,
    MutationErrorKind.PATH_CONFLICT: PathConflictError.exit_code,
}


class FileSink:
    """DocumentSink writing committed text back to a file, byte for byte."""

    def __init__(self, path: Path):
        self.path = path

    def write(self, text: str) -> None:
        # encode first so an unencodable text never truncates the file
        data = text.encode("utf-8")
        with open(self.path, "wb") as handle:
            handle.write(data)


def _read_document(path: Path) -> str:
    # newline="" keeps \r\n intact so untouched lines round-trip exactly
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _config_from_args(args: argparse.Namespace) -> EditConfig:
    return EditConfig(tab_size=args.indent, insert_spaces=not args.tabs)


def set_command(args: argparse.Namespace) -> int:
    """
    Execute the set command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code.
    """
    file_path = Path(args.file)
    try:
        document_text = _read_document(file_path)
    except OSError as e:
        logger.error(f"Cannot read {file_path}: {e}")
        return EXIT_ERROR

    try:
        path = parse_display_string(args.path)
    except InvalidPathError as e:
        logger.error(f"Invalid path: {e.message}")
        return e.exit_code

    config = _config_from_args(args)
    if args.in_place:
        session = NodeEditSession(document_text, sinks=[FileSink(file_path)], config=config)
        try:
            session.select(path)
        except DocumentParseError as e:
            logger.error(f"{e.kind}: {e.message}")
            return e.exit_code
        session.begin_edit()
        session.update_draft(args.value)
        try:
            result = session.save()
        except (OSError, UnicodeError) as e:
            logger.error(f"Cannot write {file_path}: {e}")
            return EXIT_ERROR
    else:
        result = mutate(document_text, path, args.value, config=config)

    if result.error is not None:
        logger.error(f"{result.error.kind}: {result.error.message}")
        return _EXIT_CODES[result.error.kind]

    if args.in_place:
        logger.info(f"Updated {path_to_display_string(path)} in {file_path}")
    else:
        sys.stdout.write(result.document_text)
    return EXIT_SUCCESS


def show_command(args: argparse.Namespace) -> int:
    """
    Execute the show command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code.
    """
    file_path = Path(args.file)
    try:
        document_text = _read_document(file_path)
    except OSError as e:
        logger.error(f"Cannot read {file_path}: {e}")
        return EXIT_ERROR

    try:
        session = NodeEditSession(document_text)
        session.select(parse_display_string(args.path))
    except JsonEditError as e:
        logger.error(e.message)
        return e.exit_code

    print(session.display_path)
    print(session.display_text)
    return EXIT_SUCCESS


def path_command(args: argparse.Namespace) -> int:
    """
    Execute the path command.

    Segments made only of digits are array indices; everything else is a key.
    """
    segments: list[PathSegment] = [
        int(segment) if segment.isdigit() else segment for segment in args.segments
    ]
    try:
        print(path_to_display_string(segments))
    except InvalidPathError as e:
        logger.error(e.message)
        return e.exit_code
    return EXIT_SUCCESS


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="json-inplace-edit",
        description="Edit values inside JSON documents without reformatting the rest of the file.",
        epilog='Example: json-inplace-edit set data.json \'$["user"]\' \'{"age": 36}\' --in-place',
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"json-inplace-edit {__version__}",
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (INFO level logging)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output (DEBUG level logging)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress output except errors",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation width of written values (default: 2)",
    )
    parser.add_argument(
        "--tabs",
        action="store_true",
        help="Indent written values with tabs",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    set_parser = subparsers.add_parser(
        "set",
        help="Write a JSON value at a path",
        description=(
            "Write VALUE at PATH. When both the node and VALUE are objects the "
            "keys of VALUE are merged into the node; otherwise the node is replaced."
        ),
    )
    set_parser.add_argument("file", help="JSON document to edit")
    set_parser.add_argument("path", help='Node path, e.g. $["customer"][0]')
    set_parser.add_argument("value", help="New value as JSON text")
    set_parser.add_argument(
        "-i", "--in-place",
        action="store_true",
        help="Write the result back to FILE instead of printing it",
    )
    set_parser.set_defaults(func=set_command)

    show_parser = subparsers.add_parser(
        "show",
        help="Print the editable text of a node",
    )
    show_parser.add_argument("file", help="JSON document")
    show_parser.add_argument("path", help='Node path, e.g. $["customer"][0]')
    show_parser.set_defaults(func=show_command)

    path_parser = subparsers.add_parser(
        "path",
        help="Render path segments as a display string",
    )
    path_parser.add_argument("segments", nargs="*", help="Keys and indices, root first")
    path_parser.set_defaults(func=path_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(
        verbose=args.verbose, debug=args.debug, quiet=args.quiet, log_file=args.log_file
    )

    if args.indent < 1:
        logger.error(f"--indent must be >= 1, got {args.indent}")
        return EXIT_ERROR

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_SUCCESS
    return args.func(args)


def main_cli() -> None:
    """
    CLI entry point for console_scripts.

    Calls main() and exits with the returned code.
    """
    sys.exit(main())


if __name__ == "__main__":
    main_cli()
