"""
Logging configuration for the json-inplace-edit command line.

The library modules only create module loggers; handlers are installed here,
once, by the CLI entry point:
- CLI verbosity flags (--quiet, --verbose, --debug)
- Console and optional file logging
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

DEFAULT_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    log_file: Path | None = None,
    format_str: str | None = None,
) -> None:
    """
    Configure the root logger.

    Subsequent calls replace the handlers installed by earlier ones.

    Args:
        level: The logging level (e.g., logging.DEBUG, logging.INFO).
        log_file: Optional path to a log file. Directory will be created if missing.
        format_str: Optional custom format string. If None, uses level-appropriate default.
    """
    if format_str is None:
        format_str = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_str))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        except OSError as e:
            logging.getLogger(__name__).warning(
                "Could not set up file logging to %s: %s", log_file, e
            )
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
            root_logger.addHandler(file_handler)

    logging.getLogger("json_inplace_edit").setLevel(level)


def get_log_level_from_flags(
    quiet: bool = False,
    verbose: bool = False,
    debug: bool = False,
) -> int:
    """
    Determine the log level from CLI flags.

    Precedence: --debug, then --quiet (ERROR), then --verbose (INFO),
    otherwise WARNING.
    """
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure logging from CLI verbosity flags."""
    level = get_log_level_from_flags(quiet=quiet, verbose=verbose, debug=debug)
    configure_logging(level=level, log_file=log_file)
