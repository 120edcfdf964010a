"""
Logging configuration for the launcher.

Called once by main.py before anything else runs.  Modules log through
``logging.getLogger(__name__)`` and inherit this setup.

Logging is for diagnostics: which platform was detected, which argv was
run, what it returned.  Everything the user is meant to read (status
lines, menu, prompts, notices) is printed with click on stdout, so the
console handler writes to stderr and stays quiet at the default level.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  SWAPLAUNCHER_LOG_LEVEL  >  WARNING

A second, file-only level can be set with SWAPLAUNCHER_LOG_FILE_LEVEL
when SWAPLAUNCHER_LOG_FILE is set.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "SWAPLAUNCHER_LOG_LEVEL"
ENV_FILE = "SWAPLAUNCHER_LOG_FILE"
ENV_FILE_LEVEL = "SWAPLAUNCHER_LOG_FILE_LEVEL"

# Console formats, chosen by the console level
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_CONSOLE_DEFAULT = ("%(levelname)s: %(message)s", None)

_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%Y-%m-%d %H:%M:%S")


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    fmt, datefmt = _console_format(console_level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        try:
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            logging.getLogger(__name__).warning("Cannot open log file %s: %s", log_file, e)
        else:
            handler.setLevel(file_level)
            handler.setFormatter(logging.Formatter(*_FILE_FORMAT))
            root.addHandler(handler)
            root_level = min(root_level, file_level)

    root.setLevel(root_level)

    # A closed stream must not turn into a traceback mid-prompt
    logging.raiseExceptions = False


def setup_logging_from_env(level: str) -> None:
    """``setup_logging`` with the file settings taken from the environment."""
    setup_logging(
        level=level,
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


def _console_format(level: int) -> tuple[str, str | None]:
    for threshold in sorted(_CONSOLE_FORMATS):
        if level <= threshold:
            return _CONSOLE_FORMATS[threshold]
    return _CONSOLE_DEFAULT


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
