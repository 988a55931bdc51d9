"""Logging helpers for docscore report runs."""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "docscore"
_CONSOLE_FORMAT = "[docscore] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger nested under ``docscore`` (``docscore.<name>``)."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the docscore logger.

    Calling this again replaces previously installed handlers, so repeated CLI
    invocations inside one process do not duplicate output.
    """
    level = resolve_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        # The file sink always records debug detail for post-run inspection.
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["configure_logging", "get_logger", "resolve_level"]
