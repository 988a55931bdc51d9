"""Page-hit analytics loading from a CSV export."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Dict

from .logging import get_logger

_LOGGER = get_logger("analytics")

DEFAULT_PREFIX = "/latest/"
DEFAULT_SUFFIX = "index.html"

_PATH_COLUMN = 0
_HITS_COLUMN = 2


class AnalyticsError(RuntimeError):
    """Raised when the analytics export cannot be read or parsed."""


def normalize_path(path: str, *, prefix: str = DEFAULT_PREFIX, suffix: str = DEFAULT_SUFFIX) -> str:
    """Strip trailing ``index.html`` and leading ``/latest/`` from a URL path.

    Both are stripped repeatedly until neither remains, so normalizing an
    already normalized key returns it unchanged.
    """
    while True:
        stripped = path.removesuffix(suffix) if suffix else path
        stripped = stripped.removeprefix(prefix) if prefix else stripped
        if stripped == path:
            return path
        path = stripped


def _parse_count(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def parse_hits(
    text: str, *, prefix: str = DEFAULT_PREFIX, suffix: str = DEFAULT_SUFFIX
) -> Dict[str, int]:
    """Sum hit counts per normalized page path from CSV ``text``."""
    hits: Dict[str, int] = {}
    reader = csv.reader(io.StringIO(text))
    try:
        for line_number, record in enumerate(reader, start=1):
            if len(record) <= _HITS_COLUMN:
                if record:
                    _LOGGER.debug(
                        "Skipping analytics row %d with %d columns", line_number, len(record)
                    )
                continue
            key = normalize_path(record[_PATH_COLUMN], prefix=prefix, suffix=suffix)
            hits[key] = hits.get(key, 0) + _parse_count(record[_HITS_COLUMN])
    except csv.Error as exc:
        raise AnalyticsError(f"unable to parse CSV: {exc}") from exc

    for key, count in hits.items():
        _LOGGER.debug("%s: %d", key, count)
    return hits


def load_hits(
    path: Path | str, *, prefix: str = DEFAULT_PREFIX, suffix: str = DEFAULT_SUFFIX
) -> Dict[str, int]:
    """Read the analytics export at ``path`` into a hits table."""
    try:
        with open(path, encoding="utf-8-sig", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise AnalyticsError(f"unable to open CSV: {exc}") from exc

    hits = parse_hits(text, prefix=prefix, suffix=suffix)
    _LOGGER.info("Loaded hits for %d pages from %s", len(hits), path)
    return hits


__all__ = ["AnalyticsError", "load_hits", "normalize_path", "parse_hits"]
