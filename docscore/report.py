"""Spreadsheet (CSV) output for scored documentation pages."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List

from .config import DEFAULT_MAX_SCORE
from .logging import get_logger
from .models import FileEntry, Priority

_LOGGER = get_logger("report")

REPORT_HEADER: tuple[str, ...] = (
    "",
    "Owner",
    "Test Cases",
    "Priority",
    "Automated",
    "In Progress",
    "In Progress Last Updated",
    "Done By",
    "Done By Last Updated",
    "GitHub Issue",
    "Comments (e.g. env used)",
    "Automated Sign Up",
    "Automated Last Updated",
    "Automation GitHub Issue",
    "Generator Notes",
)

# Columns between "Automated" and "Generator Notes" are filled in by hand.
_MANUAL_COLUMNS = len(REPORT_HEADER) - 6


class ReportWriteError(RuntimeError):
    """Raised when the report file cannot be created or written."""


def priority_for(score: int, max_score: int = DEFAULT_MAX_SCORE) -> Priority:
    """Map a page score onto P0 (highest) through P3 (unscored)."""
    if score > max_score * 2 // 3:
        return Priority.P0
    if score > max_score * 1 // 3:
        return Priority.P1
    if score > 0:
        return Priority.P2
    return Priority.P3


def hyperlink_formula(url: str, title: str) -> str:
    """Return a spreadsheet ``HYPERLINK`` formula; quotes in the title are dropped."""
    clean_title = title.replace('"', "")
    return f'=HYPERLINK("{url}","{clean_title}")'


def build_row(entry: FileEntry, max_score: int = DEFAULT_MAX_SCORE) -> List[str]:
    return [
        "",
        entry.owner,
        hyperlink_formula(entry.url, entry.title),
        priority_for(entry.score, max_score).value,
        entry.test_status.value,
        *([""] * _MANUAL_COLUMNS),
        "\n".join(entry.notes),
    ]


def write_report(
    entries: Iterable[FileEntry], path: Path | str, *, max_score: int = DEFAULT_MAX_SCORE
) -> int:
    """Write ``entries`` to ``path`` in input order and return the row count."""
    rows = 0
    try:
        with open(path, "w", encoding="utf-8", errors="replace", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(REPORT_HEADER)
            for entry in entries:
                writer.writerow(build_row(entry, max_score))
                rows += 1
    except OSError as exc:
        raise ReportWriteError(f"unable to write CSV {path}: {exc}") from exc

    _LOGGER.debug("Wrote %d rows to %s", rows, path)
    return rows


__all__ = [
    "REPORT_HEADER",
    "ReportWriteError",
    "build_row",
    "hyperlink_formula",
    "priority_for",
    "write_report",
]
