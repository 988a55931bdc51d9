"""Tests for docscore.report."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from docscore.models import FileEntry, Priority, TestStatus
from docscore.report import (
    REPORT_HEADER,
    ReportWriteError,
    build_row,
    hyperlink_formula,
    priority_for,
    write_report,
)


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (15, Priority.P0),
        (11, Priority.P0),
        (10, Priority.P1),
        (6, Priority.P1),
        (5, Priority.P2),
        (1, Priority.P2),
        (0, Priority.P3),
    ],
)
def test_priority_for(score: int, expected: Priority) -> None:
    assert priority_for(score, 15) is expected


def test_hyperlink_formula_strips_quotes_from_title() -> None:
    formula = hyperlink_formula("https://istio.io/latest/docs/ops", 'The "best" page')

    assert formula == '=HYPERLINK("https://istio.io/latest/docs/ops","The best page")'


def _entry(**overrides: object) -> FileEntry:
    values: dict = {
        "full_path": "/site/en/docs/ops/index.md",
        "relative_path": "en/docs/ops/index.md",
        "url": "https://preliminary.istio.io/latest/docs/ops",
        "title": "Operations",
        "owner": "istio/wg-user-experience-maintainers",
        "test_status": TestStatus.YES,
        "score": 10,
        "notes": ["Relative path:en/docs/ops/index.md", "Hits: 900"],
    }
    values.update(overrides)
    return FileEntry(**values)


def test_build_row_layout() -> None:
    row = build_row(_entry())

    assert len(row) == len(REPORT_HEADER) == 15
    assert row[0] == ""
    assert row[1] == "istio/wg-user-experience-maintainers"
    assert row[2] == '=HYPERLINK("https://preliminary.istio.io/latest/docs/ops","Operations")'
    assert row[3] == "P1"
    assert row[4] == "yes"
    assert row[5:14] == [""] * 9
    assert row[14] == "Relative path:en/docs/ops/index.md\nHits: 900"


def test_write_report_keeps_input_order(tmp_path: Path) -> None:
    out = tmp_path / "out.csv"
    entries = [
        _entry(relative_path="en/docs/b/index.md", owner="b", score=0),
        _entry(relative_path="en/docs/a/index.md", owner="a", score=15),
    ]

    rows_written = write_report(entries, out)

    with out.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    assert rows_written == 2
    assert tuple(rows[0]) == REPORT_HEADER
    assert [row[1] for row in rows[1:]] == ["b", "a"]
    assert [row[3] for row in rows[1:]] == ["P3", "P0"]
    assert rows[1][14] == "Relative path:en/docs/ops/index.md\nHits: 900"


def test_write_report_raises_when_destination_is_unwritable(tmp_path: Path) -> None:
    with pytest.raises(ReportWriteError):
        write_report([_entry()], tmp_path / "missing-dir" / "out.csv")


def test_write_report_uses_unix_line_endings(tmp_path: Path) -> None:
    out = tmp_path / "out.csv"

    write_report([_entry()], out)

    data = out.read_bytes()
    assert b"\r" not in data
    assert data.endswith(b"\n")
    assert data.count(b"\n") == 3


def test_write_report_replaces_unencodable_characters(tmp_path: Path) -> None:
    out = tmp_path / "out.csv"
    entry = _entry(notes=["Relative path:en/docs/caf\udce9/index.md"])

    write_report([entry], out)

    with out.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    assert rows[1][14] == "Relative path:en/docs/caf?/index.md"
