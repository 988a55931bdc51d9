"""Helper utilities for constructing temporary documentation trees in tests."""

from __future__ import annotations

import csv
import textwrap
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from docscore.collector import FileCollector
from docscore.models import CollectionResult


class DocsTreeBuilder:
    """Writes pages and analytics exports into a throwaway site checkout."""

    def __init__(self, tmp_path: Path) -> None:
        self.base = tmp_path
        self.root = tmp_path / "site"
        self.root.mkdir()
        self._collector = FileCollector()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the docs tree."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_analytics(self, rows: Iterable[Sequence[object]], name: str = "analytics.csv") -> Path:
        """Write an analytics export next to the docs tree and return its path."""
        path = self.base / name
        with path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            for row in rows:
                writer.writerow([str(cell) for cell in row])
        return path

    def collect(self) -> CollectionResult:
        return self._collector.collect(self.root)

    def path(self) -> Path:
        return self.root


__all__ = ["DocsTreeBuilder"]
