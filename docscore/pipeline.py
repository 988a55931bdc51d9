"""Pipeline driver: collect pages, score them and write the report."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .collector import FileCollector
from .config import DocScoreConfig
from .logging import get_logger
from .models import FileEntry, Priority
from .report import priority_for, write_report
from .scorers import Scorer, discover_scorers


@dataclass
class RunSummary:
    """Outcome of a report run."""

    out_path: Path
    entries: List[FileEntry]
    errors: List[Tuple[str, str]] = field(default_factory=list)
    priorities: Dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.entries)


def clamp_scores(entries: Iterable[FileEntry], max_score: int) -> None:
    """Keep every cumulative score within ``[0, max_score]``."""
    for entry in entries:
        entry.score = min(max(entry.score, 0), max_score)


class ScorePipeline:
    """Runs collection, every scorer in order and the report writer."""

    def __init__(
        self,
        config: DocScoreConfig,
        collector: FileCollector | None = None,
        scorers: Optional[Iterable[Scorer]] = None,
    ) -> None:
        self.config = config
        self.collector = collector or FileCollector(
            exclude_dirs=config.exclude_dirs,
            base_url=config.base_url,
            locale_prefix=config.locale_prefix,
        )
        self._scorers = list(scorers) if scorers is not None else None
        self.logger = get_logger("pipeline")

    def scorers(self) -> List[Scorer]:
        if self._scorers is None:
            self._scorers = discover_scorers(self.config, self.config.scorers.enabled)
        return self._scorers

    def run(self) -> RunSummary:
        self.logger.info("Scoring docs in %s", self.config.docs_path)
        # Scorers load their inputs (analytics) before the tree walk starts.
        scorers = self.scorers()

        collected = self.collector.collect(self.config.docs_path)
        self.logger.debug("Collector found %d pages", len(collected.entries))
        if collected.errors:
            self.logger.warning(
                "%d pages could not be read and were left out of the report",
                len(collected.errors),
            )

        entries = collected.entries
        for scorer in scorers:
            self.logger.debug("Running scorer %s", scorer.name or scorer.__class__.__name__)
            entries = scorer.score(entries)
        clamp_scores(entries, self.config.max_score)

        write_report(entries, self.config.out_path, max_score=self.config.max_score)

        counts = Counter(priority_for(entry.score, self.config.max_score).value for entry in entries)
        priorities = {tier.value: counts.get(tier.value, 0) for tier in Priority}
        self.logger.info(
            "Report written to %s (%d pages: %s)",
            self.config.out_path,
            len(entries),
            ", ".join(f"{tier} {count}" for tier, count in priorities.items()),
        )
        return RunSummary(
            out_path=Path(self.config.out_path),
            entries=entries,
            errors=list(collected.errors),
            priorities=priorities,
        )


__all__ = ["RunSummary", "ScorePipeline", "clamp_scores"]
