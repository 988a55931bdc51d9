"""Scoring pages by their page-view hits."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Sequence

from ..analytics import DEFAULT_PREFIX, DEFAULT_SUFFIX, AnalyticsError, load_hits
from ..config import DEFAULT_LOCALE_PREFIX, DEFAULT_MAX_SCORE, DocScoreConfig
from ..collector import page_slug
from ..logging import get_logger
from ..models import FileEntry
from .base import Scorer

_LOGGER = get_logger("scorers.hits")

FULL_SCORE_HITS = 2000
TWO_THIRDS_HITS = 400
ONE_THIRD_HITS = 10


def score_for_hits(hits: int, max_score: int = DEFAULT_MAX_SCORE) -> int:
    """Bucket a hit count into 0, a third, two thirds or all of ``max_score``."""
    if hits > FULL_SCORE_HITS:
        return max_score
    if hits > TWO_THIRDS_HITS:
        return max_score * 2 // 3
    if hits > ONE_THIRD_HITS:
        return max_score * 1 // 3
    return 0


def hits_key(relative_path: str, locale_prefix: str = DEFAULT_LOCALE_PREFIX) -> str:
    """Return the analytics key for a page, e.g. ``en/docs/a/index.md`` -> ``docs/a/``."""
    return f"{page_slug(relative_path, locale_prefix)}/"


class HitsScorer(Scorer):
    """Scores each page from the cumulative hits recorded in the analytics export."""

    name = "hits"

    def __init__(
        self,
        hits: Mapping[str, int] | None = None,
        *,
        max_score: int = DEFAULT_MAX_SCORE,
        locale_prefix: str = DEFAULT_LOCALE_PREFIX,
    ) -> None:
        self.hits: Dict[str, int] = dict(hits or {})
        self.max_score = max_score
        self.locale_prefix = locale_prefix

    @classmethod
    def from_csv(
        cls,
        path: Path | str,
        *,
        max_score: int = DEFAULT_MAX_SCORE,
        locale_prefix: str = DEFAULT_LOCALE_PREFIX,
        prefix: str = DEFAULT_PREFIX,
        suffix: str = DEFAULT_SUFFIX,
    ) -> "HitsScorer":
        """Build a scorer from an analytics export, scoring nothing if it is unusable."""
        try:
            hits = load_hits(path, prefix=prefix, suffix=suffix)
        except AnalyticsError as exc:
            _LOGGER.warning("Could not load hits from %s: %s", path, exc)
            hits = {}
        return cls(hits, max_score=max_score, locale_prefix=locale_prefix)

    @classmethod
    def from_config(cls, config: DocScoreConfig) -> "HitsScorer":
        return cls.from_csv(
            config.analytics_path,
            max_score=config.max_score,
            locale_prefix=config.locale_prefix,
            prefix=config.analytics.prefix,
            suffix=config.analytics.suffix,
        )

    def score_page(self, relative_path: str) -> tuple[int, int]:
        """Return ``(score, hits)`` for the page at ``relative_path``."""
        hits = self.hits.get(hits_key(relative_path, self.locale_prefix), 0)
        return score_for_hits(hits, self.max_score), hits

    def score(self, entries: Sequence[FileEntry]) -> List[FileEntry]:
        scored: List[FileEntry] = []
        for entry in entries:
            points, hits = self.score_page(entry.relative_path)
            entry.score += points
            entry.notes.append(f"Hits: {hits}")
            scored.append(entry)
        return scored


__all__ = ["HitsScorer", "hits_key", "score_for_hits"]
