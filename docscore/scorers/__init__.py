"""Scorer implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from ..config import DocScoreConfig
from .base import Scorer
from .hits import HitsScorer, score_for_hits

_ENTRY_POINT_GROUP = "docscore.scorers"

ScorerFactory = Callable[[DocScoreConfig], Scorer]

_BUILTIN_FACTORIES: dict[str, ScorerFactory] = {
    "hits": HitsScorer.from_config,
}


def discover_scorers(
    config: DocScoreConfig, enabled: Sequence[str] | None = None
) -> List[Scorer]:
    """Return instantiated scorers in registration order, honoring ``enabled``."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}

    scorers: List[Scorer] = []
    seen: Set[str] = set()

    def _add(name: str, factory: ScorerFactory) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory(config)
        if not isinstance(instance, Scorer):
            raise TypeError(f"Scorer factory for '{name}' did not return a Scorer instance")
        scorers.append(instance)
        seen.add(key)

    for name, factory in _BUILTIN_FACTORIES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - depends on installed plugins
            raise RuntimeError(f"Failed to load scorer entry point '{entry.name}': {exc}") from exc

        def _factory(cfg: DocScoreConfig, obj: object = loaded) -> Scorer:
            return _coerce_scorer(obj, cfg)

        _add(entry.name, _factory)

    if enabled_set:
        missing = enabled_set - seen
        if missing:
            raise ValueError(f"Unknown scorers requested: {', '.join(sorted(missing))}")

    return scorers


def _coerce_scorer(obj: object, config: DocScoreConfig) -> Scorer:
    if isinstance(obj, Scorer):
        return obj
    if isinstance(obj, type) and issubclass(obj, Scorer):
        from_config = getattr(obj, "from_config", None)
        return from_config(config) if callable(from_config) else obj()
    if callable(obj):
        instance = obj(config)
        if isinstance(instance, Scorer):
            return instance
    raise TypeError("Scorer entry point must be a Scorer subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = ["HitsScorer", "Scorer", "discover_scorers", "score_for_hits"]
