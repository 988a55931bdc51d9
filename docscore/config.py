"""Configuration loading for docscore (.docscore.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".docscore.yml"

DEFAULT_DOCS_PATH = "../istio.io"
DEFAULT_OUT_PATH = "out.csv"
DEFAULT_ANALYTICS_PATH = "analytics.csv"
DEFAULT_MAX_SCORE = 15
DEFAULT_BASE_URL = "https://preliminary.istio.io/latest/"
DEFAULT_LOCALE_PREFIX = "en/"

# Site sections that are administrative or non-content and never need tests.
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    "en/about",
    "zh/about",
    "en/blog",
    "zh/blog",
    "en/boilerplates",
    "zh/boilerplates",
    "en/events",
    "zh/events",
    "en/docs/reference/glossary",
    "zh/docs/reference/glossary",
    "zh/news",
    "en/news",
    "en/test",
    "zh/test",
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class AnalyticsConfig:
    """How analytics export paths are normalized into page keys."""

    prefix: str = "/latest/"
    suffix: str = "index.html"


@dataclass
class ScorerConfig:
    """Scorer enablement; ``None`` runs every registered scorer."""

    enabled: Optional[List[str]] = None


@dataclass
class DocScoreConfig:
    """Effective settings for a report run."""

    docs_path: Path = Path(DEFAULT_DOCS_PATH)
    out_path: Path = Path(DEFAULT_OUT_PATH)
    analytics_path: Path = Path(DEFAULT_ANALYTICS_PATH)
    max_score: int = DEFAULT_MAX_SCORE
    base_url: str = DEFAULT_BASE_URL
    locale_prefix: str = DEFAULT_LOCALE_PREFIX
    exclude_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)
    scorers: ScorerConfig = field(default_factory=ScorerConfig)
    log_file: Optional[Path] = None


def load_config(config_path: Path | None = None) -> DocScoreConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path or Path.cwd())
    if not config_file.exists():
        return DocScoreConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    base = config_file.parent.resolve()
    config = DocScoreConfig()

    docs_path = _as_str(data.get("docs_path"))
    if docs_path:
        config.docs_path = _resolve(base, docs_path)
    out_path = _as_str(data.get("out_path"))
    if out_path:
        config.out_path = _resolve(base, out_path)
    analytics_path = _as_str(data.get("analytics_path"))
    if analytics_path:
        config.analytics_path = _resolve(base, analytics_path)
    log_file = _as_str(data.get("log_file"))
    if log_file:
        config.log_file = _resolve(base, log_file)

    if "max_score" in data:
        max_score = _as_int(data.get("max_score"))
        if max_score is None or max_score <= 0:
            raise ConfigError("max_score must be a positive integer")
        config.max_score = max_score

    base_url = _as_str(data.get("base_url"))
    if base_url:
        config.base_url = base_url
    if "locale_prefix" in data:
        config.locale_prefix = _as_str(data.get("locale_prefix")) or ""
    if "exclude_dirs" in data:
        config.exclude_dirs = _as_str_list(data.get("exclude_dirs"))

    analytics_data = _as_dict(data.get("analytics"))
    if "prefix" in analytics_data:
        config.analytics.prefix = _as_str(analytics_data.get("prefix")) or ""
    if "suffix" in analytics_data:
        config.analytics.suffix = _as_str(analytics_data.get("suffix")) or ""

    scorer_data = _as_dict(data.get("scorers"))
    if "enabled" in scorer_data:
        config.scorers.enabled = _as_str_list(scorer_data.get("enabled"))

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _resolve(base: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else base / path


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "AnalyticsConfig",
    "ConfigError",
    "DocScoreConfig",
    "ScorerConfig",
    "load_config",
    "CONFIG_FILENAME",
    "DEFAULT_EXCLUDE_DIRS",
]
