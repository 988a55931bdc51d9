"""Documentation tree walking and page metadata collection."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Iterator, Sequence

from .config import DEFAULT_BASE_URL, DEFAULT_EXCLUDE_DIRS, DEFAULT_LOCALE_PREFIX
from .frontmatter import get_and_trim_field, parse_test_status
from .logging import get_logger
from .models import CollectionResult, FileEntry

_MARKDOWN_SUFFIX = ".md"


def page_slug(relative_path: str, locale_prefix: str = DEFAULT_LOCALE_PREFIX) -> str:
    """Return the site slug for a page: its parent directory minus the locale."""
    if locale_prefix:
        relative_path = relative_path.removeprefix(locale_prefix)
    return PurePosixPath(relative_path).parent.as_posix()


def derive_url(
    relative_path: str,
    base_url: str = DEFAULT_BASE_URL,
    locale_prefix: str = DEFAULT_LOCALE_PREFIX,
) -> str:
    return f"{base_url}{page_slug(relative_path, locale_prefix)}"


def is_excluded(relative_path: str, exclude_dirs: Sequence[str]) -> bool:
    return any(relative_path.startswith(prefix) for prefix in exclude_dirs)


def _display_path(name: str) -> str:
    """Replace undecodable filename bytes (surrogate escapes) with U+FFFD."""
    return os.fsencode(name).decode("utf-8", errors="replace")


def _iter_files(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            yield current_dir / filename


class FileCollector:
    """Walks a documentation tree and builds one entry per relevant page."""

    def __init__(
        self,
        *,
        exclude_dirs: Sequence[str] | None = None,
        base_url: str = DEFAULT_BASE_URL,
        locale_prefix: str = DEFAULT_LOCALE_PREFIX,
    ) -> None:
        self.exclude_dirs = tuple(DEFAULT_EXCLUDE_DIRS if exclude_dirs is None else exclude_dirs)
        self.base_url = base_url
        self.locale_prefix = locale_prefix
        self.logger = get_logger("collector")

    def collect(self, root: str | Path) -> CollectionResult:
        """Return entries for every non-excluded markdown page under ``root``.

        Pages are decoded as UTF-8 with undecodable bytes replaced. Pages that
        cannot be opened are logged and recorded in ``CollectionResult.errors``;
        the walk carries on with the next file.
        """
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise FileNotFoundError(f"Docs path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Docs path is not a directory: {root}")

        result = CollectionResult(root=str(root_path))
        for path in _iter_files(root_path):
            if path.suffix != _MARKDOWN_SUFFIX:
                continue
            rel_path = _display_path(path.relative_to(root_path).as_posix())
            if is_excluded(rel_path, self.exclude_dirs):
                self.logger.debug("Skipping excluded page %s", rel_path)
                continue

            try:
                content = path.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                self.logger.warning("Unable to read %s: %s", rel_path, exc)
                result.errors.append((rel_path, str(exc)))
                continue

            result.entries.append(self._build_entry(path, rel_path, content))

        self.logger.debug(
            "Collected %d pages (%d unreadable) under %s",
            len(result.entries),
            len(result.errors),
            root_path,
        )
        return result

    def _build_entry(self, path: Path, rel_path: str, content: str) -> FileEntry:
        return FileEntry(
            full_path=str(path),
            relative_path=rel_path,
            url=derive_url(rel_path, self.base_url, self.locale_prefix),
            test_status=parse_test_status(content),
            title=get_and_trim_field("title", content),
            owner=get_and_trim_field("owner", content),
            notes=[f"Relative path:{rel_path}"],
        )


__all__ = ["FileCollector", "derive_url", "is_excluded", "page_slug"]
