"""Core data models shared across docscore components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class TestStatus(str, Enum):
    """Automation status declared by a page's ``test:`` field."""

    NOT_APPLICABLE = "n/a"
    NO = "no"
    YES = "yes"
    UNKNOWN = "unknown"

    __test__ = False

    @classmethod
    def parse(cls, value: str) -> "TestStatus":
        """Map a raw field value onto a status, falling back to ``unknown``."""
        normalised = value.strip().lower()
        for status in cls:
            if status.value == normalised:
                return status
        return cls.UNKNOWN


class Priority(str, Enum):
    """Coarse priority tier derived from a page score."""

    P0 = "P0"
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"


@dataclass
class FileEntry:
    """A markdown page discovered in the documentation tree."""

    full_path: str
    relative_path: str
    url: str
    test_status: TestStatus = TestStatus.UNKNOWN
    score: int = 0
    title: str = ""
    owner: str = ""
    notes: List[str] = field(default_factory=list)


@dataclass
class CollectionResult:
    """Entries gathered by the collector plus documents that could not be read."""

    root: str
    entries: List[FileEntry] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)
