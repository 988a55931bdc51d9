"""Base class for page scorers."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..models import FileEntry


class Scorer(ABC):
    """Contract for scorers that enrich entries with score and notes."""

    name: str = ""

    @abstractmethod
    def score(self, entries: Sequence[FileEntry]) -> List[FileEntry]:
        """Add this scorer's contribution to each entry and append a note."""
