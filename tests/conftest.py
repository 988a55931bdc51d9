from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.docs_builder import DocsTreeBuilder


@pytest.fixture
def docs_builder(tmp_path: Path) -> DocsTreeBuilder:
    """Provide a reusable docs tree builder rooted at the pytest tmp_path."""
    return DocsTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_docscore_logger() -> Iterator[None]:
    """Undo handlers installed by configure_logging so caplog keeps working."""
    yield
    logger = logging.getLogger("docscore")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
