"""Loose extraction of ``field: value`` lines from markdown pages.

Pages on the site carry their metadata as single ``field: value`` lines near
the top of the document. Each field is located with one regex search; the
first match wins and values never span lines or honour quoting.
"""

from __future__ import annotations

import re
from functools import lru_cache

from .models import TestStatus


@lru_cache(maxsize=None)
def _field_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(name)}:\s*[\w|/]*.*")


def get_and_trim_field(name: str, body: str) -> str:
    """Return the value following ``<name>:`` in ``body``, or ``""`` when absent.

    Only the ``<name>:`` prefix and a single leading space are removed from the
    matched text.
    """
    match = _field_pattern(name).search(body)
    if match is None:
        return ""
    value = match.group(0)[len(name) + 1 :]
    if value.startswith(" "):
        value = value[1:]
    return value


def parse_test_status(body: str) -> TestStatus:
    return TestStatus.parse(get_and_trim_field("test", body))


__all__ = ["get_and_trim_field", "parse_test_status"]
