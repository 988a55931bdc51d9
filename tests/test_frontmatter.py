"""Tests for docscore.frontmatter."""

from __future__ import annotations

from docscore.frontmatter import get_and_trim_field, parse_test_status
from docscore.models import TestStatus

PAGE = """---
title: Traffic Management
description: Describes the various Istio features focused on traffic routing.
owner: istio/wg-networking-maintainers
test: yes
---
Body text mentions title: later on.
"""


def test_get_and_trim_field_returns_first_match() -> None:
    assert get_and_trim_field("title", PAGE) == "Traffic Management"
    assert get_and_trim_field("owner", PAGE) == "istio/wg-networking-maintainers"
    assert get_and_trim_field("test", PAGE) == "yes"


def test_get_and_trim_field_returns_empty_when_missing() -> None:
    assert get_and_trim_field("owner", "title: Only a title\n") == ""


def test_get_and_trim_field_strips_only_one_space() -> None:
    assert get_and_trim_field("title", "title:  Padded\n") == " Padded"
    assert get_and_trim_field("title", "title:Tight\n") == "Tight"


def test_get_and_trim_field_does_not_interpret_quotes() -> None:
    assert get_and_trim_field("title", 'title: "Quoted"\n') == '"Quoted"'


def test_parse_test_status_recognised_values() -> None:
    assert parse_test_status("test: yes\n") is TestStatus.YES
    assert parse_test_status("test: no\n") is TestStatus.NO
    assert parse_test_status("test: n/a\n") is TestStatus.NOT_APPLICABLE


def test_parse_test_status_defaults_to_unknown() -> None:
    assert parse_test_status("title: Untested page\n") is TestStatus.UNKNOWN
    assert parse_test_status("test: maybe\n") is TestStatus.UNKNOWN
