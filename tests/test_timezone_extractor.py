"""Tests for timezone label extraction."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from client_env.application.timezone_extractor import (
    extract_timezone,
    render_timestamp,
    timezone_label,
)

CET = timezone(timedelta(hours=1), "Central European Time")


def test_render_timestamp_uses_browser_layout() -> None:
    """Given an aware UTC timestamp, when rendering, then the browser layout is used."""
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    assert render_timestamp(moment) == "Tue Jan 02 2024 03:04:05 GMT+0000 (UTC)"


def test_render_timestamp_keeps_aware_zone() -> None:
    """Given a timestamp in a named fixed zone, then the zone offset and name are kept."""
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=CET)

    assert render_timestamp(moment) == "Tue Jan 02 2024 03:04:05 GMT+0100 (Central European Time)"


def test_timezone_label_extracts_parenthesized_name() -> None:
    """Given a browser date rendering, then the parenthesized label is returned."""
    rendered = "Tue Jan 01 2024 00:00:00 GMT+0000 (Coordinated Universal Time)"

    assert timezone_label(rendered) == "Coordinated Universal Time"


def test_timezone_label_uses_last_group() -> None:
    """Given several parenthesized groups, then the last one is returned."""
    assert timezone_label("Mon (first) GMT+0100 (second label)") == "second label"


def test_timezone_label_ignores_groups_starting_with_digit() -> None:
    """Given only a group starting with a digit, then no label is returned."""
    assert timezone_label("Tue Jan 01 2024 00:00:00 GMT+0000 (+00)") == ""


def test_timezone_label_without_group_is_empty() -> None:
    """Given a rendering without parentheses, then an empty label is returned."""
    assert timezone_label("Tue Jan 01 2024 00:00:00 GMT+0000") == ""


def test_extract_timezone_returns_zone_name() -> None:
    """Given an aware timestamp, when extracting, then the zone name is returned."""
    assert extract_timezone(datetime(2024, 7, 1, tzinfo=CET)) == "Central European Time"


def test_extract_timezone_for_naive_timestamp_uses_host_zone() -> None:
    """Given a naive timestamp, then the host local zone name is returned."""
    moment = datetime(2024, 7, 1, 12, 0, 0)
    name = moment.astimezone().tzname() or ""
    expected = name if name[:1].isalpha() or name[:1].isspace() else ""

    assert extract_timezone(moment) == expected


def test_extract_timezone_degrades_to_empty_on_render_failure() -> None:
    """Given a timestamp that cannot be rendered, then an empty label is returned."""
    with patch(
        "client_env.application.timezone_extractor.render_timestamp",
        side_effect=OverflowError("date value out of range"),
    ):
        assert extract_timezone(datetime(2024, 1, 1)) == ""


def test_extract_timezone_is_idempotent() -> None:
    """Given the same timestamp twice, then the same label is returned."""
    moment = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert extract_timezone(moment) == extract_timezone(moment)
