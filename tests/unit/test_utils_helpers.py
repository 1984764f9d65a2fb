"""Unit tests for utility helper functions."""

from datetime import date, datetime, timedelta, timezone

import pytest

from releases_site.utils.helpers import escape_double_quotes, format_date, pluralize, utc_date, utc_datetime


@pytest.mark.parametrize(
    "value,expected",
    [
        (date(2022, 5, 19), "19 May, 2022"),
        (date(2023, 7, 7), "7 July, 2023"),
        (date(2015, 12, 10), "10 December, 2015"),
    ],
)
def test_format_date(value: date, expected: str) -> None:
    """Test format_date with various dates."""
    assert format_date(value) == expected


@pytest.mark.parametrize(
    "count,expected",
    [
        (0, "0 days"),
        (1, "1 day"),
        (2, "2 days"),
        (-1, "-1 days"),
    ],
)
def test_pluralize(count: int, expected: str) -> None:
    """Test pluralize with various counts."""
    assert pluralize("day", count) == expected


def test_utc_date_converts_to_utc() -> None:
    """Test that an aware datetime is converted to UTC before taking its date."""
    late_evening = datetime(2023, 8, 9, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert utc_date(late_evening) == date(2023, 8, 10)


def test_utc_date_naive() -> None:
    """Test that a naive datetime is taken as UTC."""
    assert utc_date(datetime(2023, 8, 9, 23, 59)) == date(2023, 8, 9)


def test_escape_double_quotes() -> None:
    """Test escaping double quotes in a shortcode argument."""
    assert escape_double_quotes('Stabilize "let chains"') == 'Stabilize \\"let chains\\"'
    assert escape_double_quotes("no quotes") == "no quotes"


def test_utc_datetime() -> None:
    """Test that naive datetimes gain UTC and aware ones are converted to it."""
    assert utc_datetime(datetime(2023, 8, 10, 12, 0)) == datetime(2023, 8, 10, 12, 0, tzinfo=timezone.utc)
    converted = utc_datetime(datetime(2023, 8, 10, 7, 0, tzinfo=timezone(timedelta(hours=-5))))
    assert converted.tzinfo == timezone.utc
    assert converted.hour == 12
