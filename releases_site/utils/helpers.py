"""General utility functions for formatting rendered pages."""

from datetime import date, datetime, timezone


def format_date(value: date) -> str:
    """Format a date the way the site displays it, e.g. '19 May, 2022'."""
    return f"{value.day} {value:%B}, {value.year}"


def pluralize(word: str, count: int) -> str:
    """Prefix a word with a count, pluralizing it with an 's' unless the count is one."""
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def utc_datetime(value: datetime) -> datetime:
    """Return a datetime in UTC; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_date(value: datetime) -> date:
    """Return the UTC calendar date of a datetime; naive datetimes are taken as UTC."""
    return utc_datetime(value).date()


def escape_double_quotes(text: str) -> str:
    """Escape double quotes for use inside a quoted shortcode argument."""
    return text.replace('"', '\\"')
