"""Utility modules for shared functionality."""

from .constants import (
    CHANGELOG_VERSION_FLOOR,
    DEFAULT_RELEASES_URL,
    EPOCH_DATE,
    MAX_WEIGHT,
    STABILIZATION_SEARCH_TERMS,
    VERSION_SECTION_PATTERN,
)
from .helpers import escape_double_quotes, format_date, pluralize, utc_date, utc_datetime

__all__ = [
    "CHANGELOG_VERSION_FLOOR",
    "DEFAULT_RELEASES_URL",
    "EPOCH_DATE",
    "MAX_WEIGHT",
    "STABILIZATION_SEARCH_TERMS",
    "VERSION_SECTION_PATTERN",
    "escape_double_quotes",
    "format_date",
    "pluralize",
    "utc_date",
    "utc_datetime",
]
