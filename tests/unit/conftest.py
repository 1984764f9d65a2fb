"""Fixtures for unit tests."""

from datetime import date, datetime, timezone
from typing import Generator

import pytest
import structlog
from semver import Version

from releases_site.versions.models import ChangelogEntry

SAMPLE_CHANGELOG = """\
Version 1.72.0 (2023-08-24)
==========================

<a id="1.72.0-Language"></a>

Language
--------
- [Replace const eval limit by a lint and add an exponential backoff warning](https://github.com/rust-lang/rust/pull/103877/)

Version 1.71.1 (2023-08-03)
===========================

- Fix CVE-2023-38497: Cargo did not respect the umask when extracting dependencies

Version 1.71.0 (2023-07-13)
==========================

Compiler
--------
- [Add `Symbol` for `rustc_lint_defs`](https://github.com/rust-lang/rust/pull/109888/)

Version 1.0.0 (2015-05-15)
========================

Highlights
----------
- The first stable release.
"""


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_changelog() -> str:
    """A trimmed-down copy of the upstream changelog."""
    return SAMPLE_CHANGELOG


@pytest.fixture
def as_of() -> datetime:
    """A fixed point in time between the 1.71.0 and 1.72.0 releases."""
    return datetime(2023, 8, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def changelog_entries() -> dict[Version, ChangelogEntry]:
    """Changelog entries with 1.72.0 still to be released as of the ``as_of`` fixture."""
    return {
        Version(1, 70, 0): ChangelogEntry(Version(1, 70, 0), "- 1.70 changes", date(2023, 6, 1)),
        Version(1, 71, 0): ChangelogEntry(Version(1, 71, 0), "- 1.71 changes", date(2023, 7, 13)),
        Version(1, 71, 1): ChangelogEntry(Version(1, 71, 1), "- 1.71.1 changes", date(2023, 8, 3)),
        Version(1, 72, 0): ChangelogEntry(Version(1, 72, 0), "- 1.72 changes", date(2023, 8, 24)),
    }
