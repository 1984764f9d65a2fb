"""Parsing of the upstream changelog into per-version entries."""

import re
from datetime import date, datetime

import structlog
from semver import Version

from releases_site.utils.constants import CHANGELOG_VERSION_FLOOR, VERSION_SECTION_PATTERN
from releases_site.versions.exceptions import ChangelogDateError
from releases_site.versions.models import ChangelogEntry
from releases_site.versions.parser import parse_lenient_version

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_WHITESPACE = re.compile(r"\s")


def _split_lines(text: str) -> list[str]:
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_release_date(version_token: str, text: str) -> date:
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ChangelogDateError(version_token, text) from exc


def parse_changelog(document: str) -> dict[Version, ChangelogEntry]:
    """Parse the changelog document into a mapping of version to entry.

    Each section starts with a line like ``Version 1.62.0 (2022-06-30)``,
    followed by two lines (the title underline and a blank line). The
    release date is read at a fixed offset after the version token, and the
    body is everything after those first three lines. Later sections for the
    same version replace earlier ones, and versions up to 1.0.0 are ignored.

    Args:
        document: Full text of the changelog.

    Returns:
        Dictionary mapping each ``semver.Version`` to its ``ChangelogEntry``.

    Raises:
        VersionParseError: If a section's version token cannot be parsed.
        ChangelogDateError: If a section's release date cannot be parsed.
    """
    entries: dict[Version, ChangelogEntry] = {}

    # The first segment is whatever precedes the first section.
    for segment in VERSION_SECTION_PATTERN.split(document)[1:]:
        match = _WHITESPACE.search(segment)
        if match is None:
            logger.debug("Skipping changelog segment without a release date", segment=segment)
            continue

        ws_idx = match.start()
        version_token = segment[:ws_idx]
        rest = segment[ws_idx:]
        release_date = _parse_release_date(version_token, segment[ws_idx + 1 :].lstrip()[1:11])
        version = parse_lenient_version(version_token)

        if version <= CHANGELOG_VERSION_FLOOR:
            continue

        # Header remainder, underline, blank line.
        body = "\n".join(_split_lines(rest)[3:])
        entries[version] = ChangelogEntry(version=version, body=body, release_date=release_date)

    logger.info("Parsed changelog", versions=len(entries))
    return entries
