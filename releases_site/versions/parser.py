"""Lenient semantic version parsing."""

from semver import Version

from releases_site.versions.exceptions import VersionParseError


def parse_lenient_version(token: str) -> Version:
    """Parse a version token, tolerating a missing patch component.

    Some upstream changelog headers omit the patch number (``1.90`` instead
    of ``1.90.0``), so those get a ``.0`` appended before parsing.

    Raises:
        VersionParseError: If the token is not a valid version even after adjustment.
    """
    candidate = token
    if len(token.split(".")) < 3:
        candidate = f"{token}.0"
    try:
        return Version.parse(candidate)
    except (ValueError, TypeError) as exc:
        raise VersionParseError(token) from exc
