"""Contains exceptions that halt site generation."""


class SiteGenerationError(Exception):
    """Base class for errors that abort a site generation run."""

    pass


class ChangelogParseError(SiteGenerationError):
    """Raised when the upstream changelog no longer has the expected format."""

    pass


class VersionParseError(ChangelogParseError):
    """Raised when a version token cannot be parsed, even leniently."""

    def __init__(self, token: str) -> None:
        """Initializes the exception with the offending version token."""
        super().__init__(f"Lenient version parsing failed for '{token}'")
        self.token = token


class ChangelogDateError(ChangelogParseError):
    """Raised when a changelog section carries an unparsable release date."""

    def __init__(self, version: str, text: str) -> None:
        """Initializes the exception with the section's version and date text."""
        super().__init__(f"Invalid release date '{text}' for version {version}")
        self.version = version
        self.text = text


class NoReleasedVersionError(SiteGenerationError):
    """Raised when no changelog version has been released yet."""

    def __init__(self) -> None:
        """Initializes the exception."""
        super().__init__("No released version found in the changelog; cannot determine the stable version")
