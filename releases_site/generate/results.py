"""Contains results of application execution."""

from pathlib import Path

from semver import Version

from releases_site.versions.models import VersionTriad


class GenerateSiteResult:
    """Contains results of the generate workflow."""

    def __init__(
        self,
        triad: VersionTriad,
        released_pages: list[Version],
        unreleased_pages: list[Version],
        stabilization_prs: int,
        content_dir: Path,
        built: bool,
    ) -> None:
        """Initialize the result with the rendered pages and the build outcome."""
        self.triad = triad
        self.released_pages = released_pages
        self.unreleased_pages = unreleased_pages
        self.stabilization_prs = stabilization_prs
        self.content_dir = content_dir
        self.built = built
