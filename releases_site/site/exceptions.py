"""Custom exceptions for the site module."""

from releases_site.versions.exceptions import SiteGenerationError


class SiteBuildError(SiteGenerationError):
    """Raised when the static site generator fails to build the site."""

    def __init__(self, returncode: int, stderr: str = "") -> None:
        """Initializes the exception with Hugo's exit status and error output."""
        super().__init__(f"Hugo exited with status {returncode}")
        self.returncode = returncode
        self.stderr = stderr
