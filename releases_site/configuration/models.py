"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from releases_site.utils.constants import STABILIZATION_SEARCH_TERMS


class GitHubAuthenticationType(str, Enum):
    """Enum for GitHub authentication types."""

    PAT = "pat"
    ANONYMOUS = "anonymous"


@dataclass
class SiteConfig:
    """Configuration class for the generate command."""

    debug: bool
    github_api_url: str
    github_authentication_type: GitHubAuthenticationType
    github_pat_token: str | None
    repo: str
    num_versions: int
    relnotes_label: str
    releases_url: str
    hugo_site_dir: Path
    build_site: bool = True
    stabilization_search_terms: list[str] = field(default_factory=lambda: list(STABILIZATION_SEARCH_TERMS))

    @property
    def hugo_template_dir(self) -> Path:
        """Directory holding the static content copied into every build."""
        return self.hugo_site_dir / "template"

    @property
    def hugo_content_dir(self) -> Path:
        """Directory Hugo reads pages from."""
        return self.hugo_site_dir / "content"

    @property
    def hugo_public_dir(self) -> Path:
        """Directory Hugo writes the built site to."""
        return self.hugo_site_dir / "public"
