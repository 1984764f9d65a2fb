"""Manages the Hugo site directories and build."""

import shutil
import subprocess
from pathlib import Path

import structlog
from semver import Version

from releases_site.site.exceptions import SiteBuildError
from releases_site.utils.constants import HUGO_THEME

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class HugoSiteManager:
    """Writes rendered pages into a Hugo site and builds it."""

    def __init__(self, site_dir: Path, template_dir: Path, content_dir: Path, public_dir: Path) -> None:
        """Initialize with the site root and its template, content and output directories."""
        self.site_dir = site_dir
        self.template_dir = template_dir
        self.content_dir = content_dir
        self.public_dir = public_dir

    @property
    def docs_dir(self) -> Path:
        """Directory holding one page per version."""
        return self.content_dir / "docs"

    def setup_directories(self) -> None:
        """Recreate the content directory from the template and empty the output directory."""
        shutil.rmtree(self.content_dir, ignore_errors=True)
        if self.public_dir.is_dir():
            for entry in self.public_dir.iterdir():
                if entry.is_dir():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()

        if self.template_dir.is_dir():
            shutil.copytree(self.template_dir, self.content_dir)
        else:
            logger.warning("Hugo template directory not found, starting from an empty content directory", template_dir=str(self.template_dir))
        self.docs_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("Prepared Hugo content directory", content_dir=str(self.content_dir))

    def write_version_file(self, version: Version, content: str) -> Path:
        """Write the page of a single version."""
        path = self.docs_dir / f"{version}.md"
        path.write_text(content, encoding="utf-8")
        return path

    def write_index_file(self, content: str) -> Path:
        """Write the site index page."""
        path = self.content_dir / "_index.md"
        path.write_text(content, encoding="utf-8")
        return path

    def build_site(self) -> None:
        """Run Hugo to build the site.

        Raises:
            SiteBuildError: If Hugo exits with a non-zero status.
        """
        command = ["hugo", "--minify", "--logLevel", "debug", "--theme", HUGO_THEME]
        logger.info("Building Hugo site", command=" ".join(command), cwd=str(self.site_dir))
        result = subprocess.run(command, cwd=self.site_dir, capture_output=True, text=True)
        logger.debug("Hugo output", stdout=result.stdout, stderr=result.stderr)
        if result.returncode != 0:
            logger.error("Hugo build failed", returncode=result.returncode, stderr=result.stderr)
            raise SiteBuildError(result.returncode, result.stderr)
        logger.info("Built Hugo site", public_dir=str(self.public_dir))
