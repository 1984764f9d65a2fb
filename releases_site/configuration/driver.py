"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio
from pathlib import Path

from releases_site.configuration import reconcile
from releases_site.configuration.models import SiteConfig


def get_site_config(
    debug: bool = False,
    github_api_url: str | None = None,
    github_pat_token: str | None = None,
    repo: str | None = None,
    num_versions: int | None = None,
    relnotes_label: str | None = None,
    releases_url: str | None = None,
    hugo_site_dir: Path | None = None,
    build_site: bool = True,
) -> SiteConfig:
    """Synchronously get the reconciled site configuration."""
    return asyncio.run(
        reconcile.reconcile_site_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_pat_token=github_pat_token,
            cli_repo=repo,
            cli_num_versions=num_versions,
            cli_relnotes_label=relnotes_label,
            cli_releases_url=releases_url,
            cli_hugo_site_dir=hugo_site_dir,
            cli_build_site=build_site,
        )
    )
