"""Reconcile configuration between CLI arguments and environment variables."""

from pathlib import Path

import structlog

from releases_site.configuration.env import settings
from releases_site.configuration.exceptions import (
    GitHubAuthenticationConfigurationError,
    RequiredConfigurationElementError,
)
from releases_site.configuration.models import GitHubAuthenticationType, SiteConfig
from releases_site.utils.github import split_repository_in_configuration

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def validate_github_authentication_configuration(github_pat_token: str | None) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    The tracked repository is public, so a token is optional; without one the
    client is unauthenticated and subject to lower rate limits.

    Args:
        github_pat_token (str | None): The GitHub PAT token.

    Raises:
        GitHubAuthenticationConfigurationError: If the token is set but blank.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    if github_pat_token is None:
        return GitHubAuthenticationType.ANONYMOUS
    if not github_pat_token.strip():
        raise GitHubAuthenticationConfigurationError("GitHub PAT token is set but empty. Unset it to use unauthenticated access.")
    return GitHubAuthenticationType.PAT


async def reconcile_site_configuration(
    cli_debug: bool,
    cli_github_api_url: str | None,
    cli_github_pat_token: str | None,
    cli_repo: str | None,
    cli_num_versions: int | None,
    cli_relnotes_label: str | None,
    cli_releases_url: str | None,
    cli_hugo_site_dir: Path | None,
    cli_build_site: bool = True,
) -> SiteConfig:
    """Reconcile CLI arguments with environment settings into the configuration of a run.

    Values given on the command line win over environment variables, which win
    over the built-in defaults.

    Raises:
        RequiredConfigurationElementError: If no repository is configured.
        GitHubAuthenticationConfigurationError: If the GitHub token is unusable.
        ValueError: If the repository is not in 'owner/repo' format.
    """
    debug = cli_debug or settings.DEBUG
    github_api_url = cli_github_api_url or settings.GITHUB_API_URL
    github_pat_token = cli_github_pat_token if cli_github_pat_token is not None else settings.GITHUB_PAT_TOKEN
    repo = cli_repo or settings.REPO
    if not repo:
        raise RequiredConfigurationElementError(name="Repository", cli_name="repo", env_name="REPO")
    split_repository_in_configuration(repo)

    github_authentication_type = await validate_github_authentication_configuration(github_pat_token)

    config = SiteConfig(
        debug=debug,
        github_api_url=github_api_url,
        github_authentication_type=github_authentication_type,
        github_pat_token=github_pat_token,
        repo=repo,
        num_versions=cli_num_versions or settings.NUM_VERSIONS,
        relnotes_label=cli_relnotes_label or settings.RELNOTES_LABEL,
        releases_url=cli_releases_url or settings.RELEASES_URL,
        hugo_site_dir=cli_hugo_site_dir or settings.HUGO_SITE_DIR,
        build_site=cli_build_site,
    )
    logger.debug(
        "Reconciled site configuration",
        repo=config.repo,
        github_api_url=config.github_api_url,
        github_authentication_type=config.github_authentication_type.value,
        num_versions=config.num_versions,
        hugo_site_dir=str(config.hugo_site_dir),
    )
    return config
