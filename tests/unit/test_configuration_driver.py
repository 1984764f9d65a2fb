"""Unit tests for the configuration driver module."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

from releases_site.configuration import driver
from releases_site.configuration.models import GitHubAuthenticationType, SiteConfig


def test_get_site_config_returns_reconciled_config() -> None:
    """Test that get_site_config runs the reconciliation and returns its config."""
    fake_config = SiteConfig(
        debug=True,
        github_api_url="https://api.github.com",
        github_authentication_type=GitHubAuthenticationType.PAT,
        github_pat_token="token",
        repo="rust-lang/rust",
        num_versions=5,
        relnotes_label="relnotes",
        releases_url="https://example.com/RELEASES.md",
        hugo_site_dir=Path("site"),
        build_site=False,
    )
    with patch(
        "releases_site.configuration.reconcile.reconcile_site_configuration",
        new=AsyncMock(return_value=fake_config),
    ) as mock_reconcile:
        result = driver.get_site_config(
            debug=True,
            github_pat_token="token",
            repo="rust-lang/rust",
            hugo_site_dir=Path("site"),
            build_site=False,
        )

    assert result is fake_config
    mock_reconcile.assert_awaited_once_with(
        cli_debug=True,
        cli_github_api_url=None,
        cli_github_pat_token="token",
        cli_repo="rust-lang/rust",
        cli_num_versions=None,
        cli_relnotes_label=None,
        cli_releases_url=None,
        cli_hugo_site_dir=Path("site"),
        cli_build_site=False,
    )
