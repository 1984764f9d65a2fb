"""Unit tests for reconciling CLI arguments with environment settings."""

from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from releases_site.configuration.env import Settings
from releases_site.configuration.exceptions import (
    GitHubAuthenticationConfigurationError,
    RequiredConfigurationElementError,
)
from releases_site.configuration.models import GitHubAuthenticationType
from releases_site.configuration.reconcile import reconcile_site_configuration, validate_github_authentication_configuration
from releases_site.utils.constants import STABILIZATION_SEARCH_TERMS


def _settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "DEBUG": False,
        "GITHUB_API_URL": "https://api.github.com",
        "GITHUB_PAT_TOKEN": None,
        "REPO": "rust-lang/rust",
        "NUM_VERSIONS": 5,
        "RELNOTES_LABEL": "relnotes",
        "RELEASES_URL": "https://example.com/RELEASES.md",
        "HUGO_SITE_DIR": Path("hugo/rust-changelogs"),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


async def _reconcile(**cli: Any) -> Any:
    arguments: dict[str, Any] = {
        "cli_debug": False,
        "cli_github_api_url": None,
        "cli_github_pat_token": None,
        "cli_repo": None,
        "cli_num_versions": None,
        "cli_relnotes_label": None,
        "cli_releases_url": None,
        "cli_hugo_site_dir": None,
    }
    arguments.update(cli)
    return await reconcile_site_configuration(**arguments)


@pytest.mark.asyncio
async def test_valid_pat_authentication() -> None:
    """Test that a token selects PAT authentication."""
    assert await validate_github_authentication_configuration("test-token") == GitHubAuthenticationType.PAT


@pytest.mark.asyncio
async def test_anonymous_authentication() -> None:
    """Test that no token selects unauthenticated access."""
    assert await validate_github_authentication_configuration(None) == GitHubAuthenticationType.ANONYMOUS


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["", "   "])
async def test_blank_token_error(token: str) -> None:
    """Test that a blank token is rejected instead of silently falling back to anonymous access."""
    with pytest.raises(GitHubAuthenticationConfigurationError) as exc_info:
        await validate_github_authentication_configuration(token)

    assert "set but empty" in str(exc_info.value)


@pytest.mark.asyncio
async def test_defaults_from_settings() -> None:
    """Test that environment settings are used when no CLI arguments are given."""
    with patch("releases_site.configuration.reconcile.settings", _settings()):
        config = await _reconcile()

    assert config.repo == "rust-lang/rust"
    assert config.github_authentication_type == GitHubAuthenticationType.ANONYMOUS
    assert config.github_pat_token is None
    assert config.num_versions == 5
    assert config.relnotes_label == "relnotes"
    assert config.releases_url == "https://example.com/RELEASES.md"
    assert config.hugo_site_dir == Path("hugo/rust-changelogs")
    assert config.hugo_content_dir == Path("hugo/rust-changelogs/content")
    assert config.hugo_template_dir == Path("hugo/rust-changelogs/template")
    assert config.hugo_public_dir == Path("hugo/rust-changelogs/public")
    assert config.build_site is True
    assert config.stabilization_search_terms == STABILIZATION_SEARCH_TERMS


@pytest.mark.asyncio
async def test_cli_overrides_settings(tmp_path: Path) -> None:
    """Test that CLI arguments win over environment settings."""
    with patch("releases_site.configuration.reconcile.settings", _settings(GITHUB_PAT_TOKEN="env-token")):
        config = await _reconcile(
            cli_debug=True,
            cli_github_api_url="https://ghes.example.com/api/v3",
            cli_github_pat_token="cli-token",
            cli_repo="octocat/Hello-World",
            cli_num_versions=3,
            cli_relnotes_label="release-notes",
            cli_releases_url="https://example.com/CHANGELOG.md",
            cli_hugo_site_dir=tmp_path,
            cli_build_site=False,
        )

    assert config.debug is True
    assert config.github_api_url == "https://ghes.example.com/api/v3"
    assert config.github_pat_token == "cli-token"
    assert config.github_authentication_type == GitHubAuthenticationType.PAT
    assert config.repo == "octocat/Hello-World"
    assert config.num_versions == 3
    assert config.relnotes_label == "release-notes"
    assert config.releases_url == "https://example.com/CHANGELOG.md"
    assert config.hugo_content_dir == tmp_path / "content"
    assert config.build_site is False


@pytest.mark.asyncio
async def test_token_from_settings() -> None:
    """Test that a token from the environment selects PAT authentication."""
    with patch("releases_site.configuration.reconcile.settings", _settings(GITHUB_PAT_TOKEN="env-token")):
        config = await _reconcile()

    assert config.github_pat_token == "env-token"
    assert config.github_authentication_type == GitHubAuthenticationType.PAT


@pytest.mark.asyncio
async def test_missing_repo_error() -> None:
    """Test that an empty repository setting is reported as a missing configuration element."""
    with patch("releases_site.configuration.reconcile.settings", _settings(REPO="")):
        with pytest.raises(RequiredConfigurationElementError) as exc_info:
            await _reconcile()

    assert "REPO" in str(exc_info.value)


@pytest.mark.asyncio
async def test_malformed_repo_error() -> None:
    """Test that a repository not in 'owner/repo' format is rejected."""
    with patch("releases_site.configuration.reconcile.settings", _settings()):
        with pytest.raises(ValueError):
            await _reconcile(cli_repo="rust-lang")
