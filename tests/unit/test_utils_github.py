"""Contains unit tests for the utils.github module."""

import pytest

from releases_site.utils.github import split_repository_in_configuration


def test_split_repository_valid() -> None:
    """Test splitting a valid owner/repo string."""
    owner, repo = split_repository_in_configuration("rust-lang/rust")
    assert owner == "rust-lang"
    assert repo == "rust"


def test_split_repository_missing() -> None:
    """Test that ValueError is raised if repo is None."""
    with pytest.raises(ValueError, match="A repository is required in the configuration."):
        split_repository_in_configuration(None)


def test_split_repository_malformed_no_slash() -> None:
    """Test that ValueError is raised if repo is malformed (no slash)."""
    with pytest.raises(ValueError):
        split_repository_in_configuration("rust-lang-rust")


@pytest.mark.parametrize(
    "malformed_repo",
    [
        pytest.param("", id="empty string"),
        pytest.param("/", id="only a slash"),
        pytest.param("owner/repo/extra", id="too many parts"),
        pytest.param("owner//repo", id="empty part"),
    ],
)
def test_split_repository_various_malformed(malformed_repo: str) -> None:
    """Test that ValueError is raised if repo is malformed (various cases)."""
    with pytest.raises(ValueError):
        split_repository_in_configuration(malformed_repo)


@pytest.mark.parametrize(
    "repo_input,expected_owner,expected_repo",
    [
        pytest.param("rust-lang/rust", "rust-lang", "rust", id="no slashes"),
        pytest.param("/rust-lang/rust", "rust-lang", "rust", id="leading slash"),
        pytest.param("rust-lang/rust/", "rust-lang", "rust", id="trailing slash"),
        pytest.param("/rust-lang/rust/", "rust-lang", "rust", id="both slashes"),
    ],
)
def test_split_repository_strips_slashes(repo_input: str, expected_owner: str, expected_repo: str) -> None:
    """Test that leading/trailing slashes are stripped and owner/repo are parsed correctly."""
    owner, repo = split_repository_in_configuration(repo_input)
    assert owner == expected_owner
    assert repo == expected_repo
