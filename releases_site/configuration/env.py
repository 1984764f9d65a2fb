"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from releases_site.utils.constants import (
    DEFAULT_HUGO_SITE_DIR,
    DEFAULT_NUM_VERSIONS,
    DEFAULT_RELEASES_URL,
    DEFAULT_RELNOTES_LABEL,
    DEFAULT_REPO,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_PAT_TOKEN: str | None = None
    REPO: str = DEFAULT_REPO

    # Release tracking settings
    NUM_VERSIONS: int = DEFAULT_NUM_VERSIONS
    RELNOTES_LABEL: str = DEFAULT_RELNOTES_LABEL
    RELEASES_URL: str = DEFAULT_RELEASES_URL

    # Hugo settings
    HUGO_SITE_DIR: Path = Path(DEFAULT_HUGO_SITE_DIR)


settings = Settings()
