"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from datetime import datetime, timezone
from pathlib import Path

import httpx
import typer
from dotenv import load_dotenv
from githubkit.exception import GitHubException
from typer import Option
from typing_extensions import Annotated

from releases_site.configuration.driver import get_site_config
from releases_site.configuration.exceptions import (
    GitHubAuthenticationConfigurationError,
    RequiredConfigurationElementError,
)
from releases_site.generate.driver import run_generate_site_workflow
from releases_site.github.changelog import fetch_changelog
from releases_site.utils.constants import DEFAULT_RELEASES_URL
from releases_site.utils.helpers import format_date, pluralize, utc_date
from releases_site.utils.log import configure_logging
from releases_site.versions.cadence import calculate_cadence
from releases_site.versions.changelog import parse_changelog
from releases_site.versions.exceptions import SiteGenerationError
from releases_site.versions.reconcile import reconcile_versions

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Generate the Rust releases site.")


@typer_app.command(name="generate")
def generate_cli(
    repo: Annotated[str | None, Option(envvar="REPO", help="Repository tracking the releases (owner/repo).")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_pat_token: Annotated[
        str | None, Option(envvar=["GITHUB_PAT_TOKEN", "GITHUB_TOKEN"], help="GitHub Personal Access Token; anonymous access if unset.")
    ] = None,
    num_versions: Annotated[int | None, Option(envvar="NUM_VERSIONS", min=1, help="Number of most recent milestone versions to track.")] = None,
    relnotes_label: Annotated[str | None, Option(envvar="RELNOTES_LABEL", help="Label of issues listed in release notes.")] = None,
    releases_url: Annotated[str | None, Option(envvar="RELEASES_URL", help="URL of the raw changelog document.")] = None,
    hugo_site_dir: Annotated[Path | None, Option(envvar="HUGO_SITE_DIR", help="Root directory of the Hugo site.")] = None,
    build: Annotated[bool, Option("--build/--no-build", help="Run Hugo after writing the content.")] = True,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Render every version page and the index, then build the site with Hugo."""
    configure_logging(debug)
    try:
        config = get_site_config(
            debug=debug,
            github_api_url=github_api_url,
            github_pat_token=github_pat_token,
            repo=repo,
            num_versions=num_versions,
            relnotes_label=relnotes_label,
            releases_url=releases_url,
            hugo_site_dir=hugo_site_dir,
            build_site=build,
        )
    except (GitHubAuthenticationConfigurationError, RequiredConfigurationElementError, ValueError) as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1) from e

    try:
        result = asyncio.run(run_generate_site_workflow(config))
    except (SiteGenerationError, ValueError, OSError) as e:
        typer.echo(f"Site generation failed: {e}", err=True)
        raise typer.Exit(1) from e
    except (httpx.HTTPError, GitHubException) as e:
        typer.echo(f"Failed to fetch release data: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"Stable: {result.triad.stable}, beta: {result.triad.beta}, nightly: {result.triad.nightly}")
    typer.echo(f"Wrote {len(result.released_pages)} released and {len(result.unreleased_pages)} unreleased version pages to {result.content_dir}")
    typer.echo(f"Listed {result.stabilization_prs} stabilization PRs")
    if not result.built:
        typer.echo("Skipped the Hugo build")


@typer_app.command(name="versions")
def versions_cli(
    changelog_file: Annotated[
        Path | None, Option(exists=True, dir_okay=False, help="Read the changelog from a local file instead of downloading it.")
    ] = None,
    releases_url: Annotated[str, Option(envvar="RELEASES_URL", help="URL of the raw changelog document.")] = DEFAULT_RELEASES_URL,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Show the current stable, beta and nightly versions and their release dates."""
    configure_logging(debug)
    as_of = datetime.now(timezone.utc)
    today = utc_date(as_of)

    try:
        if changelog_file is not None:
            document = changelog_file.read_text(encoding="utf-8")
        else:
            document = asyncio.run(fetch_changelog(releases_url))
        reconciled = reconcile_versions(parse_changelog(document), {}, today)
    except SiteGenerationError as e:
        typer.echo(f"Failed to determine versions: {e}", err=True)
        raise typer.Exit(1) from e
    except httpx.HTTPError as e:
        typer.echo(f"Failed to fetch the changelog: {e}", err=True)
        raise typer.Exit(1) from e

    triad = reconciled.triad
    typer.echo(f"Stable:  {triad.stable}")
    for name, version, step in (("Beta", triad.beta, 1), ("Nightly", triad.nightly, 2)):
        cadence = calculate_cadence(today, step)
        days_left = pluralize("day", (cadence.release_date - today).days)
        typer.echo(f"{name + ':':<8} {version} (stable on {format_date(cadence.release_date)}, {days_left} left)")


if __name__ == "__main__":
    typer_app()
