"""Orchestrates the generation of the releases site."""

import time
from datetime import datetime, timezone

import structlog
from semver import Version

from releases_site.configuration.models import SiteConfig
from releases_site.generate.results import GenerateSiteResult
from releases_site.github.adapter import GitHubKitAdapter
from releases_site.github.changelog import fetch_changelog
from releases_site.rendering.renderer import render_index, render_released, render_unreleased
from releases_site.site.hugo import HugoSiteManager
from releases_site.utils.constants import SEARCH_PAGE_DELAY
from releases_site.utils.helpers import utc_date
from releases_site.versions.changelog import parse_changelog
from releases_site.versions.reconcile import reconcile_versions
from releases_site.versions.weight import find_weight_collisions

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_generate_site_workflow(
    config: SiteConfig,
    as_of: datetime | None = None,
    github_adapter: GitHubKitAdapter | None = None,
    site_manager: HugoSiteManager | None = None,
) -> GenerateSiteResult:
    """Run the generate workflow: fetch, reconcile, render, then write and build the site.

    Every page is rendered in memory before the content directory is
    touched, so a parse or reconciliation failure leaves the previous site
    in place.

    Raises:
        SiteGenerationError: If the changelog cannot be parsed, no version is
            released yet, or the site build fails.
    """
    if as_of is None:
        as_of = datetime.now(timezone.utc)
    today = utc_date(as_of)
    start_time = time.time()
    logger.info("Generating releases site", as_of=as_of.isoformat(), repo=config.repo)

    document = await fetch_changelog(config.releases_url)
    changelog = parse_changelog(document)

    if github_adapter is None:
        github_adapter = await GitHubKitAdapter.create(
            repo=config.repo,
            github_auth_type=config.github_authentication_type,
            github_pat_token=config.github_pat_token,
            github_api_url=config.github_api_url,
        )

    milestones = await github_adapter.fetch_release_milestones(config.relnotes_label, config.num_versions)
    reconciled = reconcile_versions(changelog, milestones, today)

    pages: dict[Version, str] = {}
    for version in sorted(changelog):
        entry = changelog[version]
        pages[version] = render_released(version, entry.body, entry.release_date)
    released_pages = list(pages)

    unreleased_pages = sorted(reconciled.pending)
    for version in unreleased_pages:
        issues = await github_adapter.fetch_milestone_issues(reconciled.milestone_ids[version], config.relnotes_label)
        logger.info("Rendering unreleased version", version=str(version), issues=len(issues))
        pages[version] = render_unreleased(version, reconciled.triad.stable, issues, as_of)

    find_weight_collisions(pages)

    stabilization_prs = await github_adapter.fetch_stabilization_prs(config.stabilization_search_terms, page_delay=SEARCH_PAGE_DELAY)
    index = render_index(reconciled.triad, reconciled.unreleased, stabilization_prs.values(), as_of)

    if site_manager is None:
        site_manager = HugoSiteManager(
            site_dir=config.hugo_site_dir,
            template_dir=config.hugo_template_dir,
            content_dir=config.hugo_content_dir,
            public_dir=config.hugo_public_dir,
        )
    site_manager.setup_directories()
    for version, content in pages.items():
        site_manager.write_version_file(version, content)
    site_manager.write_index_file(index)
    logger.info("Wrote site content", pages=len(pages), content_dir=str(site_manager.content_dir))

    if config.build_site:
        site_manager.build_site()
    else:
        logger.info("Skipping site build")

    logger.info("Generated releases site", duration_seconds=round(time.time() - start_time, 2))
    return GenerateSiteResult(
        triad=reconciled.triad,
        released_pages=released_pages,
        unreleased_pages=unreleased_pages,
        stabilization_prs=len(stabilization_prs),
        content_dir=site_manager.content_dir,
        built=config.build_site,
    )
