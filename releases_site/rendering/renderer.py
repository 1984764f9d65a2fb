"""Rendering of version pages and the site index as Hugo markdown."""

from collections.abc import Collection, Iterable
from datetime import date, datetime, timedelta
from functools import lru_cache

import jinja2
import structlog
from semver import Version

from releases_site.utils.constants import SITE_REPO_URL
from releases_site.utils.helpers import escape_double_quotes, format_date, pluralize, utc_date, utc_datetime
from releases_site.utils.templates import TEMPLATES_DIR, construct_jinja2_template_from_file, render_template
from releases_site.versions.cadence import calculate_cadence
from releases_site.versions.models import StabilizationPR, TrackedIssue, VersionTriad
from releases_site.versions.weight import determine_weight

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@lru_cache(maxsize=None)
def _template(name: str) -> jinja2.Template:
    return construct_jinja2_template_from_file(TEMPLATES_DIR / name)


def release_name(version: Version, stable: Version) -> str:
    """Name the release channel an unreleased version is currently on, if any."""
    if version.minor == stable.minor + 2:
        return "nightly"
    if version.minor == stable.minor + 1:
        return "beta"
    return ""


def render_released(version: Version, body: str, release_date: date) -> str:
    """Render the page of a version that has a changelog entry."""
    trimmed = body.strip()
    # Some sections have no title before their first list item.
    if trimmed.startswith("-"):
        trimmed = f"Changes\n-------\n{trimmed}"

    if version.patch == 0:
        cadence = calculate_cadence(release_date - timedelta(days=1), 1)
        branch_info = f"- Branched from master on: _{format_date(cadence.branch_date)}_"
    else:
        branch_info = "- This is a patch release"

    return render_template(
        _template("released_version.md.j2"),
        weight=determine_weight(version),
        version=str(version),
        release_date=format_date(release_date),
        branch_info=branch_info,
        body=trimmed,
    )


def render_unreleased(version: Version, stable: Version, issues: Iterable[TrackedIssue], as_of: datetime) -> str:
    """Render the page of a version that is only known from its milestone.

    Issues are listed most recently merged first; issues merged on the same
    day keep the order they were supplied in. Issues without a closure date
    are left out.
    """
    today = utc_date(as_of)
    name = release_name(version, stable)
    cadence = calculate_cadence(today, version.minor - stable.minor)
    already_branched = today > cadence.branch_date

    merged = [(issue, (today - utc_date(issue.closed_at)).days) for issue in issues if issue.closed_at is not None]
    merged.sort(key=lambda item: item[1])

    return render_template(
        _template("unreleased_version.md.j2"),
        weight=determine_weight(version),
        title=f"{version} {name}" if name else str(version),
        already_branched=already_branched,
        stable_date=format_date(cadence.release_date),
        branch_date=format_date(cadence.branch_date),
        issues=[{"title": issue.title, "url": issue.url, "merged_ago": pluralize("day", days_ago)} for issue, days_ago in merged],
    )


def render_index(
    triad: VersionTriad,
    unreleased: Collection[Version],
    stabilization_prs: Iterable[StabilizationPR],
    as_of: datetime,
) -> str:
    """Render the site index.

    Beta and nightly are only linked when they have a page of their own,
    that is when they are among the ``unreleased`` versions.
    """
    as_of = utc_datetime(as_of)
    today = as_of.date()

    upcoming_releases = []
    for name, version, step in (("Beta", triad.beta, 1), ("Nightly", triad.nightly, 2)):
        if version not in unreleased:
            logger.debug("No unreleased page to link", channel=name, version=str(version))
            continue
        cadence = calculate_cadence(today, step)
        upcoming_releases.append(
            {
                "name": name,
                "version": str(version),
                "release_date": format_date(cadence.release_date),
                "days_left": pluralize("day", (cadence.release_date - today).days),
            }
        )

    prs = [
        {
            "title": escape_double_quotes(pr.title),
            "age": pluralize("day", (as_of - utc_datetime(pr.created_at)).days),
            "labels": pr.labels,
            "number": pr.number,
            "url": pr.url,
        }
        for pr in sorted(stabilization_prs, key=lambda pr: utc_datetime(pr.created_at), reverse=True)
    ]

    return render_template(
        _template("index.md.j2"),
        stable=str(triad.stable),
        upcoming_releases=upcoming_releases,
        stabilization_prs=prs,
        repo_url=SITE_REPO_URL,
        generated_at=as_of.isoformat(),
    )
