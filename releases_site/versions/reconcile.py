"""Reconcile released changelog versions against open release milestones."""

from datetime import date
from typing import Mapping

import structlog
from semver import Version

from releases_site.versions.exceptions import NoReleasedVersionError
from releases_site.versions.models import ChangelogEntry, MilestoneRef, ReconciledVersions, VersionTriad

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def reconcile_versions(
    changelog: Mapping[Version, ChangelogEntry],
    milestones: Mapping[Version, MilestoneRef],
    today: date,
) -> ReconciledVersions:
    """Classify versions as released or unreleased and derive the current triad.

    A version is released once its changelog release date is on or before
    ``today``. Every tracked milestone version that is not released is
    unreleased; of those, only the ones without a changelog entry are
    pending an unreleased page.

    Raises:
        NoReleasedVersionError: If no changelog version is released as of ``today``.
    """
    released = frozenset(version for version, entry in changelog.items() if entry.release_date <= today)
    if not released:
        raise NoReleasedVersionError()

    tracked = frozenset(milestones)
    unreleased = tracked - released
    pending = frozenset(version for version in unreleased if version not in changelog)
    triad = VersionTriad.from_stable(max(released))

    logger.info(
        "Reconciled versions",
        released=len(released),
        unreleased=sorted(str(v) for v in unreleased),
        stable=str(triad.stable),
        beta=str(triad.beta),
        nightly=str(triad.nightly),
    )

    return ReconciledVersions(
        released=released,
        unreleased=unreleased,
        triad=triad,
        milestone_ids={version: milestones[version].number for version in unreleased},
        pending=pending,
    )
