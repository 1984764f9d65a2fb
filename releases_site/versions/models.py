"""Data models for changelog entries, release cadence and reconciled versions."""

from dataclasses import dataclass, field
from datetime import date, datetime

from pydantic import BaseModel
from semver import Version


@dataclass(frozen=True)
class ChangelogEntry:
    """A single version's section of the upstream changelog."""

    version: Version
    body: str
    release_date: date


@dataclass(frozen=True)
class ReleaseCadence:
    """Expected release and branch dates of a release cycle."""

    release_date: date
    branch_date: date


@dataclass(frozen=True)
class MilestoneRef:
    """A tracker milestone whose title is a version."""

    version: Version
    number: int


@dataclass(frozen=True)
class VersionTriad:
    """The stable, beta and nightly versions as of a given day."""

    stable: Version
    beta: Version
    nightly: Version

    @classmethod
    def from_stable(cls, stable: Version) -> "VersionTriad":
        """Derive beta and nightly from the current stable version."""
        return cls(
            stable=stable,
            beta=stable.replace(minor=stable.minor + 1, patch=0, prerelease=None, build=None),
            nightly=stable.replace(minor=stable.minor + 2, patch=0, prerelease=None, build=None),
        )


@dataclass(frozen=True)
class ReconciledVersions:
    """Outcome of reconciling the changelog against open milestones.

    ``unreleased`` holds every tracked version that is not released yet, while
    ``pending`` only holds those without a changelog entry. Versions with a
    changelog entry are always rendered from the changelog, even when their
    release date lies in the future.
    """

    released: frozenset[Version]
    unreleased: frozenset[Version]
    triad: VersionTriad
    milestone_ids: dict[Version, int] = field(default_factory=dict)
    pending: frozenset[Version] = frozenset()


class TrackedIssue(BaseModel):
    """A closed issue attached to a release milestone."""

    title: str
    url: str
    closed_at: datetime | None = None


class PRLabel(BaseModel):
    """A label attached to a pull request."""

    name: str
    description: str | None = None


class StabilizationPR(BaseModel):
    """An open pull request stabilizing a language or library feature."""

    id: int
    title: str
    number: int
    url: str
    created_at: datetime
    labels: list[PRLabel] = []
