"""Version parsing, release cadence and reconciliation."""

from .cadence import calculate_cadence
from .changelog import parse_changelog
from .exceptions import (
    ChangelogDateError,
    ChangelogParseError,
    NoReleasedVersionError,
    SiteGenerationError,
    VersionParseError,
)
from .models import (
    ChangelogEntry,
    MilestoneRef,
    PRLabel,
    ReconciledVersions,
    ReleaseCadence,
    StabilizationPR,
    TrackedIssue,
    VersionTriad,
)
from .parser import parse_lenient_version
from .reconcile import reconcile_versions
from .weight import determine_weight, find_weight_collisions

__all__ = [
    "ChangelogEntry",
    "ChangelogDateError",
    "ChangelogParseError",
    "MilestoneRef",
    "NoReleasedVersionError",
    "PRLabel",
    "ReconciledVersions",
    "ReleaseCadence",
    "SiteGenerationError",
    "StabilizationPR",
    "TrackedIssue",
    "VersionParseError",
    "VersionTriad",
    "calculate_cadence",
    "determine_weight",
    "find_weight_collisions",
    "parse_changelog",
    "parse_lenient_version",
    "reconcile_versions",
]
