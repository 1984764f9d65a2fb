"""Sort keys controlling the order of versions in the site navigation."""

from collections import defaultdict
from typing import Iterable

import structlog
from semver import Version

from releases_site.utils.constants import MAX_WEIGHT, PRERELEASE_OFFSET_MODULUS

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def determine_weight(version: Version) -> int:
    """Determine the page weight of a version.

    Hugo sorts pages by ascending weight, so newer versions get smaller
    weights. Pre-release versions are nudged after their stable counterpart
    by an offset derived from the label's characters.
    """
    base_weight = MAX_WEIGHT - (version.major << 24) - (version.minor << 8) - version.patch

    if not version.prerelease:
        return base_weight

    # Heuristic; two labels of the same release can collide.
    pre_offset = sum(ord(c) for c in version.prerelease) % PRERELEASE_OFFSET_MODULUS
    return min(base_weight + pre_offset, MAX_WEIGHT)


def find_weight_collisions(versions: Iterable[Version]) -> dict[int, list[Version]]:
    """Return the weights shared by more than one distinct version."""
    by_weight: dict[int, set[Version]] = defaultdict(set)
    for version in versions:
        by_weight[determine_weight(version)].add(version)

    collisions = {weight: sorted(shared) for weight, shared in by_weight.items() if len(shared) > 1}
    for weight, shared in collisions.items():
        logger.warning("Versions share a page weight", weight=weight, versions=[str(v) for v in shared])
    return collisions
