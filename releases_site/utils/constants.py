"""Shared constants used across the application."""

import re
from datetime import date

from semver import Version

# Changelog Constants
# -------------------

DEFAULT_RELEASES_URL = "https://raw.githubusercontent.com/rust-lang/rust/stable/RELEASES.md"
"""Raw URL of the upstream changelog document."""

VERSION_SECTION_PATTERN = re.compile(r"^Version\s+", re.MULTILINE)
"""Pattern marking the start of each version's section in the changelog."""

CHANGELOG_VERSION_FLOOR = Version(1, 0, 0)
"""Only versions strictly greater than this are taken from the changelog."""

FETCH_TIMEOUT = 60.0
"""Timeout in seconds for fetching the changelog document."""

# Release Cadence Constants
# -------------------------

EPOCH_DATE = date(2015, 12, 10)
"""Release date the 6-week release train is anchored to."""

RELEASE_CYCLE_WEEKS = 6
"""Length of one release cycle in weeks."""

BRANCH_CUT_DAYS = 6
"""Days before the start of a cycle that its release branch is cut."""

# Weight Constants
# ----------------

MAX_WEIGHT = 2**64 - 1
"""Largest weight; newer versions get smaller weights."""

PRERELEASE_OFFSET_MODULUS = 100
"""Modulus applied to the character sum of a pre-release label."""

# GitHub Tracker Constants
# ------------------------

DEFAULT_REPO = "rust-lang/rust"
"""Repository whose milestones and pull requests are tracked."""

DEFAULT_RELNOTES_LABEL = "relnotes"
"""Label marking issues that belong in the release notes."""

DEFAULT_NUM_VERSIONS = 5
"""Number of most recent milestone versions to collect."""

STABILIZATION_SEARCH_TERMS = ["stabilise", "stabilize", "stabilisation", "stabilization"]
"""Title prefixes identifying stabilization pull requests."""

ISSUES_PER_PAGE = 100
"""Page size used when listing issues."""

SEARCH_PAGE_DELAY = 60.0
"""Seconds to wait between result pages of the search API."""

SEARCH_RESULTS_LIMIT = 1000
"""Most results the search API returns for a single query, across all pages."""

# Hugo Site Constants
# -------------------

DEFAULT_HUGO_SITE_DIR = "hugo/rust-changelogs"
"""Root directory of the Hugo site."""

HUGO_THEME = "hugo-book"
"""Hugo theme used to build the site."""

SITE_REPO_URL = "https://github.com/releases-rs/releases-rs/"
"""Link to the site's own repository, shown in the index footer."""
