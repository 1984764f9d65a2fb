"""Release and branch date projection for the 6-week release train."""

import math
from datetime import date, timedelta

from releases_site.utils.constants import BRANCH_CUT_DAYS, EPOCH_DATE, RELEASE_CYCLE_WEEKS
from releases_site.versions.models import ReleaseCadence


def _whole_weeks_between(start: date, end: date) -> int:
    days = (end - start).days
    weeks = abs(days) // 7
    return weeks if days >= 0 else -weeks


def calculate_cadence(as_of: date, step: int, epoch: date = EPOCH_DATE) -> ReleaseCadence:
    """Calculate the release and branch dates ``step`` cycles after ``as_of``.

    Mirrors the schedule published at https://forge.rust-lang.org/: a release
    every six weeks from ``epoch``, with the release branch cut six days
    before the start of the preceding cycle. A step of 1 gives the next
    release, 2 the one after, and 0 or less gives past cycles.
    """
    elapsed_cycles = math.floor(_whole_weeks_between(epoch, as_of) / RELEASE_CYCLE_WEEKS)
    release_date = epoch + timedelta(weeks=RELEASE_CYCLE_WEEKS * (elapsed_cycles + step))
    branch_date = epoch + timedelta(weeks=RELEASE_CYCLE_WEEKS * (elapsed_cycles + step - 1)) - timedelta(days=BRANCH_CUT_DAYS)
    return ReleaseCadence(release_date=release_date, branch_date=branch_date)
