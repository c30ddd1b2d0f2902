"""
Reporting Range Resolution

Turns a symbolic range selector and "now" into a calendar-aligned
reporting window.

Rules (relative to now's local calendar date):
- WEEK: Monday 00:00:00 through Sunday 23:59:59 of the current week
- MONTH: 1st 00:00:00 through the last day 23:59:59 of the current month
- LAST_MONTH: the whole preceding month (January rolls back to December)
- YEAR: Jan 1 00:00:00 through Dec 31 23:59:59

Unknown selectors fall back to the MONTH policy.

Usage:
    from dance_journal.services.analytics.range_resolver import resolve

    window = resolve(TimeRange.LAST_MONTH, datetime(2024, 1, 15))
    # ReportingWindow(start=2023-12-01 00:00:00, end=2023-12-31 23:59:59)
"""

import calendar
import logging
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from dance_journal.enums.journal import TimeRange
from dance_journal.models.journal import ReportingWindow

logger = logging.getLogger(__name__)

START_OF_DAY = time(0, 0, 0)
END_OF_DAY = time(23, 59, 59)


def coerce_time_range(selector: Union[TimeRange, str, None]) -> TimeRange:
    """
    Resolve a selector value to a TimeRange.

    Accepts enum members, their values ("last_month") or names
    ("LAST_MONTH"). Anything else falls back to MONTH.

    Args:
        selector: Selector from the range control (may be None)

    Returns:
        Resolved TimeRange
    """
    if isinstance(selector, TimeRange):
        return selector

    if isinstance(selector, str):
        candidate = selector.strip()
        try:
            return TimeRange(candidate.lower())
        except ValueError:
            pass
        if candidate.upper() in TimeRange.__members__:
            return TimeRange[candidate.upper()]

    logger.warning(f"Unknown time range selector: {selector!r}, using 'month'")
    return TimeRange.MONTH


def start_of_day(day: date, tzinfo=None) -> datetime:
    """00:00:00 on ``day``."""
    return datetime.combine(day, START_OF_DAY, tzinfo=tzinfo)


def end_of_day(day: date, tzinfo=None) -> datetime:
    """23:59:59 on ``day``."""
    return datetime.combine(day, END_OF_DAY, tzinfo=tzinfo)


def last_day_of_month(year: int, month: int) -> date:
    """Last calendar day of the given month."""
    return date(year, month, calendar.monthrange(year, month)[1])


def previous_month(year: int, month: int) -> tuple[int, int]:
    """(year, month) of the month before the given one."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def resolve(
    selector: Union[TimeRange, str, None],
    now: Optional[datetime] = None,
) -> ReportingWindow:
    """
    Compute the reporting window for a selector.

    The window keeps ``now``'s tzinfo, so an aware ``now`` yields an aware
    window in the same zone and a naive ``now`` yields local wall time.

    Args:
        selector: Range selector (TimeRange, its value or name)
        now: Reference instant (defaults to the current local time)

    Returns:
        ReportingWindow with inclusive start/end boundaries
    """
    time_range = coerce_time_range(selector)
    now = now or datetime.now()
    tz = now.tzinfo
    today = now.date()

    if time_range == TimeRange.WEEK:
        monday = today - timedelta(days=today.weekday())
        first_day, last_day = monday, monday + timedelta(days=6)
    elif time_range == TimeRange.LAST_MONTH:
        year, month = previous_month(today.year, today.month)
        first_day, last_day = date(year, month, 1), last_day_of_month(year, month)
    elif time_range == TimeRange.YEAR:
        first_day, last_day = date(today.year, 1, 1), date(today.year, 12, 31)
    else:  # TimeRange.MONTH
        first_day = today.replace(day=1)
        last_day = last_day_of_month(today.year, today.month)

    return ReportingWindow(
        start=start_of_day(first_day, tz),
        end=end_of_day(last_day, tz),
        time_range=time_range,
    )


class RangeResolver:
    """
    Stateless service wrapper around :func:`resolve`.

    Accepts an optional clock so callers (and tests) can pin "now".
    """

    def __init__(self, clock=None):
        """
        Initialize the resolver.

        Args:
            clock: Zero-argument callable returning the current datetime.
                Defaults to datetime.now.
        """
        self._clock = clock or datetime.now

    def resolve(
        self,
        selector: Union[TimeRange, str, None],
        now: Optional[datetime] = None,
    ) -> ReportingWindow:
        """Resolve ``selector`` against ``now`` or the configured clock."""
        return resolve(selector, now or self._clock())
