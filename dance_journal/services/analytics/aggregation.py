"""
Practice Analytics Aggregation

Filters a record snapshot into a reporting window and computes the
statistics and trend series shown on the progress page.

Responsibilities:
- Filter records into [window.start, window.end] (inclusive)
- Total duration (hours rounded half up to one decimal) and session count
- Category rankings (style breakdown, top instructor, top studio)
- Time-bucketed trend series (see trend.py)
- Per-day listings in ascending time order

Ranking ties are broken by first appearance in the caller's record
collection, so the same snapshot always ranks the same way.

Usage:
    from dance_journal.services.analytics.aggregation import AggregationEngine

    engine = AggregationEngine()
    report = engine.aggregate(records, window)
    print(report.stats.total_hours_label, [b.total_hours for b in report.trend])
"""

import logging
from collections import defaultdict
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from dance_journal.config.settings import settings
from dance_journal.models.journal import (
    AnalyticsReport,
    CategoryCount,
    PracticeRecord,
    ReportingWindow,
    SummaryStats,
)
from dance_journal.services.analytics.trend import build_trend

logger = logging.getLogger(__name__)

HOURS_PRECISION = Decimal("0.1")


def to_window_time(instant: datetime, tzinfo) -> datetime:
    """
    Express ``instant`` in the window's time zone.

    Aware instants are converted; naive instants are taken as wall time in
    that zone. For a naive window, aware instants are converted to local
    wall time.

    Args:
        instant: Record timestamp
        tzinfo: The window's tzinfo (None for a naive window)

    Returns:
        datetime comparable with the window boundaries
    """
    if tzinfo is None:
        if instant.tzinfo is None:
            return instant
        return instant.astimezone().replace(tzinfo=None)
    if instant.tzinfo is None:
        return instant.replace(tzinfo=tzinfo)
    return instant.astimezone(tzinfo)


def rank_categories(values: Iterable[str], total: Optional[int] = None) -> list[CategoryCount]:
    """
    Count occurrences and rank them by count, descending.

    Equal counts keep first-appearance order (dicts preserve insertion
    order and ``sorted`` is stable).

    Args:
        values: Category value per session, in collection order
        total: Session count used for the share (defaults to len(values))

    Returns:
        list[CategoryCount]: Ranked counts with their share of sessions
    """
    counts: dict[str, int] = {}
    seen = 0
    for value in values:
        counts[value] = counts.get(value, 0) + 1
        seen += 1

    total = seen if total is None else total
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryCount(name=name, count=count, share=count / total if total else 0.0)
        for name, count in ranked
    ]


def top_category(values: Iterable[str]) -> CategoryCount:
    """
    Highest-ranked category, or the empty placeholder when there is none.

    Args:
        values: Category value per session, in collection order

    Returns:
        CategoryCount: Winner with its count (ties: first appearance wins)
    """
    ranked = rank_categories(values)
    if not ranked:
        return CategoryCount(name=settings.EMPTY_CATEGORY_LABEL, count=0, share=0.0)
    return ranked[0]


def hours_to_tenths(total_minutes: int) -> Decimal:
    """Minutes as hours rounded to one decimal place, halves rounded up."""
    return (Decimal(total_minutes) / 60).quantize(HOURS_PRECISION, rounding=ROUND_HALF_UP)


def summarize(records: list[PracticeRecord]) -> SummaryStats:
    """
    Compute headline statistics for records already inside the window.

    Args:
        records: In-window records in collection order (order decides ties)

    Returns:
        SummaryStats; zeros and placeholders for an empty list
    """
    total_minutes = sum(record.duration_minutes for record in records)
    session_count = len(records)
    hours = hours_to_tenths(total_minutes)

    return SummaryStats(
        total_duration_minutes=total_minutes,
        total_hours=float(hours),
        total_hours_label=str(hours),
        session_count=session_count,
        style_breakdown=rank_categories(
            (record.style for record in records), session_count
        ),
        top_instructor=top_category(record.instructor for record in records),
        top_studio=top_category(record.studio for record in records),
    )


def records_by_day(
    records: Iterable[PracticeRecord], tzinfo=None
) -> dict[date, list[PracticeRecord]]:
    """
    Group records by calendar day.

    Args:
        records: Records in any order
        tzinfo: Zone whose calendar defines "day" (None: naive wall time)

    Returns:
        dict[date, list[PracticeRecord]]: Days ascending; each day's records
            ascending by occurred_at (stable for equal instants).
    """
    stamped = sorted(
        ((record, to_window_time(record.occurred_at, tzinfo)) for record in records),
        key=lambda pair: pair[1],
    )
    days: dict[date, list[PracticeRecord]] = defaultdict(list)
    for record, local_instant in stamped:
        days[local_instant.date()].append(record)
    return dict(days)


def records_on_day(
    records: Iterable[PracticeRecord], day: date, tzinfo=None
) -> list[PracticeRecord]:
    """
    Records logged on ``day``, earliest first.

    Args:
        records: Records in any order
        day: Calendar day to list
        tzinfo: Zone whose calendar defines "day" (None: naive wall time)

    Returns:
        list[PracticeRecord]: Ascending by occurred_at
    """
    return records_by_day(records, tzinfo).get(day, [])


def featured_record(
    records: Iterable[PracticeRecord], day: date, tzinfo=None
) -> Optional[PracticeRecord]:
    """
    Record to show as the calendar thumbnail for ``day``.

    Prefers the earliest record with media, then the earliest record.

    Returns:
        PracticeRecord or None if nothing was logged that day
    """
    day_records = records_on_day(records, day, tzinfo)
    with_media = next((record for record in day_records if record.has_media), None)
    if with_media is not None:
        return with_media
    return day_records[0] if day_records else None


class AggregationEngine:
    """
    Stateless aggregation service.

    Holds no state between calls: the same snapshot and window always
    produce an equal report, and concurrent callers can share an instance.
    """

    def aggregate(
        self,
        records: Iterable[PracticeRecord],
        window: ReportingWindow,
    ) -> AnalyticsReport:
        """
        Build the analytics report for a window.

        Args:
            records: Record snapshot in any order
            window: Resolved reporting window

        Returns:
            AnalyticsReport with filtered records (ascending), summary stats
            and the trend series.
        """
        tz = window.start.tzinfo

        # Collection order is kept here; it decides ranking ties
        in_window = []
        for record in records:
            local_instant = to_window_time(record.occurred_at, tz)
            if window.contains(local_instant):
                in_window.append((record, local_instant))

        stats = summarize([record for record, _ in in_window])
        trend = build_trend(in_window, window)
        filtered = [
            record for record, _ in sorted(in_window, key=lambda pair: pair[1])
        ]

        logger.debug(
            f"Aggregated {stats.session_count} sessions "
            f"({stats.total_duration_minutes} min) for {window.time_range.value} "
            f"{window.start.date()}..{window.end.date()} into {len(trend)} buckets"
        )

        return AnalyticsReport(
            window=window,
            filtered=filtered,
            stats=stats,
            trend=trend,
        )


def aggregate(
    records: Iterable[PracticeRecord], window: ReportingWindow
) -> AnalyticsReport:
    """Module-level shortcut for :meth:`AggregationEngine.aggregate`."""
    return AggregationEngine().aggregate(records, window)
