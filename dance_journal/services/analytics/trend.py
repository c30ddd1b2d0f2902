"""
Trend Bucketing

Splits a reporting window into chart buckets and sums practice hours into
them. Granularity comes from the window's time range, not from the data:
every bucket is emitted even when no session falls into it.

- WEEK: 7 daily buckets, labelled "Mon".."Sun"
- MONTH / LAST_MONTH: 7-day buckets from the 1st; the last one is cut at
  the window end and labelled with its own span ("2/29-2/29")
- YEAR: 12 monthly buckets, labelled "Jan".."Dec"
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable

from dance_journal.enums.journal import TimeRange
from dance_journal.models.journal import PracticeRecord, ReportingWindow, TrendBucket
from dance_journal.services.analytics.range_resolver import (
    end_of_day,
    last_day_of_month,
    start_of_day,
)

# Fixed English abbreviations so labels do not depend on the process locale
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MONTH_BUCKET_DAYS = 7


@dataclass(frozen=True)
class BucketSpan:
    """Calendar-day span of one bucket (both ends inclusive)."""

    label: str
    first_day: date
    last_day: date


def _day_spans(first: date, last: date) -> list[BucketSpan]:
    spans = []
    day = first
    while day <= last:
        spans.append(BucketSpan(WEEKDAY_LABELS[day.weekday()], day, day))
        day += timedelta(days=1)
    return spans


def _seven_day_spans(first: date, last: date) -> list[BucketSpan]:
    spans = []
    bucket_start = first
    while bucket_start <= last:
        bucket_end = min(bucket_start + timedelta(days=MONTH_BUCKET_DAYS - 1), last)
        label = (
            f"{bucket_start.month}/{bucket_start.day}"
            f"-{bucket_end.month}/{bucket_end.day}"
        )
        spans.append(BucketSpan(label, bucket_start, bucket_end))
        bucket_start = bucket_end + timedelta(days=1)
    return spans


def _month_spans(first: date, last: date) -> list[BucketSpan]:
    spans = []
    year, month = first.year, first.month
    while (year, month) <= (last.year, last.month):
        month_first = max(date(year, month, 1), first)
        month_last = min(last_day_of_month(year, month), last)
        spans.append(BucketSpan(MONTH_LABELS[month - 1], month_first, month_last))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return spans


def bucket_spans(window: ReportingWindow) -> list[BucketSpan]:
    """
    Lay out the trend buckets for a window.

    Args:
        window: Resolved reporting window

    Returns:
        list[BucketSpan]: Contiguous day spans covering the whole window,
            in chronological order.
    """
    first, last = window.start.date(), window.end.date()

    if window.time_range == TimeRange.WEEK:
        return _day_spans(first, last)
    if window.time_range == TimeRange.YEAR:
        return _month_spans(first, last)
    return _seven_day_spans(first, last)


def build_trend(
    records: Iterable[tuple[PracticeRecord, datetime]],
    window: ReportingWindow,
) -> list[TrendBucket]:
    """
    Sum practice hours per bucket.

    Args:
        records: (record, instant in the window's time zone) pairs, all
            already inside the window.
        window: Resolved reporting window

    Returns:
        list[TrendBucket]: One bucket per span; hours are unrounded.
    """
    spans = bucket_spans(window)
    minutes = [0] * len(spans)

    # calendar day -> bucket index
    day_index: dict[date, int] = {}
    for index, span in enumerate(spans):
        day = span.first_day
        while day <= span.last_day:
            day_index[day] = index
            day += timedelta(days=1)

    for record, local_instant in records:
        index = day_index.get(local_instant.date())
        if index is not None:
            minutes[index] += record.duration_minutes

    tz = window.start.tzinfo
    return [
        TrendBucket(
            label=span.label,
            start=max(start_of_day(span.first_day, tz), window.start),
            end=min(end_of_day(span.last_day, tz), window.end),
            total_hours=total / 60,
        )
        for span, total in zip(spans, minutes)
    ]
