"""
Dance Journal

Practice-journal analytics: resolve a reporting window, aggregate a
snapshot of practice records into summary statistics and a trend series,
and optionally ask a text-generation coach for feedback.

Usage:
    from dance_journal import TimeRange, build_report

    report = build_report(records, TimeRange.WEEK)
"""

from dance_journal.enums import Difficulty, MediaKind, Mood, TimeRange
from dance_journal.models import (
    AnalyticsReport,
    MediaRef,
    PracticeRecord,
    RecordCreate,
    ReportingWindow,
)
from dance_journal.services.analytics import (
    AggregationEngine,
    RangeResolver,
    build_report,
)

__version__ = "0.1.0"

__all__ = [
    "Difficulty",
    "MediaKind",
    "Mood",
    "TimeRange",
    "AnalyticsReport",
    "MediaRef",
    "PracticeRecord",
    "RecordCreate",
    "ReportingWindow",
    "AggregationEngine",
    "RangeResolver",
    "build_report",
]
