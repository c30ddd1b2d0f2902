"""
Practice Analytics Services

Pure, synchronous computations over an in-memory record snapshot.

Modules:
- range_resolver: selector + now -> calendar-aligned reporting window
- aggregation: filtering, summary statistics, per-day listings
- trend: bucket layout and hour totals for the trend chart
- report: resolver + engine composition

Usage:
    from dance_journal.services.analytics import (
        AggregationEngine,
        RangeResolver,
        build_report,
    )
"""

from dance_journal.services.analytics.range_resolver import (
    RangeResolver,
    coerce_time_range,
    resolve,
)
from dance_journal.services.analytics.aggregation import (
    AggregationEngine,
    aggregate,
    featured_record,
    rank_categories,
    records_by_day,
    records_on_day,
    summarize,
)
from dance_journal.services.analytics.trend import bucket_spans, build_trend
from dance_journal.services.analytics.report import AnalyticsService, build_report

__all__ = [
    # Range resolution
    "RangeResolver",
    "coerce_time_range",
    "resolve",
    # Aggregation
    "AggregationEngine",
    "aggregate",
    "featured_record",
    "rank_categories",
    "records_by_day",
    "records_on_day",
    "summarize",
    # Trend
    "bucket_spans",
    "build_trend",
    # Composition
    "AnalyticsService",
    "build_report",
]
