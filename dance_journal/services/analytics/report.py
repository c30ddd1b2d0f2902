"""
Analytics Report Composition

Wires the range resolver and the aggregation engine together: the
selector and "now" pick the window, the engine turns the snapshot into a
report.

Usage:
    from dance_journal.services.analytics.report import build_report

    report = build_report(records, TimeRange.WEEK)
"""

from datetime import datetime
from typing import Iterable, Optional, Union

from dance_journal.enums.journal import TimeRange
from dance_journal.models.journal import AnalyticsReport, PracticeRecord
from dance_journal.services.analytics.aggregation import AggregationEngine
from dance_journal.services.analytics.range_resolver import RangeResolver


class AnalyticsService:
    """
    Stateless facade over RangeResolver + AggregationEngine.

    Caching of reports, if any, is the caller's concern.
    """

    def __init__(
        self,
        resolver: Optional[RangeResolver] = None,
        engine: Optional[AggregationEngine] = None,
    ):
        """
        Initialize the analytics service.

        Args:
            resolver: Range resolver (defaults to one using the system clock)
            engine: Aggregation engine
        """
        self.resolver = resolver or RangeResolver()
        self.engine = engine or AggregationEngine()

    def build_report(
        self,
        records: Iterable[PracticeRecord],
        selector: Union[TimeRange, str, None] = TimeRange.MONTH,
        now: Optional[datetime] = None,
    ) -> AnalyticsReport:
        """
        Resolve the window for ``selector`` and aggregate ``records`` into it.

        Args:
            records: Record snapshot in any order
            selector: Range selector; unknown values fall back to MONTH
            now: Reference instant (defaults to the resolver's clock)

        Returns:
            AnalyticsReport for the resolved window
        """
        window = self.resolver.resolve(selector, now)
        return self.engine.aggregate(records, window)


def build_report(
    records: Iterable[PracticeRecord],
    selector: Union[TimeRange, str, None] = TimeRange.MONTH,
    now: Optional[datetime] = None,
) -> AnalyticsReport:
    """Module-level shortcut for :meth:`AnalyticsService.build_report`."""
    return AnalyticsService().build_report(records, selector, now)
