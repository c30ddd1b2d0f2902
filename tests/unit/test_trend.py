"""
Unit tests for trend bucketing.

Tests bucket layout per time range, contiguity and clamping to the
window, and hour sums per bucket.
"""

from datetime import datetime, timedelta

import pytest

from dance_journal.enums.journal import TimeRange
from dance_journal.services.analytics.aggregation import aggregate
from dance_journal.services.analytics.range_resolver import resolve
from dance_journal.services.analytics.trend import bucket_spans, build_trend


class TestBucketLayout:
    """Tests for bucket spans and labels."""

    @pytest.mark.parametrize(
        "now,expected_labels",
        [
            (
                datetime(2024, 1, 10),
                ["1/1-1/7", "1/8-1/14", "1/15-1/21", "1/22-1/28", "1/29-1/31"],
            ),
            (
                datetime(2024, 4, 10),
                ["4/1-4/7", "4/8-4/14", "4/15-4/21", "4/22-4/28", "4/29-4/30"],
            ),
            (
                datetime(2024, 2, 10),
                ["2/1-2/7", "2/8-2/14", "2/15-2/21", "2/22-2/28", "2/29-2/29"],
            ),
            (
                datetime(2023, 2, 10),
                ["2/1-2/7", "2/8-2/14", "2/15-2/21", "2/22-2/28"],
            ),
        ],
        ids=["31_day_month", "30_day_month", "leap_february", "plain_february"],
    )
    def test_month_buckets(self, now, expected_labels):
        """Test 7-day buckets from the 1st with a truncated final bucket."""
        window = resolve(TimeRange.MONTH, now)

        assert [span.label for span in bucket_spans(window)] == expected_labels

    def test_last_month_uses_same_layout(self):
        window = resolve(TimeRange.LAST_MONTH, datetime(2024, 1, 15))

        labels = [span.label for span in bucket_spans(window)]

        assert labels[0] == "12/1-12/7"
        assert labels[-1] == "12/29-12/31"

    def test_week_has_seven_daily_buckets(self):
        window = resolve(TimeRange.WEEK, datetime(2024, 3, 6))

        spans = bucket_spans(window)

        assert [s.label for s in spans] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert all(s.first_day == s.last_day for s in spans)

    def test_year_has_twelve_monthly_buckets(self):
        window = resolve(TimeRange.YEAR, datetime(2024, 6, 1))

        spans = bucket_spans(window)

        assert len(spans) == 12
        assert spans[0].label == "Jan"
        assert spans[-1].label == "Dec"
        assert spans[1].last_day.day == 29


class TestBucketCoverage:
    """Tests that buckets tile the window exactly."""

    @pytest.mark.parametrize("selector", list(TimeRange), ids=lambda t: t.value)
    def test_buckets_are_contiguous_and_cover_window(self, selector):
        window = resolve(selector, datetime(2024, 1, 31, 12))

        trend = build_trend([], window)

        assert trend[0].start == window.start
        assert trend[-1].end == window.end
        for previous, current in zip(trend, trend[1:]):
            assert current.start - previous.end == timedelta(seconds=1)

    def test_all_buckets_present_when_empty(self):
        window = resolve(TimeRange.YEAR, datetime(2024, 6, 1))

        trend = build_trend([], window)

        assert len(trend) == 12
        assert all(bucket.total_hours == 0 for bucket in trend)


class TestBucketValues:
    """Tests for hour sums per bucket."""

    def test_month_bucket_sums(self, make_record):
        """Test that sessions land in the 7-day bucket containing their day."""
        records = [
            make_record(datetime(2024, 1, 7, 23, 59, 59), duration_minutes=30),
            make_record(datetime(2024, 1, 8, 0, 0, 0), duration_minutes=45),
            make_record(datetime(2024, 1, 31, 20, 0), duration_minutes=20),
        ]
        window = resolve(TimeRange.MONTH, datetime(2024, 1, 10))

        trend = aggregate(records, window).trend

        assert trend[0].total_hours == pytest.approx(0.5)
        assert trend[1].total_hours == pytest.approx(0.75)
        assert trend[4].total_hours == pytest.approx(20 / 60)

    def test_hours_are_unrounded(self, make_record):
        window = resolve(TimeRange.WEEK, datetime(2024, 3, 6))
        record = make_record(datetime(2024, 3, 5, 10), duration_minutes=50)

        trend = aggregate([record], window).trend

        assert trend[1].total_hours == 50 / 60

    def test_year_bucket_sums(self, make_record):
        records = [
            make_record(datetime(2024, 2, 29, 18), duration_minutes=90),
            make_record(datetime(2024, 12, 31, 23, 59, 59), duration_minutes=60),
        ]
        window = resolve(TimeRange.YEAR, datetime(2024, 6, 1))

        trend = aggregate(records, window).trend

        assert trend[1].total_hours == 1.5
        assert trend[11].total_hours == 1.0
        assert sum(bucket.total_hours for bucket in trend) == 2.5

    def test_future_week_days_are_zero(self, make_record):
        """Test that days after now still get a zero bucket."""
        window = resolve(TimeRange.WEEK, datetime(2024, 3, 5, 9))
        record = make_record(datetime(2024, 3, 4, 19), duration_minutes=60)

        trend = aggregate([record], window).trend

        assert len(trend) == 7
        assert [b.total_hours for b in trend] == [1.0, 0, 0, 0, 0, 0, 0]
