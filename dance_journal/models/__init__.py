"""Pydantic models for the application."""

from dance_journal.models.journal import (
    AnalyticsReport,
    CategoryCount,
    MediaRef,
    PracticeRecord,
    RecordCreate,
    ReportingWindow,
    SummaryStats,
    TrendBucket,
)
from dance_journal.models.llm_usage import LLMUsage

__all__ = [
    "AnalyticsReport",
    "CategoryCount",
    "MediaRef",
    "PracticeRecord",
    "RecordCreate",
    "ReportingWindow",
    "SummaryStats",
    "TrendBucket",
    "LLMUsage",
]
