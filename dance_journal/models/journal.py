"""
Journal Data Models (Pydantic)

Schemas for practice records and the analytics report built from them:
- PracticeRecord: one logged practice session (immutable)
- RecordCreate: input from the logging form, with creation defaults
- ReportingWindow: resolved [start, end] range for a report
- TrendBucket / CategoryCount / SummaryStats: report building blocks
- AnalyticsReport: everything the presentation layer needs

Data flows: RecordCreate → PracticeRecord → AggregationEngine → AnalyticsReport
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from dance_journal.enums.journal import Difficulty, MediaKind, Mood, TimeRange
from dance_journal.models.base import FrozenModel, StrictRequest


# ===========================================
# Practice Records
# ===========================================


class MediaRef(FrozenModel):
    """Reference to a photo or video attached to a session."""

    url: str = Field(..., min_length=1)
    kind: MediaKind = MediaKind.IMAGE


class PracticeRecord(FrozenModel):
    """
    A single logged practice session.

    Records are never mutated after creation; an edit replaces the record
    with the same ``id``. ``occurred_at`` is the only instant used for
    filtering and bucketing.
    """

    id: str = Field(..., min_length=1)
    occurred_at: datetime
    style: str = Field(..., min_length=1)
    duration_minutes: int = Field(..., ge=0)
    studio: str = "Unknown Studio"
    instructor: str = "Self"
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    mood: Mood = Mood.HAPPY
    notes: str = ""
    music_title: str = ""
    media: Optional[MediaRef] = None

    @property
    def has_media(self) -> bool:
        return self.media is not None


class RecordCreate(StrictRequest):
    """
    Input captured by the logging form.

    Every field is optional; the journal service fills in the configured
    defaults. A session must carry media, or both a mood and a style.

    Note: Uses StrictRequest - unknown fields raise ValidationError.
    """

    id: Optional[str] = None
    occurred_at: Optional[datetime] = None
    style: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    studio: Optional[str] = None
    instructor: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    mood: Optional[Mood] = None
    notes: str = ""
    music_title: str = ""
    media: Optional[MediaRef] = None

    @model_validator(mode="after")
    def _require_media_or_details(self) -> "RecordCreate":
        has_details = self.mood is not None and bool(self.style)
        if self.media is None and not has_details:
            raise ValueError(
                "A session needs a photo/video, or both a mood and a style"
            )
        return self


# ===========================================
# Reporting Window
# ===========================================


class ReportingWindow(FrozenModel):
    """
    Resolved reporting range.

    Both ends are inclusive. ``time_range`` records which selector produced
    the window so trend granularity can be derived from the window alone.
    """

    start: datetime
    end: datetime
    time_range: TimeRange

    @model_validator(mode="after")
    def _check_order(self) -> "ReportingWindow":
        if self.start >= self.end:
            raise ValueError("Reporting window start must be before end")
        return self

    def contains(self, instant: datetime) -> bool:
        """Whether ``instant`` lies within [start, end]."""
        return self.start <= instant <= self.end


# ===========================================
# Report Models
# ===========================================


class TrendBucket(FrozenModel):
    """
    One bar of the practice trend chart.

    ``total_hours`` is unrounded so buckets can be re-aggregated without
    drift; rounding is left to the presentation layer.
    """

    label: str
    start: datetime
    end: datetime
    total_hours: float = 0.0


class CategoryCount(FrozenModel):
    """Session count for one category value (style, studio, instructor)."""

    name: str
    count: int = Field(0, ge=0)
    share: float = Field(0.0, ge=0.0, le=1.0, description="count / session count")


class SummaryStats(FrozenModel):
    """Headline numbers for a reporting window."""

    total_duration_minutes: int = 0
    total_hours: float = 0.0  # minutes / 60, one decimal, halves up
    total_hours_label: str = "0.0"
    session_count: int = 0
    style_breakdown: list[CategoryCount] = Field(default_factory=list)
    top_instructor: CategoryCount
    top_studio: CategoryCount


class AnalyticsReport(FrozenModel):
    """
    Result of aggregating a record snapshot over a reporting window.

    ``filtered`` is sorted ascending by ``occurred_at``; records with equal
    instants keep their input order.
    """

    window: ReportingWindow
    filtered: list[PracticeRecord] = Field(default_factory=list)
    stats: SummaryStats
    trend: list[TrendBucket] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.filtered
