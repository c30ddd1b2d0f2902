"""
Journal Enums

Defines the fixed vocabularies attached to a practice record and the
reporting ranges used by the analytics engine.
"""

from enum import Enum


class Mood(str, Enum):
    """
    How the dancer felt after a session.

    Stored as a symbolic tag; ``label`` and ``emoji`` are display helpers.
    """

    HAPPY = "happy"
    TIRED = "tired"
    ENERGIZED = "energized"
    RELAXED = "relaxed"
    FRUSTRATED = "frustrated"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        return _MOOD_EMOJI[self]


_MOOD_EMOJI = {
    Mood.HAPPY: "😊",
    Mood.TIRED: "😤",
    Mood.ENERGIZED: "🤩",
    Mood.RELAXED: "😌",
    Mood.FRUSTRATED: "😕",
}


class Difficulty(str, Enum):
    """
    Class level of a session.

    OPEN covers mixed-level classes and open sessions.
    """

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    OPEN = "Open"


class MediaKind(str, Enum):
    """Kind of media attached to a record."""

    IMAGE = "image"
    VIDEO = "video"


class TimeRange(str, Enum):
    """
    Reporting ranges for the analytics view.

    Each range resolves to a calendar-aligned window and dictates the
    trend bucket granularity:
    - WEEK: Monday..Sunday, one bucket per day
    - MONTH / LAST_MONTH: whole calendar month, 7-day buckets from the 1st
    - YEAR: Jan 1..Dec 31, one bucket per month
    """

    WEEK = "week"
    MONTH = "month"
    LAST_MONTH = "last_month"
    YEAR = "year"
