"""
Centralized enum definitions for the application.

All enums are organized by domain:
- journal.py: Moods, difficulty levels, media kinds, reporting ranges
- coach.py: Text-generation operations

Usage:
    from dance_journal.enums import Mood, TimeRange

    # Or import from specific module
    from dance_journal.enums.coach import CoachOperation
"""

from dance_journal.enums.journal import (
    Mood,
    Difficulty,
    MediaKind,
    TimeRange,
)
from dance_journal.enums.coach import CoachOperation

__all__ = [
    # Journal enums
    "Mood",
    "Difficulty",
    "MediaKind",
    "TimeRange",
    # Coach enums
    "CoachOperation",
]
