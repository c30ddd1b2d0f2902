"""
Journal Record Service

Builds immutable practice records from logging-form input and indexes a
snapshot by record id.

Usage:
    from dance_journal.services.journal import index_by_id, new_record

    record = new_record(RecordCreate(style="Jazz", mood=Mood.HAPPY))
    snapshot = index_by_id([*existing, record])
"""

import logging
import uuid
from datetime import datetime
from typing import Iterable, Optional

from dance_journal.config.settings import settings
from dance_journal.enums.journal import Difficulty, Mood
from dance_journal.models.journal import PracticeRecord, RecordCreate

logger = logging.getLogger(__name__)


def new_record(request: RecordCreate, now: Optional[datetime] = None) -> PracticeRecord:
    """
    Create a practice record, filling in configured defaults.

    Missing or blank values fall back to settings: style DEFAULT_STYLE,
    studio DEFAULT_STUDIO, instructor DEFAULT_INSTRUCTOR, duration
    DEFAULT_DURATION_MINUTES. Mood defaults to happy, difficulty to
    intermediate, and the timestamp to ``now``.

    Args:
        request: Validated form input
        now: Creation instant (defaults to the current local time)

    Returns:
        PracticeRecord ready to be added to the snapshot
    """
    duration = request.duration_minutes
    if duration is None:
        duration = settings.DEFAULT_DURATION_MINUTES

    return PracticeRecord(
        id=request.id or str(uuid.uuid4()),
        occurred_at=request.occurred_at or now or datetime.now(),
        style=request.style or settings.DEFAULT_STYLE,
        duration_minutes=duration,
        studio=request.studio or settings.DEFAULT_STUDIO,
        instructor=request.instructor or settings.DEFAULT_INSTRUCTOR,
        difficulty=request.difficulty or Difficulty.INTERMEDIATE,
        mood=request.mood or Mood.HAPPY,
        notes=request.notes,
        music_title=request.music_title,
        media=request.media,
    )


def index_by_id(records: Iterable[PracticeRecord]) -> dict[str, PracticeRecord]:
    """
    Key a record collection by id.

    A later record with an id already seen replaces the earlier one (an
    edit). The position of the first occurrence is kept.

    Args:
        records: Records in collection order

    Returns:
        dict[str, PracticeRecord]: id -> latest record
    """
    indexed: dict[str, PracticeRecord] = {}
    for record in records:
        if record.id in indexed:
            logger.debug(f"Record {record.id} replaced by a later entry")
        indexed[record.id] = record
    return indexed
