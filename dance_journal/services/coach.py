"""
Dance Coach Service

Short natural-language feedback from a text-generation model:
- Tip/encouragement for a single session
- Progress summary for a reporting window

The coach never raises. Without credentials it returns an advisory
string; on any provider failure it logs the error and returns a fixed
fallback, so callers can always display the result.

Usage:
    coach = DanceCoachService()
    tip = await coach.get_session_feedback(record)
    summary = await coach.get_period_summary(report.filtered, period_label_for(report.window))
"""

import logging
from typing import Iterable, Optional

from dance_journal.config.settings import settings
from dance_journal.enums.coach import CoachOperation
from dance_journal.enums.journal import TimeRange
from dance_journal.models.journal import PracticeRecord, ReportingWindow
from dance_journal.services.llm.client import LLMClient, build_messages, get_llm_client

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

MISSING_KEY_SESSION_MESSAGE = (
    "API key is missing. Please configure an LLM API key to enable the dance coach."
)
MISSING_KEY_SUMMARY_MESSAGE = "API key is missing."

SESSION_FALLBACK_MESSAGE = "Could not connect to the digital dance coach right now."
SUMMARY_FALLBACK_MESSAGE = "Analysis unavailable."

SESSION_EMPTY_MESSAGE = "Keep dancing! You're doing great."
SUMMARY_EMPTY_MESSAGE = "Great job keeping up with your practice!"

SESSION_PROMPT = """You are an encouraging and insightful dance coach.
Analyze this practice session:
Style: {style}
Duration: {duration} minutes
Difficulty: {difficulty}
Mood: {mood}
Notes: "{notes}"

Give a short, friendly, 2-sentence tip or encouragement based on the mood and notes."""

SUMMARY_PROMPT = """You are a dance analyst.
Here is a summary of the user's dance sessions for {period}:
{sessions}

Provide a brief 3-sentence summary of their progress and consistency. \
Identify any trends in style or mood."""

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def period_label_for(window: ReportingWindow) -> str:
    """
    Human-readable name of a reporting window for prompts.

    Returns:
        str: e.g. "the week of March 4, 2024", "December 2023", "2024"
    """
    start = window.start
    if window.time_range == TimeRange.WEEK:
        return f"the week of {MONTH_NAMES[start.month - 1]} {start.day}, {start.year}"
    if window.time_range == TimeRange.YEAR:
        return str(start.year)
    return f"{MONTH_NAMES[start.month - 1]} {start.year}"


def format_session_lines(records: Iterable[PracticeRecord]) -> str:
    """One "- {style} ({minutes}m): {mood}" line per session."""
    return "\n".join(
        f"- {record.style} ({record.duration_minutes}m): {record.mood.label}"
        for record in records
    )


# =============================================================================
# Service Implementation
# =============================================================================


class DanceCoachService:
    """
    Text-generation coach for practice sessions.

    Attributes:
        llm: LLM client used for completions (lazily created singleton
            when not injected).
    """

    def __init__(self, llm_client: Optional[LLMClient] = None) -> None:
        """
        Initialize the coach.

        Args:
            llm_client: Optional LLM client; defaults to the shared client.
        """
        self._llm = llm_client

    @property
    def llm(self) -> LLMClient:
        if self._llm is None:
            self._llm = get_llm_client()
        return self._llm

    async def get_session_feedback(self, record: PracticeRecord) -> str:
        """
        Get a short tip for one session.

        Args:
            record: Session to comment on

        Returns:
            Coach text, or a fixed message when the coach is unavailable
        """
        prompt = SESSION_PROMPT.format(
            style=record.style,
            duration=record.duration_minutes,
            difficulty=record.difficulty.value,
            mood=record.mood.label,
            notes=record.notes,
        )
        return await self._generate(
            CoachOperation.SESSION_FEEDBACK,
            prompt,
            missing_key=MISSING_KEY_SESSION_MESSAGE,
            fallback=SESSION_FALLBACK_MESSAGE,
            empty=SESSION_EMPTY_MESSAGE,
        )

    async def get_period_summary(
        self,
        records: Iterable[PracticeRecord],
        period: str,
    ) -> str:
        """
        Get a progress summary for a set of sessions.

        Args:
            records: Sessions in the period (typically report.filtered)
            period: Period name used in the prompt (see period_label_for)

        Returns:
            Coach text, or a fixed message when the coach is unavailable
        """
        prompt = SUMMARY_PROMPT.format(
            period=period,
            sessions=format_session_lines(records),
        )
        return await self._generate(
            CoachOperation.PERIOD_SUMMARY,
            prompt,
            missing_key=MISSING_KEY_SUMMARY_MESSAGE,
            fallback=SUMMARY_FALLBACK_MESSAGE,
            empty=SUMMARY_EMPTY_MESSAGE,
        )

    async def _generate(
        self,
        operation: CoachOperation,
        prompt: str,
        missing_key: str,
        fallback: str,
        empty: str,
    ) -> str:
        if not self.llm.has_credentials:
            logger.warning(f"Coach {operation.value} skipped: no LLM API key configured")
            return missing_key

        try:
            text, usage = await self.llm.complete(
                operation=operation,
                messages=build_messages(prompt),
                temperature=settings.COACH_TEMPERATURE,
                max_tokens=settings.COACH_MAX_TOKENS,
            )
        except Exception as e:
            logger.error(f"Coach {operation.value} failed: {e}")
            return fallback

        logger.debug(f"Coach {operation.value} completed: {usage}")
        return text.strip() if text and text.strip() else empty
