"""
Coach Enums

Operations performed against the text-generation service. Used for
model selection and cost attribution in the LLM client.
"""

from enum import Enum


class CoachOperation(str, Enum):
    """Text-generation operations requested by the dance coach."""

    SESSION_FEEDBACK = "session_feedback"  # Tip for a single session
    PERIOD_SUMMARY = "period_summary"  # Progress summary for a reporting window
