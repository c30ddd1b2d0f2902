"""
Shared Test Fixtures and Configuration

This module provides pytest fixtures used across the unit tests.
"""

import os
import random
from datetime import datetime, timedelta
from typing import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from dance_journal.config import known_instructors, known_studios, known_styles
from dance_journal.enums.journal import Difficulty, Mood
from dance_journal.models.journal import PracticeRecord
from dance_journal.services.llm.client import reset_llm_client


# ============================================================================
# Environment Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """
    Set up test environment variables before any tests run.

    Provider keys are cleared so no test can reach a real LLM provider.
    """
    original_env = os.environ.copy()

    for key in ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GEMINI_API_KEY"):
        os.environ.pop(key, None)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_llm_singleton() -> Generator[None, None, None]:
    """Drop the shared LLM client between tests."""
    reset_llm_client()
    yield
    reset_llm_client()


# ============================================================================
# Record Fixtures
# ============================================================================


@pytest.fixture
def make_record() -> Callable[..., PracticeRecord]:
    """
    Factory for practice records with sensible defaults.

    Usage:
        record = make_record(datetime(2024, 3, 4, 19), style="Jazz", duration_minutes=60)
    """
    counter = {"n": 0}

    def _make(occurred_at: datetime, **overrides) -> PracticeRecord:
        counter["n"] += 1
        fields = {
            "id": f"rec-{counter['n']}",
            "occurred_at": occurred_at,
            "style": "Hip Hop",
            "duration_minutes": 60,
            "studio": "Millennium",
            "instructor": "Alex",
        }
        fields.update(overrides)
        return PracticeRecord(**fields)

    return _make


@pytest.fixture
def mock_records() -> list[PracticeRecord]:
    """
    Deterministic sample journal covering the last ~60 days before 2024-03-15.

    Values are drawn from the suggestion catalogs with a fixed seed.
    """
    rng = random.Random(42)
    styles = known_styles()
    studios = known_studios()
    instructors = known_instructors()
    moods = list(Mood)
    difficulties = list(Difficulty)
    base = datetime(2024, 3, 15, 18, 0, 0)

    records = []
    for i in range(40):
        records.append(
            PracticeRecord(
                id=f"mock-{i}",
                occurred_at=base - timedelta(days=rng.randint(0, 60), hours=rng.randint(0, 8)),
                style=rng.choice(styles),
                duration_minutes=rng.choice([30, 45, 60, 90, 120]),
                studio=rng.choice(studios),
                instructor=rng.choice(instructors),
                difficulty=rng.choice(difficulties),
                mood=rng.choice(moods),
                notes="Felt good about the choreography today!" if rng.random() > 0.5 else "",
            )
        )
    return records


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_llm_client() -> MagicMock:
    """
    Create a mock LLMClient with credentials.

    ``complete`` returns ("Nice work!", usage) by default.
    """
    mock = MagicMock()
    mock.has_credentials = True
    mock.complete = AsyncMock(return_value=("Nice work!", MagicMock()))
    return mock
