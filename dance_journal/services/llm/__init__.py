"""
LLM Service Module

Provides a unified interface to multiple LLM providers via LiteLLM.
Supports operation-based model selection and cost tracking.

All completion methods return (response, LLMUsage) tuples.

Usage:
    from dance_journal.enums import CoachOperation
    from dance_journal.services.llm import get_llm_client

    client = get_llm_client()
    response, usage = await client.complete(
        operation=CoachOperation.SESSION_FEEDBACK,
        messages=[{"role": "user", "content": "..."}],
    )
"""

from dance_journal.models.llm_usage import LLMUsage
from dance_journal.services.llm.client import (
    LLMClient,
    build_messages,
    configured_providers,
    get_llm_client,
    reset_llm_client,
)

__all__ = [
    "LLMClient",
    "LLMUsage",
    "build_messages",
    "configured_providers",
    "get_llm_client",
    "reset_llm_client",
]
