"""
LLM Usage and Cost Tracking Types

Defines the LLMUsage dataclass and helper functions for extracting
cost/token information from LiteLLM responses.

Usage:
    from dance_journal.models.llm_usage import LLMUsage, extract_usage_from_response

    usage = extract_usage_from_response(
        response=litellm_response,
        model="gemini/gemini-2.5-flash",
        latency_ms=412,
        operation="session_feedback",
    )
"""

import logging
import uuid
from dataclasses import asdict, dataclass, field
from typing import Optional

import litellm

logger = logging.getLogger(__name__)


@dataclass
class LLMUsage:
    """
    Structured LLM usage data returned from completion calls.

    Attributes:
        request_id: Unique identifier for this request (auto-generated UUID)
        model: Full model identifier (e.g., "gemini/gemini-2.5-flash")
        provider: Extracted provider name (e.g., "gemini", "openai")
        prompt_tokens: Number of input tokens
        completion_tokens: Number of output tokens
        total_tokens: Total tokens used
        cost_usd: Total cost in USD
        operation: Coach operation name (e.g., "period_summary")
        latency_ms: Request latency in milliseconds
        success: Whether the request succeeded
        error_message: Error message if request failed
    """

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    model: str = ""
    provider: str = ""

    # Token usage
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    cost_usd: Optional[float] = None
    operation: Optional[str] = None

    # Performance
    latency_ms: Optional[int] = None
    success: bool = True
    error_message: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for logging or serialization."""
        return asdict(self)

    @property
    def total_cost(self) -> float:
        """Return total cost, defaulting to 0 if not available."""
        return self.cost_usd or 0.0

    def __str__(self) -> str:
        cost_str = f"${self.cost_usd:.4f}" if self.cost_usd else "N/A"
        tokens_str = str(self.total_tokens) if self.total_tokens else "N/A"
        return f"LLMUsage({self.model}, cost={cost_str}, tokens={tokens_str})"


def extract_provider(model: str) -> str:
    """
    Extract provider name from model identifier.

    Args:
        model: Full model identifier (e.g., "gemini/gemini-2.5-flash")

    Returns:
        Provider name (e.g., "gemini") or "unknown" if not parseable
    """
    if "/" in model:
        return model.split("/")[0]
    return "unknown"


def _operation_name(operation) -> Optional[str]:
    if operation is None:
        return None
    return getattr(operation, "value", str(operation))


def extract_usage_from_response(
    response,
    model: str,
    latency_ms: int,
    operation=None,
) -> LLMUsage:
    """
    Extract usage and cost information from a LiteLLM response.

    Args:
        response: LiteLLM response object
        model: Model identifier used for the request
        latency_ms: Measured latency in milliseconds
        operation: Optional operation for attribution

    Returns:
        LLMUsage dataclass populated with extracted information
    """
    usage = LLMUsage(
        model=model,
        provider=extract_provider(model),
        latency_ms=latency_ms,
        operation=_operation_name(operation),
    )

    if getattr(response, "usage", None):
        usage.prompt_tokens = getattr(response.usage, "prompt_tokens", None)
        usage.completion_tokens = getattr(response.usage, "completion_tokens", None)
        usage.total_tokens = getattr(response.usage, "total_tokens", None)

    hidden = getattr(response, "_hidden_params", None)
    if isinstance(hidden, dict):
        usage.cost_usd = hidden.get("response_cost")

    # Fallback: ask LiteLLM's price table
    if usage.cost_usd is None and usage.total_tokens:
        try:
            usage.cost_usd = litellm.completion_cost(completion_response=response)
        except Exception as e:
            logger.debug(f"Cost calculation unavailable for {model}: {e}")

    return usage


def create_error_usage(
    model: str,
    latency_ms: int,
    error_message: str,
    operation=None,
) -> LLMUsage:
    """
    Create an LLMUsage record for a failed request.

    Args:
        model: Model identifier
        latency_ms: Time spent before failure
        error_message: Error description
        operation: Optional operation

    Returns:
        LLMUsage with success=False and error details
    """
    return LLMUsage(
        model=model,
        provider=extract_provider(model),
        latency_ms=latency_ms,
        success=False,
        error_message=error_message,
        operation=_operation_name(operation),
    )
