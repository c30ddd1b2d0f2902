"""
Unified LLM Client supporting multiple providers via LiteLLM.

LiteLLM provides a unified interface to 100+ LLM providers using
the format "provider/model-name". Key features:
- Operation-based model selection via CoachOperation enum
- Built-in cost tracking via LLMUsage
- Automatic retries with exponential backoff
- Native async support

See: https://docs.litellm.ai/

Usage:
    from dance_journal.enums import CoachOperation
    from dance_journal.services.llm import get_llm_client

    client = get_llm_client()

    # Async completion with usage tracking
    response, usage = await client.complete(
        operation=CoachOperation.SESSION_FEEDBACK,
        messages=[{"role": "user", "content": "Give me a tip..."}],
    )
    print(f"Cost: ${usage.cost_usd:.4f}")
"""

import logging
import os
import time
from typing import Optional, Union

import litellm
from litellm import acompletion
from tenacity import retry, stop_after_attempt, wait_exponential

from dance_journal.config.settings import settings
from dance_journal.enums.coach import CoachOperation
from dance_journal.models.llm_usage import (
    LLMUsage,
    create_error_usage,
    extract_usage_from_response,
)

logger = logging.getLogger(__name__)

# Configure LiteLLM
litellm.drop_params = True  # Drop unsupported params instead of erroring
if settings.DEBUG:
    os.environ["LITELLM_LOG"] = "DEBUG"

# Provider name -> API key name (environment variable and settings field)
PROVIDER_KEYS = {
    "OpenAI": "OPENAI_API_KEY",
    "Anthropic": "ANTHROPIC_API_KEY",
    "Google/Gemini": "GEMINI_API_KEY",
}


def build_messages(
    prompt: str,
    system_prompt: Optional[str] = None,
) -> list[dict[str, str]]:
    """
    Build messages list from prompt and optional system prompt.

    Args:
        prompt: User prompt text
        system_prompt: Optional system prompt

    Returns:
        List of message dicts for LLM API
    """
    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})
    return messages


def configured_providers() -> list[str]:
    """Providers with an API key set in the environment or settings."""
    return [
        provider
        for provider, key in PROVIDER_KEYS.items()
        if os.getenv(key) or getattr(settings, key, "")
    ]


class LLMClient:
    """
    LLM client with operation-based model selection and usage tracking.

    Attributes:
        MODELS: Operation -> model mapping from settings
    """

    # Operations not explicitly mapped use the default TEXT_MODEL
    MODELS = {
        CoachOperation.PERIOD_SUMMARY: settings.SUMMARY_MODEL,
    }

    def __init__(self):
        """Initialize the LLM client and detect configured providers."""
        self.providers = configured_providers()

        if not self.providers:
            logger.warning(
                "No LLM API keys configured. Set at least one of: "
                + ", ".join(PROVIDER_KEYS.values())
            )
        else:
            logger.info(f"LLM client initialized with providers: {self.providers}")

    @property
    def has_credentials(self) -> bool:
        """Whether any provider API key is configured."""
        return bool(self.providers)

    def get_model_for_operation(self, operation: Union[CoachOperation, str]) -> str:
        """
        Get the configured model for a specific operation.

        Args:
            operation: CoachOperation enum value

        Returns:
            Model identifier in LiteLLM format (provider/model-name)
        """
        if isinstance(operation, str) and not isinstance(operation, CoachOperation):
            try:
                operation = CoachOperation(operation)
            except ValueError:
                logger.warning(
                    f"Unknown operation type: {operation}, using default model"
                )
                return settings.TEXT_MODEL
        return self.MODELS.get(operation, settings.TEXT_MODEL)

    def _request_kwargs(
        self,
        model: str,
        messages: list[dict],
        temperature: float,
        max_tokens: int,
    ) -> dict:
        return {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "timeout": settings.COACH_TIMEOUT_SECONDS,
        }

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=30),
        reraise=True,
    )
    async def complete(
        self,
        operation: Union[CoachOperation, str],
        messages: list[dict],
        temperature: float = 0.7,
        max_tokens: int = 256,
        model: Optional[str] = None,
    ) -> tuple[str, LLMUsage]:
        """
        Generate a completion using the appropriate model for the operation.

        Args:
            operation: CoachOperation used for model selection and attribution
            messages: Chat messages in OpenAI format
                [{"role": "user", "content": "..."}, ...]
            temperature: Sampling temperature
            max_tokens: Maximum tokens in response
            model: Optional model override (bypasses operation-based selection)

        Returns:
            Tuple of (response_text, LLMUsage)

        Raises:
            Exception: If completion fails after retries
        """
        model = model or self.get_model_for_operation(operation)
        start_time = time.perf_counter()

        try:
            response = await acompletion(
                **self._request_kwargs(model, messages, temperature, max_tokens)
            )
        except Exception as e:
            latency_ms = int((time.perf_counter() - start_time) * 1000)
            usage = create_error_usage(
                model=model,
                latency_ms=latency_ms,
                error_message=str(e),
                operation=operation,
            )
            logger.error(
                f"LLM completion failed after {usage.latency_ms}ms: {e} "
                f"(model={usage.model}, operation={usage.operation})"
            )
            raise

        latency_ms = int((time.perf_counter() - start_time) * 1000)
        usage = extract_usage_from_response(
            response=response,
            model=model,
            latency_ms=latency_ms,
            operation=operation,
        )

        if usage.cost_usd:
            logger.debug(
                f"LLM completion [{model}] - Cost: ${usage.cost_usd:.4f}, "
                f"Tokens: {usage.total_tokens}, Latency: {latency_ms}ms"
            )

        return response.choices[0].message.content or "", usage


# Singleton instance
_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """
    Get or create singleton LLM client.

    Returns:
        Shared LLMClient instance
    """
    global _client
    if _client is None:
        _client = LLMClient()
    return _client


def reset_llm_client():
    """Reset the singleton client (useful for testing)."""
    global _client
    _client = None
