"""
Unit tests for the LLM client and usage tracking.

LiteLLM calls are patched; no request leaves the process.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from tenacity import stop_after_attempt, wait_none

from dance_journal.enums.coach import CoachOperation
from dance_journal.models.llm_usage import (
    LLMUsage,
    create_error_usage,
    extract_provider,
    extract_usage_from_response,
)
from dance_journal.services.llm.client import (
    LLMClient,
    build_messages,
    get_llm_client,
    reset_llm_client,
)


def _response(content: str = "Point your toes.", cost: float = 0.0002) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    response.usage = MagicMock(prompt_tokens=40, completion_tokens=10, total_tokens=50)
    response._hidden_params = {"response_cost": cost}
    return response


@pytest.fixture
def client() -> LLMClient:
    with patch(
        "dance_journal.services.llm.client.configured_providers",
        return_value=["Google/Gemini"],
    ):
        return LLMClient()


class TestModelSelection:
    """Tests for operation-based model selection."""

    def test_summary_uses_summary_model(self, client):
        with patch.dict(LLMClient.MODELS, {CoachOperation.PERIOD_SUMMARY: "openai/gpt-4o-mini"}):
            assert client.get_model_for_operation(CoachOperation.PERIOD_SUMMARY) == "openai/gpt-4o-mini"

    @patch("dance_journal.services.llm.client.settings")
    def test_unmapped_operation_uses_text_model(self, mock_settings, client):
        mock_settings.TEXT_MODEL = "anthropic/claude-3-haiku"

        assert client.get_model_for_operation(CoachOperation.SESSION_FEEDBACK) == "anthropic/claude-3-haiku"

    @patch("dance_journal.services.llm.client.settings")
    def test_unknown_string_operation_uses_text_model(self, mock_settings, client):
        mock_settings.TEXT_MODEL = "gemini/gemini-2.5-flash"

        assert client.get_model_for_operation("choreograph") == "gemini/gemini-2.5-flash"

    def test_string_operation_value(self, client):
        assert client.get_model_for_operation("period_summary") == client.MODELS[
            CoachOperation.PERIOD_SUMMARY
        ]


class TestCredentials:
    def test_has_credentials(self, client):
        assert client.has_credentials is True

    def test_no_credentials(self):
        with patch("dance_journal.services.llm.client.configured_providers", return_value=[]):
            assert LLMClient().has_credentials is False

    def test_singleton(self):
        first = get_llm_client()
        assert get_llm_client() is first
        reset_llm_client()
        assert get_llm_client() is not first


class TestComplete:
    """Tests for async completions."""

    @pytest.mark.asyncio
    async def test_complete_returns_text_and_usage(self, client):
        with patch(
            "dance_journal.services.llm.client.acompletion",
            new=AsyncMock(return_value=_response()),
        ) as mock_acompletion:
            text, usage = await client.complete(
                operation=CoachOperation.SESSION_FEEDBACK,
                messages=build_messages("Tip please"),
                model="gemini/gemini-2.5-flash",
            )

        assert text == "Point your toes."
        assert usage.total_tokens == 50
        assert usage.cost_usd == 0.0002
        assert usage.operation == "session_feedback"
        assert usage.provider == "gemini"
        kwargs = mock_acompletion.call_args.kwargs
        assert kwargs["model"] == "gemini/gemini-2.5-flash"
        assert kwargs["messages"] == [{"role": "user", "content": "Tip please"}]
        assert "timeout" in kwargs

    @pytest.mark.asyncio
    async def test_complete_reraises_after_retries(self, client):
        failing = AsyncMock(side_effect=RuntimeError("rate limited"))
        fast_complete = LLMClient.complete.retry_with(wait=wait_none(), stop=stop_after_attempt(3))

        with patch("dance_journal.services.llm.client.acompletion", new=failing):
            with pytest.raises(RuntimeError, match="rate limited"):
                await fast_complete(
                    client,
                    operation=CoachOperation.PERIOD_SUMMARY,
                    messages=build_messages("Summarize"),
                )

        assert failing.call_count == 3

    @pytest.mark.asyncio
    async def test_failure_logs_error_usage(self, client, caplog):
        """Test that a failed attempt logs latency, model and operation."""
        failing = AsyncMock(side_effect=RuntimeError("rate limited"))
        single_attempt = LLMClient.complete.retry_with(stop=stop_after_attempt(1))

        with patch("dance_journal.services.llm.client.acompletion", new=failing):
            with pytest.raises(RuntimeError):
                await single_attempt(
                    client,
                    operation=CoachOperation.PERIOD_SUMMARY,
                    messages=build_messages("Summarize"),
                    model="openai/gpt-4o-mini",
                )

        assert "LLM completion failed after" in caplog.text
        assert "model=openai/gpt-4o-mini" in caplog.text
        assert "operation=period_summary" in caplog.text

    @pytest.mark.asyncio
    async def test_complete_handles_null_content(self, client):
        with patch(
            "dance_journal.services.llm.client.acompletion",
            new=AsyncMock(return_value=_response(content=None)),
        ):
            text, usage = await client.complete(
                operation=CoachOperation.PERIOD_SUMMARY,
                messages=build_messages("Summarize"),
            )

        assert text == ""
        assert usage.success is True


class TestBuildMessages:
    def test_with_system_prompt(self):
        messages = build_messages("Hi", system_prompt="You are a coach.")

        assert messages == [
            {"role": "system", "content": "You are a coach."},
            {"role": "user", "content": "Hi"},
        ]


class TestUsage:
    """Tests for LLMUsage helpers."""

    @pytest.mark.parametrize(
        "model,expected",
        [("gemini/gemini-2.5-flash", "gemini"), ("openai/gpt-4o", "openai"), ("gpt-4o", "unknown")],
        ids=["gemini", "openai", "no_prefix"],
    )
    def test_extract_provider(self, model, expected):
        assert extract_provider(model) == expected

    def test_error_usage(self):
        usage = create_error_usage(
            model="openai/gpt-4o",
            latency_ms=120,
            error_message="boom",
            operation=CoachOperation.SESSION_FEEDBACK,
        )

        assert usage.success is False
        assert usage.error_message == "boom"
        assert usage.total_cost == 0.0
        assert usage.to_dict()["operation"] == "session_feedback"

    def test_cost_fallback_to_price_table(self):
        response = _response()
        response._hidden_params = {}

        with patch(
            "dance_journal.models.llm_usage.litellm.completion_cost", return_value=0.01
        ) as mock_cost:
            usage = extract_usage_from_response(response, "openai/gpt-4o", 300)

        assert usage.cost_usd == 0.01
        mock_cost.assert_called_once_with(completion_response=response)

    def test_str(self):
        usage = LLMUsage(model="openai/gpt-4o", cost_usd=0.0123, total_tokens=99)
        assert str(usage) == "LLMUsage(openai/gpt-4o, cost=$0.0123, tokens=99)"
