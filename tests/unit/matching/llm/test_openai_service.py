"""
Unit tests for the OpenAI-compatible LLM service.

Tests verify:
- Completions send the system and user messages
- Embeddings request the configured model and dimensions
- Transient errors are retried, others propagate immediately
"""
import httpx
import openai
import pytest
from unittest.mock import MagicMock

from matching.llm.openai_service import OpenAIService, _parse_reset_duration


def _completion(content):
    mock_message = MagicMock()
    mock_message.content = content
    mock_choice = MagicMock()
    mock_choice.message = mock_message
    mock_response = MagicMock()
    mock_response.choices = [mock_choice]
    return mock_response


@pytest.fixture
def service():
    """Create service with mocked client."""
    svc = OpenAIService(
        api_key="test",
        model_config={'model': 'test-model', 'embedding_model': 'test-embed', 'embedding_dimensions': 8},
        max_attempts=2
    )
    svc.client = MagicMock()
    svc.client.chat.completions.create.return_value = _completion("  0.75 \n")
    return svc


class TestGenerateText:

    def test_sends_system_and_user_messages(self, service):
        assert service.generate_text("rate this", system_prompt="be terse") == "0.75"

        call_kwargs = service.client.chat.completions.create.call_args[1]
        assert call_kwargs['model'] == 'test-model'
        assert call_kwargs['temperature'] == 0.0
        assert call_kwargs['messages'] == [
            {"role": "system", "content": "be terse"},
            {"role": "user", "content": "rate this"},
        ]

    def test_without_system_prompt(self, service):
        service.generate_text("rate this")
        messages = service.client.chat.completions.create.call_args[1]['messages']
        assert messages == [{"role": "user", "content": "rate this"}]

    def test_empty_content_raises(self, service):
        service.client.chat.completions.create.return_value = _completion(None)
        with pytest.raises(ValueError):
            service.generate_text("rate this")
        assert service.client.chat.completions.create.call_count == 1

    def test_transient_error_is_retried(self, service):
        error = openai.APIConnectionError(request=httpx.Request("POST", "http://llm.test/v1/chat/completions"))
        service.client.chat.completions.create.side_effect = [error, _completion("0.4")]

        assert service.generate_text("rate this") == "0.4"
        assert service.client.chat.completions.create.call_count == 2


class TestGenerateEmbedding:

    def test_requests_configured_model(self, service):
        mock_data = MagicMock()
        mock_data.embedding = [0.1] * 8
        service.client.embeddings.create.return_value = MagicMock(data=[mock_data])

        assert service.generate_embedding("hello") == [0.1] * 8

        call_kwargs = service.client.embeddings.create.call_args[1]
        assert call_kwargs['model'] == 'test-embed'
        assert call_kwargs['dimensions'] == 8
        assert call_kwargs['input'] == "hello"


class TestParseResetDuration:

    @pytest.mark.parametrize("value,expected", [
        ("1s", 1.0),
        ("500ms", 0.5),
        ("1m30s", 90.0),
        ("", 0.0),
    ])
    def test_durations(self, value, expected):
        assert _parse_reset_duration(value) == pytest.approx(expected)
