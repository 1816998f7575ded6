"""
OpenAI Service - LLM implementation using an OpenAI-compatible API.

Provides text completion (used for semantic match ratings) and embedding
generation.
"""
from typing import Any, Dict, List, Optional
import logging
import re

import openai
from openai import OpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState
from matching.llm.interfaces import LLMProvider

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Retry helpers
# ---------------------------------------------------------------------------

TRANSIENT_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    if isinstance(exc, openai.RateLimitError):
        logger.warning(
            "Rate limit hit (attempt %s). Waiting %.1fs before retry. Details: %s",
            retry_state.attempt_number, wait, exc,
        )
    else:
        logger.warning(
            "Transient API error (attempt %s). Waiting %.1fs before retry. Details: %s",
            retry_state.attempt_number, wait, exc,
        )


def _parse_reset_duration(value: str) -> float:
    """Parse an OpenAI reset-timer header value like '1s', '500ms', '1m30s' into seconds."""
    total = 0.0
    for amount, unit in re.findall(r"([\d.]+)(ms|s|m|h)", value):
        a = float(amount)
        if unit == "ms":
            total += a / 1000
        elif unit == "s":
            total += a
        elif unit == "m":
            total += a * 60
        else:  # h
            total += a * 3600
    return total


def _wait_from_rate_limit_headers(exc: openai.RateLimitError) -> float:
    """Extract the longest declared wait from rate-limit response headers.

    Reads ``retry-after`` (plain seconds) and the OpenAI
    ``x-ratelimit-reset-requests`` / ``x-ratelimit-reset-tokens`` durations,
    taking the maximum. Returns 0.0 if no usable header is present.
    """
    try:
        headers = exc.response.headers
    except AttributeError:
        return 0.0

    candidates: List[float] = []

    retry_after = headers.get("retry-after", "")
    if retry_after:
        try:
            candidates.append(float(retry_after))
        except ValueError:
            logger.debug("Ignoring non-numeric retry-after header: %r", retry_after)

    for header in ("x-ratelimit-reset-requests", "x-ratelimit-reset-tokens"):
        parsed = _parse_reset_duration(headers.get(header, ""))
        if parsed > 0:
            candidates.append(parsed)

    return max(candidates) if candidates else 0.0


def _wait_respecting_retry_after(retry_state: RetryCallState) -> float:
    """Return how long tenacity should sleep before the next attempt.

    For ``RateLimitError``: honours server-declared timers via response headers.
    For all other retryable errors: falls back to capped exponential backoff.
    """
    exc = retry_state.outcome.exception()
    if isinstance(exc, openai.RateLimitError):
        wait = _wait_from_rate_limit_headers(exc)
        if wait > 0:
            wait = min(wait, 60)  # scoring calls should not stall a batch for long
            logger.info("Rate limit headers indicate %.1fs wait.", wait)
            return wait

    # Fallback: exponential backoff 1 -> 2 -> 4 ... capped at 20s
    exp = wait_exponential(multiplier=1, min=1, max=20)
    return exp(retry_state)


def _llm_retry(max_attempts: int):
    """Return a tenacity @retry decorator for LLM API calls."""
    return retry(
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        wait=_wait_respecting_retry_after,
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


class OpenAIService(LLMProvider):
    """
    OpenAI LLM Service.

    Provides chat completions for match ratings and embedding generation.
    Works with any OpenAI-compatible endpoint (Ollama, vLLM, Mistral's API).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_config: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
        max_attempts: int = 3
    ):
        client_kwargs: Dict[str, Any] = {}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url
        if timeout:
            client_kwargs['timeout'] = timeout

        self.client = OpenAI(**client_kwargs)

        self.model_config = model_config or {}
        self.model = self.model_config.get('model', 'gpt-4o-mini')
        self.embedding_model = self.model_config.get('embedding_model', 'text-embedding-3-small')
        self.embedding_dimensions = self.model_config.get('embedding_dimensions', 1024)
        self.temperature = self.model_config.get('temperature', 0.0)
        self._retry = _llm_retry(max_attempts)

    def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Generate a completion for prompt.

        Args:
            prompt: User message
            system_prompt: Optional system message

        Returns:
            The stripped message content of the first choice
        """
        return self._retry(self._complete)(prompt, system_prompt)

    def generate_embedding(self, text: str) -> List[float]:
        """Generate embedding vector for text."""
        return self._retry(self._embed)(text)

    def _complete(self, prompt: str, system_prompt: Optional[str]) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
        )

        try:
            content = response.choices[0].message.content
        except (IndexError, AttributeError) as e:
            logger.error(f"Failed to read completion response: {e}")
            raise

        if content is None:
            raise ValueError("Completion response has no content")

        logger.debug(f"Completion ({self.model}): {content[:200]!r}")
        return content.strip()

    def _embed(self, text: str) -> List[float]:
        response = self.client.embeddings.create(
            input=text,
            model=self.embedding_model,
            dimensions=self.embedding_dimensions
        )
        return response.data[0].embedding
