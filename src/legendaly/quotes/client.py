"""OpenAI chat-completion client with bounded exponential-backoff retry."""

import asyncio
import json
import logging
import os
import time
from collections.abc import Awaitable, Callable
from typing import Any

from openai import AsyncOpenAI
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .errors import QuoteAuthError, wrap_error

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
MAX_TOKENS = 4000
TEMPERATURE = 0.8

Sleep = Callable[[float], Awaitable[Any]]


def create_client(api_key: str | None = None) -> AsyncOpenAI:
    """Create the OpenAI client used for quote generation.

    Args:
        api_key: OpenAI API key. If not provided, reads from the
                OPENAI_API_KEY environment variable.

    Returns:
        Configured AsyncOpenAI client

    Raises:
        QuoteAuthError: If no API key is available or the client rejects it
    """
    key = api_key or os.getenv("OPENAI_API_KEY")
    if not key:
        raise QuoteAuthError(
            "OpenAI API key not found. Set OPENAI_API_KEY environment "
            "variable or provide api_key parameter."
        )

    try:
        return AsyncOpenAI(api_key=key)
    except Exception as e:
        raise QuoteAuthError(f"Failed to initialize OpenAI client: {e}", e) from e


def _log_retry(retry_state: RetryCallState) -> None:
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.info(f"Retrying in {delay * 1000:.0f}ms")


async def call_with_retry(
    client: Any,
    model: str,
    messages: list[dict[str, str]],
    max_retries: int = 3,
    initial_delay: float = 0.5,
    debug: bool = False,
    sleep: Sleep = asyncio.sleep,
) -> str:
    """Request one chat completion, retrying transient failures.

    Authentication failures are raised on the first attempt. Every other
    failure is retried up to ``max_retries`` attempts in total, waiting
    ``initial_delay * 2 ** attempt`` seconds between attempts.

    Args:
        client: AsyncOpenAI-compatible client (``client.chat.completions.create``)
        model: Model identifier
        messages: Role-tagged chat messages
        max_retries: Total number of attempts
        initial_delay: Delay in seconds before the first retry
        debug: Log latency and token usage
        sleep: Awaitable sleep used between attempts

    Returns:
        Content of the first completion choice, stripped

    Raises:
        QuoteAuthError: If the API rejects the credentials
        QuoteAPIError: If every attempt fails
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    if debug:
        prompt_size = len(json.dumps(messages, ensure_ascii=False))
        logger.debug(
            f"Prompt size: {prompt_size} chars, ~{-(-prompt_size // 4)} tokens"
        )

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=initial_delay, exp_base=2),
        retry=retry_if_not_exception_type(QuoteAuthError),
        before_sleep=_log_retry,
        sleep=sleep,
        reraise=True,
    )

    async for attempt in retrying:
        with attempt:
            started = time.perf_counter()
            try:
                response = await client.chat.completions.create(
                    model=model,
                    messages=messages,
                    max_tokens=MAX_TOKENS,
                    temperature=TEMPERATURE,
                )
                content = response.choices[0].message.content or ""
            except Exception as e:
                error = wrap_error(e)
                logger.warning(
                    f"API call failed (attempt "
                    f"{attempt.retry_state.attempt_number}/{max_retries}): {error}"
                )
                raise error from e

    if debug:
        latency_ms = (time.perf_counter() - started) * 1000
        usage = getattr(response, "usage", None)
        tokens = getattr(usage, "total_tokens", None) or "N/A"
        logger.debug(f"API latency: {latency_ms:.0f}ms, tokens used: {tokens}")

    return content.strip()
