"""Core functionality for legendaly - orchestrates quote generation."""

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from .cache import QuoteCache, make_fingerprint
from .echoes import write_echo
from .locales import PatternSet, get_locale
from .quotes.client import Sleep, call_with_retry
from .quotes.errors import QuoteError
from .quotes.models import QuoteRecord
from .quotes.parser import parse_batch

logger = logging.getLogger(__name__)

PLACEHOLDER_SPEAKER = "System"
PLACEHOLDER_SOURCE = "Legendaly"

DisplayLines = tuple[str, str]


def build_messages(
    role: str, batch_prompt: str, custom_prompt: str = ""
) -> list[dict[str, str]]:
    """Build the chat messages for one batch request."""
    messages = [
        {"role": "system", "content": role},
        {"role": "user", "content": batch_prompt},
    ]
    if custom_prompt:
        messages.append({"role": "user", "content": custom_prompt})
    return messages


def placeholder_record(error: QuoteError, language: str) -> QuoteRecord:
    """Build the record shown in place of quotes when generation fails.

    Args:
        error: Failure raised by the model client
        language: Requested language code, selects the message language

    Returns:
        QuoteRecord whose text describes the failure category
    """
    message = get_locale(language).placeholder(error.kind.value)
    return QuoteRecord(
        text=message, speaker=PLACEHOLDER_SPEAKER, source=PLACEHOLDER_SOURCE
    )


async def generate_batch_quotes(
    client: Any,
    model: str,
    role: str,
    create_batch_prompt: Callable[[int, str], str],
    patterns: Mapping[str, PatternSet],
    language: str,
    tone: str,
    log_path: str | Path,
    echoes_path: str | Path,
    count: int,
    *,
    cache: QuoteCache | None = None,
    verbose: bool = False,
    custom_prompt: str = "",
    category: str = "",
    max_retries: int = 3,
    initial_delay: float = 0.5,
    sleep: Sleep = asyncio.sleep,
) -> list[DisplayLines]:
    """Generate a batch of quotes with one model call.

    Serves a fresh cached batch when available; otherwise requests the
    batch, parses it, logs every quote to both log files and caches the
    result. API failures never propagate: they are turned into a single
    placeholder quote describing the problem.

    Args:
        client: AsyncOpenAI-compatible client
        model: Model identifier
        role: System-role prompt
        create_batch_prompt: Builds the user prompt from (count, category)
        patterns: Pattern table in fallback order
        language: Requested language code
        tone: Tone label
        log_path: Rolling log file
        echoes_path: Session echoes file
        count: Number of quotes requested
        cache: Optional cache shared across calls
        verbose: Enable debug logging of timings and sizes
        custom_prompt: Optional extra user message
        category: Optional category passed to the prompt builder
        max_retries: Total model call attempts
        initial_delay: Seconds before the first retry
        sleep: Awaitable sleep used between retries

    Returns:
        Display line pairs, one per parsed quote, in response order
    """
    started = time.perf_counter()
    fingerprint = make_fingerprint(language, tone, count, custom_prompt, category)

    if cache is not None:
        cached = cache.get(fingerprint)
        if cached is not None:
            logger.info("Serving quotes from cache")
            return [record.display_lines() for record in cached.records]

    if verbose:
        logger.debug(
            f"Generating {count} quotes (model: {model}, tone: {tone}, lang: {language})"
        )

    messages = build_messages(role, create_batch_prompt(count, category), custom_prompt)

    try:
        output = await call_with_retry(
            client,
            model,
            messages,
            max_retries=max_retries,
            initial_delay=initial_delay,
            debug=verbose,
            sleep=sleep,
        )
    except QuoteError as e:
        logger.error(f"Quote generation failed: {e}")
        return [placeholder_record(e, language).display_lines()]

    if verbose:
        logger.debug(f"Received response ({len(output)} chars)")

    result = parse_batch(output, language, patterns)
    if result.dropped:
        logger.info(f"Dropped {result.dropped} unparseable blocks")

    for record in result.records:
        write_echo(record, tone, language, log_path, echoes_path)

    if cache is not None:
        cache.put(fingerprint, result.records)

    if verbose:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"Parsed {len(result.records)} quotes in {elapsed_ms:.0f}ms")

    return [record.display_lines() for record in result.records]
