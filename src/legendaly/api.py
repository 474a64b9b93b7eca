"""High-level API for legendaly library usage."""

from typing import Any

from .cache import QuoteCache
from .core import DisplayLines, generate_batch_quotes
from .locales import all_patterns, get_locale
from .paths import LogPaths, init_log_paths
from .quotes.client import DEFAULT_MODEL, create_client

MAX_BATCH_SIZE = 10


async def generate_quotes(
    tone: str = "epic",
    language: str = "ja",
    count: int = 5,
    model: str = DEFAULT_MODEL,
    category: str = "",
    custom_prompt: str = "",
    client: Any | None = None,
    cache: QuoteCache | None = None,
    log_paths: LogPaths | None = None,
    verbose: bool = False,
) -> list[DisplayLines]:
    """Generate a batch of fictional quotes.

    Args:
        tone: Tone label, "+"-joined for combined tones
        language: Language code; unsupported codes use the default locale
        count: Quotes requested (one call asks for at most 10)
        model: OpenAI model identifier
        category: Optional theme for the quotes
        custom_prompt: Optional extra instruction for the model
        client: AsyncOpenAI-compatible client (created from OPENAI_API_KEY if None)
        cache: Optional cache reused across calls
        log_paths: Log destinations (a new session under ~/.legendaly if None)
        verbose: Enable debug logging

    Returns:
        Display line pairs, one per quote

    Raises:
        QuoteAuthError: If no client is given and OPENAI_API_KEY is not set
        ValueError: If count is not positive
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    locale = get_locale(language)
    code = locale.code.value
    paths = log_paths or init_log_paths(tone, code)

    return await generate_batch_quotes(
        client or create_client(),
        model,
        locale.system,
        lambda n, cat: locale.create_batch_prompt(tone, n, cat),
        all_patterns(),
        code,
        tone,
        paths.log_path,
        paths.echoes_path,
        min(count, MAX_BATCH_SIZE),
        cache=cache,
        verbose=verbose,
        custom_prompt=custom_prompt,
        category=category,
    )
