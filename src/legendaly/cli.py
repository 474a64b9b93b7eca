"""Typer CLI definition for legendaly."""

import asyncio
import logging
from typing import Any

import typer
from dotenv import load_dotenv

from .api import generate_quotes
from .cache import QuoteCache
from .config import (
    MAX_QUOTE_COUNT,
    VALID_MODELS,
    DisplayConfig,
    QuotesConfig,
    load_config,
    validate_choice,
    validate_int,
    validate_positive_float,
    validate_tone,
)
from .core import DisplayLines
from .echoes import clean_old_logs, load_history, rotate_log_if_needed
from .locales import SUPPORTED_LANGUAGES
from .paths import LogPaths, get_echoes_dir, init_log_paths
from .quotes.client import Sleep, create_client
from .quotes.errors import QuoteAuthError

app = typer.Typer(help="Generate fictional quotes with AI and display them in a loop")

logger = logging.getLogger(__name__)


def format_quote(lines: DisplayLines) -> str:
    """Join a quote's display lines into one printable block."""
    return "\n".join(lines) + "\n"


def resolve_settings(
    config: QuotesConfig,
    tone: str | None = None,
    language: str | None = None,
    model: str | None = None,
    count: int | None = None,
    category: str | None = None,
    prompt: str | None = None,
) -> QuotesConfig:
    """Apply CLI flags over the loaded quote settings.

    Flags are validated like config values: an invalid flag warns and keeps
    the configured value.
    """
    return QuotesConfig(
        tone=config.tone if tone is None else validate_tone(tone, config.tone),
        language=(
            config.language
            if language is None
            else validate_choice(
                "language", language.lower(), SUPPORTED_LANGUAGES, config.language
            )
        ),
        model=(
            config.model
            if model is None
            else validate_choice("model", model, VALID_MODELS, config.model)
        ),
        count=(
            config.count
            if count is None
            else validate_int("count", count, config.count, 1, MAX_QUOTE_COUNT)
        ),
        category=config.category if category is None else category,
        user_prompt=config.user_prompt if prompt is None else prompt,
    )


async def run_loop(
    client: Any,
    settings: QuotesConfig,
    display: DisplayConfig,
    log_paths: LogPaths,
    cache: QuoteCache,
    once: bool = False,
    verbose: bool = False,
    sleep: Sleep = asyncio.sleep,
) -> int:
    """Fetch batches and print their quotes until interrupted.

    Each round fetches one batch (served from the cache while it is fresh)
    and shows every quote for display_time seconds, then waits
    fetch_interval seconds before the next quote.

    Args:
        client: AsyncOpenAI-compatible client
        settings: Resolved quote settings
        display: Display timings
        log_paths: Log destinations for this session
        cache: Cache shared by every round
        once: Stop after printing the first batch
        verbose: Enable debug logging
        sleep: Awaitable sleep used between quotes

    Returns:
        Number of quotes printed
    """
    shown = 0
    while True:
        quotes = await generate_quotes(
            tone=settings.tone,
            language=settings.language,
            count=settings.count,
            model=settings.model,
            category=settings.category,
            custom_prompt=settings.user_prompt,
            client=client,
            cache=cache,
            log_paths=log_paths,
            verbose=verbose,
        )

        if once:
            for lines in quotes:
                typer.echo(format_quote(lines))
            return shown + len(quotes)

        if not quotes:
            logger.warning("No quotes parsed from response, retrying")
            await sleep(display.fetch_interval)
            continue

        for lines in quotes:
            typer.echo(format_quote(lines))
            shown += 1
            await sleep(display.display_time)
            await sleep(display.fetch_interval)


def show_history(limit: int) -> int:
    """Print the most recently logged quotes.

    Returns:
        Number of quotes printed
    """
    records = load_history(get_echoes_dir(), limit=limit)
    if not records:
        typer.echo("No quote history yet")
        return 0
    for record in records:
        typer.echo(format_quote(record.display_lines()))
    return len(records)


@app.command()
def main(
    tone: str | None = typer.Option(
        None, "-t", "--tone", help="Quote tone, '+'-joined to combine"
    ),
    language: str | None = typer.Option(
        None, "-l", "--language", help="Language code: ja, en, zh, ko, fr, es, de"
    ),
    model: str | None = typer.Option(None, "-m", "--model", help="OpenAI model"),
    count: int | None = typer.Option(
        None, "-c", "--count", help="Quotes requested per round"
    ),
    category: str | None = typer.Option(
        None, "--category", help="Theme for the generated quotes"
    ),
    prompt: str | None = typer.Option(
        None, "-p", "--prompt", help="Extra instruction sent with every request"
    ),
    interval: float | None = typer.Option(
        None, "-i", "--interval", help="Seconds between quotes"
    ),
    once: bool = typer.Option(False, "--once", help="Print one batch and exit"),
    history: int | None = typer.Option(
        None, "--history", help="Print the last N logged quotes and exit"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show timings, prompt sizes and token usage"
    ),
) -> None:
    """Generate fictional quotes with AI and display them in a loop."""
    load_dotenv()
    config = load_config()
    verbose = verbose or config.log.verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if history is not None:
        if history < 1:
            typer.echo("Error: --history must be at least 1", err=True)
            raise typer.Exit(1)
        show_history(history)
        raise typer.Exit(0)

    settings = resolve_settings(
        config.quotes, tone, language, model, count, category, prompt
    )
    display = config.display
    if interval is not None:
        display = DisplayConfig(
            fetch_interval=validate_positive_float(
                "interval", interval, display.fetch_interval
            ),
            display_time=display.display_time,
        )

    try:
        log_paths = init_log_paths(settings.tone, settings.language)
        rotate_log_if_needed(log_paths.log_path, config.log.max_log_bytes)
        clean_old_logs(log_paths.log_path.parent, config.log.keep_days)
        clean_old_logs(log_paths.echoes_path.parent, config.log.keep_days)
    except OSError as e:
        if verbose:
            typer.echo(f"Debug - Log directory error: {e!r}", err=True)
        else:
            typer.echo(f"Error: Failed to prepare log directory: {e}", err=True)
        raise typer.Exit(1) from None

    try:
        client = create_client()
    except QuoteAuthError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    cache = QuoteCache()
    try:
        asyncio.run(
            run_loop(
                client,
                settings,
                display,
                log_paths,
                cache,
                once=once,
                verbose=verbose,
            )
        )
    except KeyboardInterrupt:
        typer.echo("")
        raise typer.Exit(130) from None
