"""Configuration management for legendaly.

Loads configuration from ~/.config/legendaly/config.toml.
Priority chain: CLI flags > env vars > config file > defaults.

Invalid values never abort a run: each one prints a warning and falls back
to its default.
"""

import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .locales import SUPPORTED_LANGUAGES

CONFIG_DIR = Path.home() / ".config" / "legendaly"
CONFIG_PATH = CONFIG_DIR / "config.toml"

VALID_TONES = ("cyberpunk", "mellow", "retro", "neon", "epic", "zen")
VALID_MODELS = (
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4-turbo",
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
    "gpt-3.5-turbo",
)
MAX_QUOTE_COUNT = 100

DEFAULT_CONFIG = """\
# legendaly configuration

[quotes]
# Tone of the generated quotes: cyberpunk, mellow, retro, neon, epic, zen
# Combine tones with "+", e.g. "epic+zen"
tone = "epic"

# Output language: ja, en, zh, ko, fr, es, de
language = "ja"

# OpenAI chat model
model = "gpt-4o-mini"

# Quotes requested per round (one API call asks for at most 10)
count = 25

# Optional theme for the quotes, e.g. "space travel"
category = ""

# Optional extra instruction sent with every request
user_prompt = ""

[display]
# Seconds to wait between rounds
fetch_interval = 3.0

# Seconds each quote stays on screen
display_time = 4.0

[logging]
# Show timings, prompt sizes and token usage
verbose = false

# Rotate ~/.legendaly/logs/legendaly.log past this size
max_log_bytes = 10485760

# Delete session echoes older than this many days
keep_days = 30

# The API key is read from the environment, not this file:
#   OPENAI_API_KEY
"""


@dataclass(frozen=True)
class QuotesConfig:
    """Quote generation configuration."""

    tone: str = "epic"
    language: str = "ja"
    model: str = "gpt-4o-mini"
    count: int = 25
    category: str = ""
    user_prompt: str = ""


@dataclass(frozen=True)
class DisplayConfig:
    """Display loop timing."""

    fetch_interval: float = 3.0
    display_time: float = 4.0


@dataclass(frozen=True)
class LogConfig:
    """Logging and echo log maintenance."""

    verbose: bool = False
    max_log_bytes: int = 10 * 1024 * 1024
    keep_days: int = 30


@dataclass(frozen=True)
class LegendalyConfig:
    """Top-level legendaly configuration."""

    quotes: QuotesConfig
    display: DisplayConfig
    log: LogConfig


_cached_config: LegendalyConfig | None = None


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def generate_config() -> Path:
    """Generate default config file at ~/.config/legendaly/config.toml."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(DEFAULT_CONFIG, encoding="utf-8")
    return CONFIG_PATH


def split_tones(tone: str) -> list[str]:
    """Split a combined tone such as "epic+zen" into its parts."""
    return [part.strip() for part in tone.split("+") if part.strip()]


def validate_tone(value: Any, default: str = QuotesConfig.tone) -> str:
    """Return value if every "+"-joined tone is known, else the default."""
    tones = split_tones(str(value))
    if tones and all(tone in VALID_TONES for tone in tones):
        return "+".join(tones)
    _warn(f"Unknown tone '{value}', using '{default}'")
    return default


def validate_choice(name: str, value: Any, choices: tuple[str, ...], default: str) -> str:
    """Return value if it is one of choices, else warn and return the default."""
    if value in choices:
        return value
    _warn(f"Invalid {name} '{value}', using '{default}'")
    return default


def validate_int(name: str, value: Any, default: int, minimum: int, maximum: int) -> int:
    """Parse an integer within [minimum, maximum], else warn and use the default."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        _warn(f"{name} must be an integer, got '{value}', using {default}")
        return default
    if not minimum <= number <= maximum:
        _warn(
            f"{name} must be between {minimum} and {maximum}, "
            f"got {number}, using {default}"
        )
        return default
    return number


def validate_positive_float(name: str, value: Any, default: float) -> float:
    """Parse a positive number, else warn and use the default."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        _warn(f"{name} must be a number, got '{value}', using {default}")
        return default
    if number <= 0:
        _warn(f"{name} must be positive, got {number}, using {default}")
        return default
    return number


def parse_bool(value: Any) -> bool:
    """Interpret booleans from TOML values or environment strings."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def build_config(
    data: dict[str, Any], env: dict[str, str] | None = None
) -> LegendalyConfig:
    """Build a validated configuration from parsed TOML data and env vars.

    Args:
        data: Parsed config file contents
        env: Environment mapping (defaults to os.environ)

    Returns:
        Validated LegendalyConfig
    """
    env = dict(os.environ) if env is None else env
    quotes = data.get("quotes", {})
    display = data.get("display", {})
    log = data.get("logging", {})

    def pick(name: str, section: dict[str, Any], key: str, default: Any) -> Any:
        return env.get(name, section.get(key, default))

    defaults = QuotesConfig()
    quotes_config = QuotesConfig(
        tone=validate_tone(pick("TONE", quotes, "tone", defaults.tone)),
        language=validate_choice(
            "language",
            pick("LANGUAGE", quotes, "language", defaults.language),
            SUPPORTED_LANGUAGES,
            defaults.language,
        ),
        model=validate_choice(
            "model",
            pick("MODEL", quotes, "model", defaults.model),
            VALID_MODELS,
            defaults.model,
        ),
        count=validate_int(
            "count",
            pick("QUOTE_COUNT", quotes, "count", defaults.count),
            defaults.count,
            1,
            MAX_QUOTE_COUNT,
        ),
        category=str(pick("CATEGORY", quotes, "category", "")),
        user_prompt=str(pick("USER_PROMPT", quotes, "user_prompt", "")),
    )

    display_defaults = DisplayConfig()
    display_config = DisplayConfig(
        fetch_interval=validate_positive_float(
            "fetch_interval",
            pick(
                "FETCH_INTERVAL",
                display,
                "fetch_interval",
                display_defaults.fetch_interval,
            ),
            display_defaults.fetch_interval,
        ),
        display_time=validate_positive_float(
            "display_time",
            pick("DISPLAY_TIME", display, "display_time", display_defaults.display_time),
            display_defaults.display_time,
        ),
    )

    log_defaults = LogConfig()
    log_config = LogConfig(
        verbose=parse_bool(pick("VERBOSE", log, "verbose", log_defaults.verbose)),
        max_log_bytes=validate_int(
            "max_log_bytes",
            log.get("max_log_bytes", log_defaults.max_log_bytes),
            log_defaults.max_log_bytes,
            1,
            2**40,
        ),
        keep_days=validate_int(
            "keep_days",
            log.get("keep_days", log_defaults.keep_days),
            log_defaults.keep_days,
            1,
            3650,
        ),
    )

    return LegendalyConfig(quotes=quotes_config, display=display_config, log=log_config)


def load_config() -> LegendalyConfig:
    """Load configuration from config file with env var overrides.

    On first run, generates the config file with defaults and continues.

    Returns:
        Loaded and validated LegendalyConfig.

    Raises:
        SystemExit: If the config file is not valid TOML.
    """
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    if not CONFIG_PATH.exists():
        try:
            path = generate_config()
            print(f"Generated default config at {path}", file=sys.stderr)
        except OSError as e:
            _warn(f"Could not write default config: {e}")
        data: dict[str, Any] = {}
    else:
        try:
            with open(CONFIG_PATH, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            print(f"Invalid config file {CONFIG_PATH}: {e}", file=sys.stderr)
            print("Fix it or delete it to regenerate.", file=sys.stderr)
            raise SystemExit(1) from e

    _cached_config = build_config(data)
    return _cached_config
