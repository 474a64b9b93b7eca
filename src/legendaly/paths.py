"""Directory and file paths for legendaly data."""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

SUBDIRECTORIES = ("logs", "echoes", "config", "cache")
LOG_FILENAME = "legendaly.log"


@dataclass(frozen=True)
class LogPaths:
    """Destinations for quote log lines.

    Attributes:
        log_path: Rolling log shared by every session
        echoes_path: Log file for the current session only
    """

    log_path: Path
    echoes_path: Path


def get_legendaly_dir() -> Path:
    """Get the legendaly data directory.

    Priority:
    1. $LEGENDALY_HOME
    2. ~/.legendaly/

    Returns:
        Path to the data directory (not created)
    """
    home = os.environ.get("LEGENDALY_HOME")
    if home:
        return Path(home).expanduser()
    return Path.home() / ".legendaly"


def ensure_legendaly_dir() -> Path:
    """Create the data directory and its subdirectories if missing.

    Returns:
        Path to the data directory
    """
    base = get_legendaly_dir()
    base.mkdir(parents=True, exist_ok=True)
    for name in SUBDIRECTORIES:
        (base / name).mkdir(exist_ok=True)
    return base


def get_echoes_dir() -> Path:
    """Get the directory holding per-session echoes files."""
    return get_legendaly_dir() / "echoes"


def format_compact_timestamp(moment: datetime) -> str:
    """Format a datetime as yyyyMMddHHmmssfff (17 digits)."""
    return moment.strftime("%Y%m%d%H%M%S") + f"{moment.microsecond // 1000:03d}"


def init_log_paths(
    tone: str, language: str, now: datetime | None = None
) -> LogPaths:
    """Create the data directories and name this session's log files.

    Args:
        tone: Tone label, used in the session file name
        language: Language code, used in the session file name
        now: Session start time (defaults to the current time)

    Returns:
        LogPaths with the rolling log and the session echoes file
    """
    base = ensure_legendaly_dir()
    stamp = format_compact_timestamp(now or datetime.now())
    return LogPaths(
        log_path=base / "logs" / LOG_FILENAME,
        echoes_path=base / "echoes" / f"{stamp}-{tone}-{language}.echoes",
    )
