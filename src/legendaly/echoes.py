"""Append-only quote logs ("echoes").

Every accepted quote is written as one human-readable line to the rolling
log and to the current session's echoes file. Lines are appended with a
fresh file handle each time; there is no locking.
"""

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from .paths import format_compact_timestamp
from .quotes.models import QuoteRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_LOG_BYTES = 10 * 1024 * 1024
DEFAULT_KEEP_DAYS = 30

LOG_LINE_PATTERN = re.compile(r"^\[([^\]]+)\]\s+([^『]+)『([^』]+)』：「([^」]+)」")


def iso_timestamp(moment: datetime | None = None) -> str:
    """Return a UTC ISO-8601 timestamp with milliseconds and a Z suffix."""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_log_line(
    record: QuoteRecord,
    tone: str,
    language: str,
    timestamp: datetime | None = None,
) -> str:
    """Format one log line for a quote.

    Args:
        record: Quote to log
        tone: Tone label the quote was generated with
        language: Language code the quote was requested in
        timestamp: Log time (defaults to now)

    Returns:
        Newline-terminated log line
    """
    return (
        f"[{record.date}] {record.speaker}『{record.source}』：「{record.text}」 "
        f"(tone: {tone}, lang: {language}, time: {iso_timestamp(timestamp)})\n"
    )


def append_line(path: str | Path, line: str) -> None:
    """Append a line to a file, creating it if needed."""
    with open(path, "a", encoding="utf-8") as f:
        f.write(line)


def write_echo(
    record: QuoteRecord,
    tone: str,
    language: str,
    log_path: str | Path,
    echoes_path: str | Path,
) -> int:
    """Append a quote's log line to the rolling log and the session file.

    The two appends are independent: a failure on one is logged and does
    not prevent or undo the other.

    Args:
        record: Quote to log
        tone: Tone label
        language: Language code
        log_path: Rolling log file
        echoes_path: Session echoes file

    Returns:
        Number of files successfully written (0, 1 or 2)
    """
    line = format_log_line(record, tone, language)
    written = 0
    for path in (log_path, echoes_path):
        try:
            append_line(path, line)
            written += 1
        except OSError as e:
            logger.warning(f"Failed to append quote to {path}: {e}")
    return written


def rotate_log_if_needed(
    log_path: str | Path, max_bytes: int = DEFAULT_MAX_LOG_BYTES
) -> bool:
    """Rename the rolling log once it grows past max_bytes.

    ``legendaly.log`` becomes ``legendaly.<yyyyMMddHHmmssfff>.log``.

    Returns:
        True if the log was rotated
    """
    path = Path(log_path)
    if not path.exists() or path.stat().st_size <= max_bytes:
        return False

    stamp = format_compact_timestamp(datetime.now())
    rotated = path.with_name(f"{path.stem}.{stamp}{path.suffix}")
    path.rename(rotated)
    logger.info(f"Rotated {path} to {rotated}")
    return True


def clean_old_logs(directory: str | Path, days_to_keep: int = DEFAULT_KEEP_DAYS) -> int:
    """Delete .echoes and .log files older than days_to_keep.

    Args:
        directory: Directory to clean
        days_to_keep: Age limit in days, by modification time

    Returns:
        Number of files deleted
    """
    path = Path(directory)
    if not path.is_dir():
        return 0

    cutoff = datetime.now().timestamp() - days_to_keep * 24 * 60 * 60
    removed = 0
    for file in path.iterdir():
        if file.suffix not in (".echoes", ".log") or not file.is_file():
            continue
        try:
            if file.stat().st_mtime < cutoff:
                file.unlink()
                removed += 1
        except OSError as e:
            logger.warning(f"Failed to remove old log {file}: {e}")

    if removed:
        logger.debug(f"Removed {removed} old log files from {path}")
    return removed


def parse_log_line(line: str) -> QuoteRecord | None:
    """Parse a log line back into a QuoteRecord, or None if it does not match."""
    match = LOG_LINE_PATTERN.match(line.strip())
    if not match:
        return None
    period, speaker, source, text = (group.strip() for group in match.groups())
    if not text:
        return None
    return QuoteRecord(text=text, speaker=speaker, source=source, date=period)


def load_history(
    echoes_dir: str | Path, limit: int = 100, sessions: int = 10
) -> list[QuoteRecord]:
    """Load previously logged quotes from the newest session files.

    Args:
        echoes_dir: Directory of .echoes files
        limit: Maximum number of quotes returned
        sessions: Number of most recent session files read

    Returns:
        Quotes from the newest sessions first, in file order within a session
    """
    path = Path(echoes_dir)
    if not path.is_dir():
        return []

    files = sorted(
        (f for f in path.iterdir() if f.suffix == ".echoes"),
        key=lambda f: f.name,
        reverse=True,
    )[:sessions]

    quotes: list[QuoteRecord] = []
    for file in files:
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable echoes file {file}: {e}")
            continue
        for line in text.splitlines():
            record = parse_log_line(line)
            if record is None:
                continue
            quotes.append(record)
            if len(quotes) >= limit:
                return quotes
    return quotes
