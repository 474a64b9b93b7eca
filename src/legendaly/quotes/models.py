"""Quote data models with validation."""

from dataclasses import dataclass
from datetime import date

UNKNOWN = "Unknown"


def today_iso() -> str:
    """Return today's local date as YYYY-MM-DD."""
    return date.today().isoformat()


@dataclass(frozen=True)
class QuoteRecord:
    """One generated quote.

    Args:
        text: Quote body, without quotation marks
        speaker: Fictional character credited with the quote
        source: Fictional work the character appears in
        date: Free-form era or year text
    """

    text: str
    speaker: str = UNKNOWN
    source: str = UNKNOWN
    date: str = ""

    def __post_init__(self) -> None:
        """Validate the quote text and fill in a missing date."""
        if not self.text or not self.text.strip():
            raise ValueError("text cannot be empty")
        if not self.date:
            object.__setattr__(self, "date", today_iso())

    def display_lines(self) -> tuple[str, str]:
        """Return the two display lines consumed by the animation layer."""
        return (
            f"  --- {self.text}",
            f"     {self.speaker}『{self.source}』 {self.date}",
        )


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one model response.

    Args:
        records: Parsed quotes in response order
        dropped: Number of blocks that produced no quote
    """

    records: tuple[QuoteRecord, ...]
    dropped: int = 0

    def __len__(self) -> int:
        return len(self.records)
