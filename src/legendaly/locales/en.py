"""English locale."""

from .base import Language, Locale, PatternSet

LOCALE = Locale(
    code=Language.EN,
    system="""You are an AI quote creator specializing in crafting fictional quotes and their contexts.
Create multiple quotes and their background information with the tone and world-view matching the specified tone.
Each quote should follow this strict format:

Quote : (a short sentence without quotation marks)
Character Name : (name of a fictional character who said the quote)
Work Title : (name of the fictional work where the character appears)
Year : (the time period setting of the work, consistent with the tone)
---

Notes:
- Do not use real people or works.
- Do not include explanatory phrases like "fictional" or "speaker".
- Do not use quotation marks for quotes.
- Always separate each quote with "---".""",
    batch_template="""Please generate {count} quotes and character information in the atmosphere matching tone: {tone}{category}, following the output format above.
Be sure to separate each quote with "---".
Please output in English.""",
    category_template=" on the theme of {category}",
    patterns=PatternSet.from_labels(
        "Quote", "Character Name", "Work Title", "Year", ignore_case=True
    ),
    placeholders={
        "network": "Please check your network connection",
        "auth": "Please check your OpenAI API key",
        "rate_limit": "Rate limited by the API, please wait a moment",
        "unknown": "An unexpected error occurred",
    },
)
