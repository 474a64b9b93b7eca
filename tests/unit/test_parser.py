"""Unit tests for the batch parser."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from legendaly.locales import all_patterns
from legendaly.quotes.models import UNKNOWN, ParseResult, QuoteRecord
from legendaly.quotes.parser import parse_batch, parse_block, split_blocks

BLOCKS = {
    "ja": "名言 : {q}\nキャラクター名 : {s}\n作品名 : {w}\n西暦 : {d}",
    "en": "Quote : {q}\nCharacter Name : {s}\nWork Title : {w}\nYear : {d}",
    "zh": "名言 : {q}\n角色名 : {s}\n作品名 : {w}\n年代 : {d}",
    "ko": "명언 : {q}\n캐릭터 이름 : {s}\n작품명 : {w}\n연도 : {d}",
    "fr": "Citation : {q}\nNom du Personnage : {s}\nTitre de l'Œuvre : {w}\nAnnée : {d}",
    "es": "Cita : {q}\nNombre del Personaje : {s}\nTítulo de la Obra : {w}\nAño : {d}",
    "de": "Zitat : {q}\nCharaktername : {s}\nWerktitel : {w}\nJahr : {d}",
}


def block(code: str, q: str = "Q", s: str = "S", w: str = "W", d: str = "D") -> str:
    return BLOCKS[code].format(q=q, s=s, w=w, d=d)


class TestSplitBlocks:
    """Test splitting raw output into blocks."""

    def test_splits_on_delimiter_with_surrounding_whitespace(self) -> None:
        """Test the delimiter absorbs surrounding whitespace."""
        assert split_blocks("a\n---\nb  ---  c") == ["a", "b", "c"]

    def test_drops_blank_blocks(self) -> None:
        """Test that empty segments are discarded."""
        assert split_blocks("---\na\n---\n\n---\n") == ["a"]

    def test_empty_input(self) -> None:
        """Test empty text yields no blocks."""
        assert split_blocks("") == []


class TestParseBatchWellFormed:
    """Test parsing of well-formed blocks in every locale."""

    @pytest.mark.parametrize("code", list(BLOCKS))
    def test_all_fields_extracted_verbatim(self, code: str) -> None:
        """Test that K labeled blocks give K records with the labeled values."""
        raw = "\n---\n".join(
            block(code, q=f"quote {i}", s=f"speaker {i}", w=f"work {i}", d=f"{1900 + i}")
            for i in range(3)
        )

        result = parse_batch(raw, code)

        assert len(result) == 3
        assert result.dropped == 0
        for i, record in enumerate(result.records):
            assert record == QuoteRecord(
                text=f"quote {i}",
                speaker=f"speaker {i}",
                source=f"work {i}",
                date=f"{1900 + i}",
            )

    def test_japanese_block(self) -> None:
        """Test a Japanese block parses into one record and its display lines."""
        raw = "名言 : 山があるから登るのだ\nキャラクター名 : 佐藤太郎\n作品名 : 山男伝\n西暦 : 1980"

        result = parse_batch(raw, "ja")

        assert result.records == (
            QuoteRecord(text="山があるから登るのだ", speaker="佐藤太郎", source="山男伝", date="1980"),
        )
        assert result.records[0].display_lines() == (
            "  --- 山があるから登るのだ",
            "     佐藤太郎『山男伝』 1980",
        )

    def test_two_blocks_keep_input_order(self) -> None:
        """Test records follow block order regardless of field completeness."""
        raw = "Quote : First words\n---\n" + block("en", q="Second words")

        result = parse_batch(raw, "en")

        assert [record.text for record in result.records] == [
            "First words",
            "Second words",
        ]
        assert result.records[0].speaker == UNKNOWN
        assert result.records[1].speaker == "S"

    def test_labels_are_case_insensitive_for_latin_locales(self) -> None:
        """Test English labels match regardless of case."""
        result = parse_batch("QUOTE : Loud\ncharacter name : Quiet", "en")

        assert result.records[0].text == "Loud"
        assert result.records[0].speaker == "Quiet"

    def test_french_curly_apostrophe(self) -> None:
        """Test the French work label accepts a typographic apostrophe."""
        raw = "Citation : Le vent\nTitre de l’Œuvre : Les Dunes"

        result = parse_batch(raw, "fr")

        assert result.records[0].source == "Les Dunes"


class TestParseBatchFallback:
    """Test fallback to other locales' labels."""

    def test_french_block_while_english_active(self) -> None:
        """Test a block in French labels parses when English is requested."""
        result = parse_batch(block("fr", q="Le temps", s="Aline", w="Brume", d="1789"), "en")

        assert result.records == (
            QuoteRecord(text="Le temps", speaker="Aline", source="Brume", date="1789"),
        )

    def test_chinese_block_while_japanese_active(self) -> None:
        """Test shared quote labels still pick the locale matching more fields."""
        result = parse_batch(block("zh", q="风起", s="林舟", w="云海", d="宋代"), "ja")

        assert result.records == (
            QuoteRecord(text="风起", speaker="林舟", source="云海", date="宋代"),
        )

    def test_japanese_block_while_chinese_active(self) -> None:
        """Test the reverse of the shared-label case."""
        result = parse_batch(block("ja", s="黒瀬迅", d="2099年"), "zh")

        assert result.records[0].speaker == "黒瀬迅"
        assert result.records[0].date == "2099年"

    @pytest.mark.parametrize("active", list(BLOCKS))
    @pytest.mark.parametrize("source_code", list(BLOCKS))
    def test_every_locale_pair(self, active: str, source_code: str) -> None:
        """Test any known locale's block parses under any active locale."""
        result = parse_batch(block(source_code), active)

        assert result.records == (QuoteRecord(text="Q", speaker="S", source="W", date="D"),)

    def test_unknown_active_language_uses_table(self) -> None:
        """Test an active code missing from the table still parses via fallback."""
        result = parse_batch(block("de"), "xx")

        assert result.records[0].speaker == "S"

    def test_custom_pattern_table_limits_fallback(self) -> None:
        """Test that only the given pattern sets are consulted."""
        patterns = {"en": all_patterns()["en"]}

        result = parse_batch(block("de"), "en", patterns)

        assert result == ParseResult(records=(), dropped=1)


class TestParseBatchDropping:
    """Test dropping of unparseable blocks."""

    def test_unmatched_block_is_dropped_without_affecting_siblings(self) -> None:
        """Test a block with no quote label is dropped and siblings survive."""
        raw = "\n---\n".join([block("en", q="Keep 1"), "just some prose", block("en", q="Keep 2")])

        result = parse_batch(raw, "en")

        assert [record.text for record in result.records] == ["Keep 1", "Keep 2"]
        assert result.dropped == 1

    def test_empty_quote_text_is_dropped(self) -> None:
        """Test a quote label with blank text yields no record."""
        result = parse_batch("Quote :   ", "en")

        assert result.records == ()
        assert result.dropped == 1

    def test_blank_quote_line_does_not_take_next_line(self) -> None:
        """Test a blank quote value followed by other fields drops the block."""
        raw = "名言 : \nキャラクター名 : 佐藤太郎\n作品名 : 山男伝\n西暦 : 1980"

        result = parse_batch(raw, "ja")

        assert result.records == ()
        assert result.dropped == 1

    def test_blank_speaker_line_defaults(self) -> None:
        """Test a blank speaker value defaults instead of reading the next line."""
        raw = "Quote : Hold fast\nCharacter Name :\nWork Title : Iron Sea\nYear : 1850"

        record = parse_batch(raw, "en").records[0]

        assert record.text == "Hold fast"
        assert record.speaker == UNKNOWN
        assert record.source == "Iron Sea"

    def test_no_blocks(self) -> None:
        """Test empty output yields an empty result."""
        assert parse_batch("", "en") == ParseResult(records=(), dropped=0)

    def test_parse_block_returns_none_on_mismatch(self) -> None:
        """Test parse_block signals a mismatch with None."""
        assert parse_block("nothing here", "ja") is None


class TestParseBatchDefaults:
    """Test defaults for missing fields."""

    def test_missing_fields_default(self) -> None:
        """Test missing speaker, source and date get their defaults."""
        result = parse_batch("Quote : Alone", "en")

        record = result.records[0]
        assert record.speaker == UNKNOWN
        assert record.source == UNKNOWN
        assert record.date == date.today().isoformat()

    def test_missing_fields_default_japanese(self) -> None:
        """Test defaults also apply to Japanese blocks."""
        result = parse_batch("名言 : ひとりきり", "ja")

        record = result.records[0]
        assert (record.speaker, record.source) == (UNKNOWN, UNKNOWN)
        assert record.date == date.today().isoformat()
