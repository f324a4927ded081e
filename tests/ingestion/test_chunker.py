"""Tests for text normalization and paragraph chunking."""

import random

import pytest

from underwriting.ingestion.chunker import (
    EMPTY_TEXT_PLACEHOLDER,
    chunk_text,
    estimate_page_hint,
    normalize_text,
    split_into_paragraphs,
)


def _random_document(rng: random.Random) -> str:
    """Build text with paragraphs of varied length and messy separators."""
    paragraphs = []
    for _ in range(rng.randint(1, 25)):
        words = rng.randint(1, 900)
        paragraphs.append(" ".join(f"w{rng.randint(0, 999)}" for _ in range(words)))
    separators = ["\n\n", "\n\n\n", "\r\n\r\n", "\n\n\n\n\n"]
    text = ""
    for paragraph in paragraphs:
        text += paragraph + rng.choice(separators)
    return "  \n" + text


class TestNormalizeText:
    """Test the normalize_text function."""

    def test_crlf_converted(self):
        """Test that CRLF line endings become LF."""
        assert normalize_text("line one\r\nline two") == "line one\nline two"

    def test_blank_line_runs_collapsed(self):
        """Test that 3+ newlines collapse to a single blank line."""
        assert normalize_text("a\n\n\n\n\nb") == "a\n\nb"
        assert normalize_text("a\r\n\r\n\r\nb") == "a\n\nb"

    def test_single_blank_line_kept(self):
        """Test that an existing paragraph break is untouched."""
        assert normalize_text("a\n\nb") == "a\n\nb"

    def test_trims_outer_whitespace(self):
        """Test leading/trailing whitespace removal."""
        assert normalize_text("  \n\n text here \n\t ") == "text here"

    def test_carriage_return_before_crlf(self):
        """A CR followed by CRLF collapses fully in one pass."""
        assert normalize_text("a\r\r\n\r\r\n\r\r\nb") == "a\n\nb"

    def test_lone_carriage_return_untouched(self):
        """Only CRLF pairs are rewritten."""
        assert normalize_text("a\rb") == "a\rb"

    def test_empty_string(self):
        """Test handling of empty input."""
        assert normalize_text("") == ""
        assert normalize_text(" \n\n ") == ""

    def test_idempotent(self):
        """Normalizing normalized text changes nothing."""
        rng = random.Random(7)
        samples = ["", "a\r\n\r\n\r\n\r\nb", " x \n\n\n y ", "a\r\r\n\r\r\n\r\r\nb"]
        samples += [_random_document(rng) for _ in range(20)]
        for sample in samples:
            once = normalize_text(sample)
            assert normalize_text(once) == once


class TestSplitIntoParagraphs:
    """Test paragraph splitting."""

    def test_splits_on_blank_lines(self):
        assert split_into_paragraphs("one\n\ntwo\n\n\nthree") == ["one", "two", "three"]

    def test_single_newline_stays_in_paragraph(self):
        assert split_into_paragraphs("line one\nline two") == ["line one\nline two"]

    def test_drops_whitespace_only_paragraphs(self):
        assert split_into_paragraphs("one\n\n   \n\ntwo") == ["one", "two"]

    def test_empty(self):
        assert split_into_paragraphs("") == []


class TestChunkText:
    """Test the chunk_text function."""

    def test_empty_text_placeholder(self):
        """Empty normalized text yields exactly one placeholder chunk."""
        chunks = chunk_text("", page_count=5)

        assert len(chunks) == 1
        assert chunks[0].index == 0
        assert chunks[0].text == EMPTY_TEXT_PLACEHOLDER
        assert chunks[0].page_hint == 1

    def test_short_text_single_chunk(self):
        """Short text fits in one chunk on the last page."""
        chunks = chunk_text("Just one paragraph.", page_count=3)

        assert len(chunks) == 1
        assert chunks[0].text == "Just one paragraph."
        assert chunks[0].page_hint == 3

    def test_three_paragraph_scenario(self):
        """Two 1500-char paragraphs fit together; the third starts a new chunk."""
        paragraphs = ["a" * 1500, "b" * 1500, "c" * 1500]
        text = normalize_text("".join(p + "\n\n" for p in paragraphs))

        chunks = chunk_text(text, page_count=10, max_chunk_size=4000)

        assert [c.index for c in chunks] == [0, 1]
        assert chunks[0].text == paragraphs[0] + "\n\n" + paragraphs[1]
        assert len(chunks[0].text) == 3002
        assert chunks[1].text == paragraphs[2]
        assert chunks[1].page_hint == 10

    def test_boundary_exactly_at_limit(self):
        """A paragraph that lands exactly on the limit stays in the buffer."""
        # 10 + 8 + 2 == 20, not > 20
        chunks = chunk_text("a" * 10 + "\n\n" + "b" * 8, page_count=1, max_chunk_size=20)
        assert len(chunks) == 1

        chunks = chunk_text("a" * 10 + "\n\n" + "b" * 9, page_count=1, max_chunk_size=20)
        assert len(chunks) == 2

    def test_long_paragraph_kept_whole(self):
        """An oversize paragraph is never split mid-paragraph."""
        long_paragraph = "x" * 5000
        text = f"intro\n\n{long_paragraph}\n\noutro"

        chunks = chunk_text(text, page_count=2, max_chunk_size=4000)

        assert [c.text for c in chunks] == ["intro", long_paragraph, "outro"]

    def test_custom_threshold(self):
        """Different thresholds can be used side by side."""
        text = "\n\n".join(f"paragraph {i}" for i in range(10))

        small = chunk_text(text, page_count=4, max_chunk_size=30)
        large = chunk_text(text, page_count=4, max_chunk_size=4000)

        assert len(small) > 1
        assert len(large) == 1

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            chunk_text("text", page_count=1, max_chunk_size=0)

    def test_unicode_text(self):
        """Test chunking with unicode characters."""
        text = "Résumé of the borrower 🎉\n\nÇa va — spëcial chäracters."
        chunks = chunk_text(text, page_count=1, max_chunk_size=30)

        combined = "\n\n".join(c.text for c in chunks)
        assert "🎉" in combined
        assert "spëcial" in combined


class TestChunkProperties:
    """Invariants that hold for any input."""

    @pytest.fixture
    def documents(self) -> list[str]:
        rng = random.Random(42)
        return [normalize_text(_random_document(rng)) for _ in range(40)]

    @pytest.mark.parametrize("max_chunk_size", [50, 500, 4000])
    def test_indices_contiguous(self, documents, max_chunk_size):
        for text in documents:
            chunks = chunk_text(text, page_count=7, max_chunk_size=max_chunk_size)
            assert [c.index for c in chunks] == list(range(len(chunks)))

    @pytest.mark.parametrize("max_chunk_size", [50, 500, 4000])
    def test_no_oversize_chunks_except_single_paragraphs(self, documents, max_chunk_size):
        for text in documents:
            for chunk in chunk_text(text, page_count=7, max_chunk_size=max_chunk_size):
                if len(chunk.text) > max_chunk_size:
                    assert len(split_into_paragraphs(chunk.text)) == 1

    @pytest.mark.parametrize("max_chunk_size", [50, 500, 4000])
    def test_reassembly(self, documents, max_chunk_size):
        for text in documents:
            chunks = chunk_text(text, page_count=7, max_chunk_size=max_chunk_size)
            rejoined = "\n\n".join(c.text for c in chunks)
            assert rejoined == "\n\n".join(split_into_paragraphs(text))

    @pytest.mark.parametrize("page_count", [1, 2, 9, 250])
    def test_page_hints_bounded(self, documents, page_count):
        for text in documents:
            for chunk in chunk_text(text, page_count=page_count, max_chunk_size=200):
                assert chunk.page_hint is not None
                assert 1 <= chunk.page_hint <= page_count

    def test_chunks_trimmed_and_non_empty(self, documents):
        for text in documents:
            for chunk in chunk_text(text, page_count=3, max_chunk_size=100):
                assert chunk.text
                assert chunk.text == chunk.text.strip()


class TestEstimatePageHint:
    """Test the page hint heuristic."""

    def test_clamped_to_page_count(self):
        assert estimate_page_hint(0, 0, 10) == 10
        assert estimate_page_hint(4, 4, 10) == 10

    def test_at_least_one(self):
        assert estimate_page_hint(0, 0, 0) == 1
        assert estimate_page_hint(0, 0, 1) == 1
