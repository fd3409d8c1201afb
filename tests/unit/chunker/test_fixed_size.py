"""Tests for FixedSizeChunker."""

import pytest

from slabs.chunker import FixedSizeChunker
from slabs.errors import ConfigurationError, InvalidChunkSizeError, OverlapExceedsSizeError
from tests.utils.assertions import assert_contiguous, assert_text_matches_source, assert_valid_spans

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class TestFixedSizeChunker:
    """Tests for fixed-size windows."""

    def test_alphabet_with_overlap(self):
        chunks = FixedSizeChunker(chunk_size=10, overlap=2).chunk(ALPHABET)

        assert chunks[0].text == "abcdefghij"
        assert chunks[0].span == (0, 10)
        assert chunks[1].start == 8

    def test_window_positions(self):
        chunks = FixedSizeChunker(chunk_size=10, overlap=3).chunk(ALPHABET)

        assert [c.span for c in chunks] == [(0, 10), (7, 17), (14, 24), (21, 26)]
        assert [c.text for c in chunks] == ["abcdefghij", "hijklmnopq", "opqrstuvwx", "vwxyz"]
        assert [c.index for c in chunks] == [0, 1, 2, 3]

    def test_no_overlap_is_contiguous(self, sample_document):
        chunks = FixedSizeChunker.no_overlap(64).chunk(sample_document)

        assert_contiguous(sample_document, chunks)
        assert sum(c.end - c.start for c in chunks) == len(sample_document.encode("utf-8"))
        assert all(c.byte_length <= 64 for c in chunks)

    def test_overlap_covers_document(self, sample_document):
        chunks = FixedSizeChunker(chunk_size=100, overlap=20).chunk(sample_document)

        assert chunks[0].start == 0
        assert chunks[-1].end == len(sample_document.encode("utf-8"))
        for previous, current in zip(chunks, chunks[1:]):
            assert previous.start < current.start <= previous.end

    def test_text_smaller_than_chunk(self):
        chunks = FixedSizeChunker(chunk_size=100, overlap=20).chunk("short")
        assert len(chunks) == 1
        assert chunks[0].text == "short"

    def test_empty_text(self):
        assert FixedSizeChunker(chunk_size=10, overlap=2).chunk("") == []

    def test_multibyte_characters_not_split(self, multilingual_document):
        for size, overlap in [(5, 0), (7, 2), (16, 5), (33, 10)]:
            chunks = FixedSizeChunker(chunk_size=size, overlap=overlap).chunk(multilingual_document)
            assert_valid_spans(multilingual_document, chunks)
            assert_text_matches_source(multilingual_document, chunks)

    def test_multibyte_no_overlap_is_contiguous(self, multilingual_document):
        chunks = FixedSizeChunker.no_overlap(7).chunk(multilingual_document)
        assert_contiguous(multilingual_document, chunks)

    def test_two_byte_characters(self):
        text = "é" * 10
        chunks = FixedSizeChunker.no_overlap(5).chunk(text)

        assert [c.text for c in chunks] == ["éé"] * 5
        assert_contiguous(text, chunks)

    def test_character_wider_than_chunk(self):
        """A character wider than the window is emitted whole."""
        chunks = FixedSizeChunker.no_overlap(2).chunk("🎉🚀")

        assert [c.text for c in chunks] == ["🎉", "🚀"]
        assert [c.span for c in chunks] == [(0, 4), (4, 8)]


class TestFixedSizeValidation:
    def test_zero_chunk_size(self):
        with pytest.raises(InvalidChunkSizeError):
            FixedSizeChunker(chunk_size=0, overlap=0)

    def test_overlap_equal_to_size(self):
        with pytest.raises(OverlapExceedsSizeError, match="overlap 10 exceeds chunk size 10"):
            FixedSizeChunker(chunk_size=10, overlap=10)

    def test_negative_overlap(self):
        with pytest.raises(ConfigurationError):
            FixedSizeChunker(chunk_size=10, overlap=-1)


class TestFixedSizeEstimate:
    def test_estimate(self):
        chunker = FixedSizeChunker(chunk_size=10, overlap=2)
        assert chunker.step == 8
        assert chunker.estimate_chunks(0) == 0
        assert chunker.estimate_chunks(8) == 1
        assert chunker.estimate_chunks(26) == 4
