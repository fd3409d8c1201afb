"""Invariants every chunker upholds on the same documents."""

import pytest

from slabs.chunker import (
    FixedSizeChunker,
    ModelChunker,
    RecursiveCharacterChunker,
    SentenceChunker,
)
from tests.utils.assertions import assert_text_matches_source, assert_valid_spans
from tests.utils.fakes import FixedSplitPredictor

CHUNKERS = [
    pytest.param(FixedSizeChunker(chunk_size=50, overlap=10), id="fixed"),
    pytest.param(FixedSizeChunker.no_overlap(13), id="fixed-no-overlap"),
    pytest.param(SentenceChunker(sentences_per_chunk=2), id="sentence"),
    pytest.param(RecursiveCharacterChunker(chunk_size=60), id="recursive"),
    pytest.param(RecursiveCharacterChunker.markdown(45, chunk_overlap=12), id="recursive-overlap"),
    pytest.param(ModelChunker(FixedSplitPredictor([7, 31, 64, 65, 200])), id="model"),
]


@pytest.mark.parametrize("chunker", CHUNKERS)
class TestChunkInvariants:
    def test_spans_on_char_boundaries(self, chunker, multilingual_document):
        chunks = chunker.chunk(multilingual_document)

        assert chunks
        assert_valid_spans(multilingual_document, chunks)
        assert_text_matches_source(multilingual_document, chunks)

    def test_prose(self, chunker, sample_document):
        chunks = chunker.chunk(sample_document)

        assert_valid_spans(sample_document, chunks)
        assert_text_matches_source(sample_document, chunks)

    def test_empty_text(self, chunker):
        assert chunker.chunk("") == []

    def test_estimate_is_positive(self, chunker):
        assert chunker.estimate_chunks(10_000) >= 1
