"""Tests for late chunking."""

import math

import numpy as np
import pytest

from slabs.chunker import FixedSizeChunker, LateChunker, LateChunkingPooler, LateChunkResult
from slabs.core import Chunk
from slabs.errors import ConfigurationError

TOKENS = [[1.0, 0.0], [1.0, 0.0], [0.0, 1.0], [0.0, 1.0]]
OFFSETS = [(0, 5), (5, 10), (10, 15), (15, 20)]


def _chunk(start, end, index=0):
    return Chunk(text="x" * (end - start), start=start, end=end, index=index)


def _norm(vec):
    return math.sqrt(sum(x * x for x in vec))


class TestLateChunkingPooler:
    """Tests for ratio-mapped pooling."""

    def test_pool_maps_offsets_to_tokens(self):
        pooler = LateChunkingPooler(dim=2)
        pooled = pooler.pool(TOKENS, [_chunk(0, 10, 0), _chunk(10, 20, 1)], doc_len=20)

        assert pooled[0] == pytest.approx([1.0, 0.0])
        assert pooled[1] == pytest.approx([0.0, 1.0])

    def test_pooled_vectors_are_normalized(self):
        rng = np.random.default_rng(7)
        tokens = rng.normal(size=(50, 16))
        chunks = [_chunk(i * 20, (i + 1) * 20, i) for i in range(5)]

        for vec in LateChunkingPooler(dim=16).pool(tokens, chunks, doc_len=100):
            assert len(vec) == 16
            assert abs(_norm(vec) - 1.0) < 0.01

    def test_empty_range_falls_back_to_document_mean(self):
        pooled = LateChunkingPooler(dim=2).pool(TOKENS, [_chunk(0, 1)], doc_len=100)
        assert pooled[0] == pytest.approx([math.sqrt(0.5), math.sqrt(0.5)])

    @pytest.mark.parametrize(
        "tokens,chunks,doc_len",
        [
            ([], [_chunk(0, 5), _chunk(5, 10, 1)], 10),
            (TOKENS, [_chunk(0, 0), _chunk(0, 0, 1)], 0),
        ],
    )
    def test_degenerate_input_returns_zero_vectors(self, tokens, chunks, doc_len):
        pooled = LateChunkingPooler(dim=3).pool(tokens, chunks, doc_len)
        assert pooled == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]

    def test_no_chunks(self):
        assert LateChunkingPooler(dim=2).pool(TOKENS, [], doc_len=20) == []

    def test_invalid_dimension(self):
        with pytest.raises(ConfigurationError):
            LateChunkingPooler(dim=0)


class TestPoolWithOffsets:
    """Tests for exact token-offset pooling."""

    def test_exact_overlap(self):
        pooled = LateChunkingPooler(dim=2).pool_with_offsets(TOKENS, OFFSETS, [_chunk(0, 10)])
        assert pooled[0] == pytest.approx([1.0, 0.0])

    def test_straddling_tokens_count_for_both_chunks(self):
        pooled = LateChunkingPooler(dim=2).pool_with_offsets(TOKENS, OFFSETS, [_chunk(8, 12)])
        assert pooled[0] == pytest.approx([math.sqrt(0.5), math.sqrt(0.5)])

    def test_no_matching_tokens_falls_back(self):
        pooled = LateChunkingPooler(dim=2).pool_with_offsets(TOKENS, OFFSETS, [_chunk(30, 40)])
        assert pooled[0] == pytest.approx([math.sqrt(0.5), math.sqrt(0.5)])

    def test_offsets_beyond_matrix_are_ignored(self):
        offsets = OFFSETS + [(20, 25)]
        pooled = LateChunkingPooler(dim=2).pool_with_offsets(TOKENS, offsets, [_chunk(20, 25)])
        assert pooled[0] == pytest.approx([math.sqrt(0.5), math.sqrt(0.5)])

    def test_missing_offsets_return_zero_vectors(self):
        pooled = LateChunkingPooler(dim=2).pool_with_offsets(TOKENS, [], [_chunk(0, 10)])
        assert pooled == [[0.0, 0.0]]

    def test_accepts_numpy_input(self):
        pooled = LateChunkingPooler(dim=2).pool_with_offsets(
            np.array(TOKENS), OFFSETS, [_chunk(10, 20)]
        )
        assert pooled[0] == pytest.approx([0.0, 1.0])


class TestLateChunker:
    """Tests for the chunker wrapper."""

    def test_delegates_chunking(self, sample_document):
        base = FixedSizeChunker(chunk_size=100, overlap=10)
        late = LateChunker(base, dim=4)

        assert late.chunk(sample_document) == base.chunk(sample_document)
        assert late.estimate_chunks(1000) == base.estimate_chunks(1000)
        assert late.dim == 4

    def test_chunk_and_pool(self):
        text = "abcdefghijklmnopqrst"
        late = LateChunker(FixedSizeChunker.no_overlap(10), dim=2)

        results = late.chunk_and_pool(text, TOKENS)

        assert len(results) == 2
        assert isinstance(results[0], LateChunkResult)
        assert results[0].chunk.text == "abcdefghij"
        assert results[0].embedding == pytest.approx([1.0, 0.0])
        assert results[1].embedding == pytest.approx([0.0, 1.0])

    def test_chunk_and_pool_with_offsets(self):
        text = "abcdefghijklmnopqrst"
        late = LateChunker(FixedSizeChunker.no_overlap(10), dim=2)

        results = late.chunk_and_pool(text, TOKENS, token_offsets=OFFSETS)

        assert [r.embedding for r in results] == [
            pytest.approx([1.0, 0.0]),
            pytest.approx([0.0, 1.0]),
        ]

    def test_empty_document(self):
        late = LateChunker(FixedSizeChunker.no_overlap(10), dim=2)
        assert late.chunk_and_pool("", TOKENS) == []
