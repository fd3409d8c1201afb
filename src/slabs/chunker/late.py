"""Late chunking: embed the whole document first, then pool per chunk.

Embedding chunks independently loses cross-chunk context::

    Document: "Einstein developed relativity. He became famous."
    Chunks:   ["Einstein developed relativity.", "He became famous."]

Embedded alone, "He" no longer knows it refers to Einstein. Late chunking
(Günther et al. 2024, arXiv:2409.04701) runs a long-context model over the
full document to get token embeddings ``H = [h1, ..., hn]``, then builds each
chunk's embedding as the mean of the tokens inside it::

    chunk_i = normalize(mean(h_t for t in tokens of chunk_i))

Every token has attended to the whole document, so the pooled vectors keep
that context. The cost is memory: the full ``n_tokens x dim`` matrix must be
held at once.

This module only pools; producing token embeddings is up to the caller.
"""

from typing import NamedTuple

import numpy as np
from loguru import logger

from ..core.chunk import Chunk
from ..errors import ConfigurationError
from ..observability import trace_span
from .base import BaseChunker

_NORM_EPSILON = 1e-9


class LateChunkResult(NamedTuple):
    """A chunk paired with its contextualized embedding."""

    chunk: Chunk
    embedding: list[float]


class LateChunkingPooler:
    """Pools token-level embeddings into one vector per chunk.

    Two ways of mapping chunks to tokens are supported:

    - ``pool``: linear approximation from byte offsets, assuming tokens are
      spread evenly over the document.
    - ``pool_with_offsets``: exact, using each token's byte span as reported
      by the tokenizer.

    When a chunk maps to no tokens, the mean of the whole document is used
    instead. Pooled vectors are L2-normalized.

    Attributes:
        dim: Embedding dimension, used for the zero vectors returned on
            degenerate input
    """

    def __init__(self, dim: int):
        if dim <= 0:
            raise ConfigurationError(f"embedding dimension must be > 0, got {dim}")
        self.dim = dim

    def pool(
        self,
        token_embeddings: list[list[float]] | np.ndarray,
        chunks: list[Chunk],
        doc_len: int,
    ) -> list[list[float]]:
        """Pool by mapping byte offsets to token indices proportionally.

        Args:
            token_embeddings: Token embeddings of the full document, shape
                ``(n_tokens, dim)``
            chunks: Chunks of the same document, from any chunker
            doc_len: Document length in bytes

        Returns:
            One embedding per chunk, in chunk order
        """
        matrix = np.asarray(token_embeddings, dtype=np.float64)
        if matrix.size == 0 or not chunks or doc_len == 0:
            return self._zeros(len(chunks))

        n_tokens = matrix.shape[0]
        pooled = []
        for chunk in chunks:
            token_start = int(chunk.start / doc_len * n_tokens)
            token_end = min(int(chunk.end / doc_len * n_tokens), n_tokens)

            if token_end <= token_start:
                pooled.append(self._mean_pool(matrix))
            else:
                pooled.append(self._mean_pool(matrix[token_start:token_end]))
        return pooled

    def pool_with_offsets(
        self,
        token_embeddings: list[list[float]] | np.ndarray,
        token_offsets: list[tuple[int, int]],
        chunks: list[Chunk],
    ) -> list[list[float]]:
        """Pool using exact token byte spans.

        A token belongs to a chunk when their spans overlap
        (``token.start < chunk.end and token.end > chunk.start``), so a token
        straddling a chunk boundary counts for both chunks. Offsets whose
        index lies beyond the embedding matrix are ignored.

        Args:
            token_embeddings: Token embeddings, shape ``(n_tokens, dim)``
            token_offsets: ``(start, end)`` byte span of each token
            chunks: Chunks of the same document

        Returns:
            One embedding per chunk, in chunk order
        """
        matrix = np.asarray(token_embeddings, dtype=np.float64)
        if matrix.size == 0 or not chunks or not token_offsets:
            return self._zeros(len(chunks))

        n_tokens = matrix.shape[0]
        offsets = np.asarray(token_offsets, dtype=np.int64).reshape(-1, 2)[:n_tokens]

        pooled = []
        for chunk in chunks:
            mask = (offsets[:, 0] < chunk.end) & (offsets[:, 1] > chunk.start)
            indices = np.flatnonzero(mask)
            if indices.size == 0:
                pooled.append(self._mean_pool(matrix))
            else:
                pooled.append(self._mean_pool(matrix[indices]))
        return pooled

    def _mean_pool(self, embeddings: np.ndarray) -> list[float]:
        if embeddings.shape[0] == 0:
            return [0.0] * self.dim

        mean = embeddings.mean(axis=0)
        norm = np.linalg.norm(mean)
        if norm > _NORM_EPSILON:
            mean = mean / norm
        return mean.tolist()

    def _zeros(self, count: int) -> list[list[float]]:
        return [[0.0] * self.dim for _ in range(count)]


class LateChunker(BaseChunker):
    """Wraps any chunker so its chunks can be pooled from document embeddings.

    Chunk boundaries come from the wrapped chunker unchanged; embeddings come
    from the pooler.

    Example:
        >>> late = LateChunker(SentenceChunker(3), dim=384)
        >>> chunks = late.chunk(document)
        >>> embeddings = late.pool(token_embeddings, chunks, len(document.encode()))
    """

    def __init__(self, base: BaseChunker, dim: int):
        self.base = base
        self.pooler = LateChunkingPooler(dim)

    @property
    def dim(self) -> int:
        return self.pooler.dim

    def chunk(self, text: str) -> list[Chunk]:
        return self.base.chunk(text)

    def estimate_chunks(self, text_len: int) -> int:
        return self.base.estimate_chunks(text_len)

    def pool(
        self,
        token_embeddings: list[list[float]] | np.ndarray,
        chunks: list[Chunk],
        doc_len: int,
    ) -> list[list[float]]:
        return self.pooler.pool(token_embeddings, chunks, doc_len)

    def pool_with_offsets(
        self,
        token_embeddings: list[list[float]] | np.ndarray,
        token_offsets: list[tuple[int, int]],
        chunks: list[Chunk],
    ) -> list[list[float]]:
        return self.pooler.pool_with_offsets(token_embeddings, token_offsets, chunks)

    @trace_span("chunker.late")
    def chunk_and_pool(
        self,
        text: str,
        token_embeddings: list[list[float]] | np.ndarray,
        token_offsets: list[tuple[int, int]] | None = None,
    ) -> list[LateChunkResult]:
        """Chunk ``text`` and pool an embedding for every chunk.

        Uses exact pooling when ``token_offsets`` is given, otherwise the
        linear approximation over the document's byte length.
        """
        chunks = self.chunk(text)
        if token_offsets is not None:
            embeddings = self.pool_with_offsets(token_embeddings, token_offsets, chunks)
        else:
            embeddings = self.pool(token_embeddings, chunks, len(text.encode("utf-8")))

        logger.debug(f"Pooled {len(chunks)} late-chunking embeddings (dim={self.dim})")
        return [LateChunkResult(c, e) for c, e in zip(chunks, embeddings)]
