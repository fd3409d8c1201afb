"""Semantic chunker that splits where adjacent sentences stop being similar.

Adjacent sentences about the same topic have similar embeddings; when the
topic shifts the similarity drops. A split is placed before sentence ``i``
when ``similarity(i-1, i) < threshold`` and at least ``min_chunk_sentences``
sentences have passed since the previous split::

    Similarities: [0.9, 0.8, 0.3, 0.85, 0.7]
                             ^ topic shift
    Chunks: [S1, S2, S3] | [S4, S5, S6]

Lower thresholds split less often (0.3 only on sharp shifts), higher ones
more often (0.7 on mild shifts); 0.5 is a reasonable start.
"""

from loguru import logger

from ...core.chunk import Chunk
from ...embedder.base import BaseEmbedder
from ...errors import ConfigurationError, EmbeddingError, FeatureUnavailableError
from ...observability import trace_span
from ...segmentation.base import BaseSegmenter, SentenceSpan
from ...segmentation.providers.unicode import UnicodeSentenceSegmenter
from ...utils.boundaries import decode_span, trimmed_span
from ...utils.performance import timed
from ...utils.similarity import cosine_similarity
from ..base import BaseChunker


class SemanticChunker(BaseChunker):
    """Chunks text at semantic boundaries using embedding similarity.

    All sentences are embedded in a single ``embed`` call. If that call
    fails the whole document is returned as one chunk; the embedder is never
    retried.

    Chunk text is the group's sentences joined by one space, so it can
    differ from the source slice ``[start, end)`` when sentences were
    separated by other whitespace.

    Attributes:
        embedder: Embedding service owned by the caller
        threshold: Similarity below which a split may occur
        min_chunk_sentences: Minimum sentences between two splits
        segmenter: Sentence boundary detector
    """

    def __init__(
        self,
        embedder: BaseEmbedder | None,
        threshold: float = 0.5,
        min_chunk_sentences: int = 2,
        segmenter: BaseSegmenter | None = None,
    ):
        """Initialize the semantic chunker.

        Args:
            embedder: Embedder used for sentence vectors
            threshold: Similarity threshold in [0, 1]
            min_chunk_sentences: Minimum sentences per chunk (>= 1)
            segmenter: Sentence segmenter (defaults to UAX #29 rules)

        Raises:
            FeatureUnavailableError: If no embedder is given
            ConfigurationError: If threshold or min_chunk_sentences is out of range
        """
        if embedder is None:
            raise FeatureUnavailableError(
                "semantic chunking", "semantic chunking requires an embedder"
            )
        if not 0.0 <= threshold <= 1.0:
            raise ConfigurationError(f"threshold must be in [0, 1], got {threshold}")
        if min_chunk_sentences < 1:
            raise ConfigurationError(
                f"min_chunk_sentences must be >= 1, got {min_chunk_sentences}"
            )

        self.embedder = embedder
        self.threshold = threshold
        self.min_chunk_sentences = min_chunk_sentences
        self.segmenter = segmenter or UnicodeSentenceSegmenter()

    def with_min_sentences(self, min_chunk_sentences: int) -> "SemanticChunker":
        """Return a copy requiring at least ``min_chunk_sentences`` per chunk."""
        return SemanticChunker(
            self.embedder, self.threshold, min_chunk_sentences, self.segmenter
        )

    @trace_span("chunker.semantic")
    def chunk(self, text: str) -> list[Chunk]:
        if not text:
            return []

        data = text.encode("utf-8")
        sentences = self._extract_sentences(data, self.segmenter.segment(text))
        if not sentences:
            return []

        try:
            embeddings = self._embed([s.text for s in sentences])
        except Exception as e:
            error = e if isinstance(e, EmbeddingError) else EmbeddingError(
                "sentence embedding failed", original_error=e
            )
            logger.warning(f"Semantic chunking fell back to a single chunk: {error}")
            start, end = trimmed_span(data, 0, len(data))
            return [Chunk(text=decode_span(data, start, end), start=start, end=end, index=0)]

        split_points = self._find_split_points(embeddings)

        chunks = []
        bounds = [0, *split_points, len(sentences)]
        for group_start, group_end in zip(bounds, bounds[1:]):
            group = sentences[group_start:group_end]
            chunks.append(
                Chunk(
                    text=" ".join(s.text for s in group),
                    start=group[0].start,
                    end=group[-1].end,
                    index=len(chunks),
                )
            )

        logger.debug(
            f"Split {len(sentences)} sentences into {len(chunks)} semantic chunks "
            f"(threshold={self.threshold})"
        )
        return chunks

    def estimate_chunks(self, text_len: int) -> int:
        return max(text_len // 1000, 1)

    @staticmethod
    def _extract_sentences(data: bytes, spans: list[SentenceSpan]) -> list[SentenceSpan]:
        """Trim every sentence and drop the whitespace-only ones."""
        sentences = []
        for span in spans:
            start, end = trimmed_span(data, span.start, span.end)
            if end > start:
                sentences.append(SentenceSpan(start, end, decode_span(data, start, end)))
        return sentences

    @timed("Sentence embedding", threshold_ms=50)
    def _embed(self, texts: list[str]) -> list[list[float]]:
        embeddings = self.embedder.embed(texts)
        if len(embeddings) != len(texts):
            raise EmbeddingError(
                f"embedder returned {len(embeddings)} vectors for {len(texts)} sentences"
            )
        dimensions = {len(vector) for vector in embeddings}
        if len(dimensions) > 1 or 0 in dimensions:
            raise EmbeddingError(
                f"embedder returned vectors of inconsistent or zero length: {sorted(dimensions)}"
            )
        return embeddings

    def _find_split_points(self, embeddings: list[list[float]]) -> list[int]:
        """Indices of the sentences that start a new chunk."""
        split_points: list[int] = []
        last_split = 0
        for i in range(1, len(embeddings)):
            similarity = cosine_similarity(embeddings[i - 1], embeddings[i])
            if similarity < self.threshold and i - last_split >= self.min_chunk_sentences:
                split_points.append(i)
                last_split = i
        return split_points
