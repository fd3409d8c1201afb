"""Sentence-based chunker implementation."""

from loguru import logger

from ...core.chunk import Chunk
from ...errors import InvalidChunkSizeError
from ...observability import trace_span
from ...segmentation.base import BaseSegmenter
from ...segmentation.providers.unicode import UnicodeSentenceSegmenter
from ...utils.boundaries import decode_span, trimmed_span
from ..base import BaseChunker


class SentenceChunker(BaseChunker):
    """Groups a fixed number of consecutive sentences into each chunk.

    Sentence boundaries come from the segmenter; this chunker applies no
    abbreviation heuristics of its own. Whitespace-only sentences are
    dropped, and each chunk's span is shrunk to exclude the whitespace
    around its sentences.

    Typical settings are 3-5 sentences for dense technical text and 5-10
    for narrative prose.

    Attributes:
        sentences_per_chunk: Number of sentences grouped per chunk
        segmenter: Sentence boundary detector
    """

    def __init__(
        self,
        sentences_per_chunk: int = 3,
        segmenter: BaseSegmenter | None = None,
    ):
        """Initialize the chunker.

        Args:
            sentences_per_chunk: Sentences per chunk
            segmenter: Sentence segmenter (defaults to UAX #29 rules)

        Raises:
            InvalidChunkSizeError: If sentences_per_chunk <= 0
        """
        if sentences_per_chunk <= 0:
            raise InvalidChunkSizeError(sentences_per_chunk)

        self.sentences_per_chunk = sentences_per_chunk
        self.segmenter = segmenter or UnicodeSentenceSegmenter()

    @classmethod
    def single(cls, segmenter: BaseSegmenter | None = None) -> "SentenceChunker":
        """Create a chunker that emits one sentence per chunk."""
        return cls(sentences_per_chunk=1, segmenter=segmenter)

    @trace_span("chunker.sentence")
    def chunk(self, text: str) -> list[Chunk]:
        if not text:
            return []

        data = text.encode("utf-8")
        sentences = [s for s in self.segmenter.segment(text) if s.text.strip()]

        chunks: list[Chunk] = []
        for i in range(0, len(sentences), self.sentences_per_chunk):
            window = sentences[i : i + self.sentences_per_chunk]
            start, end = trimmed_span(data, window[0].start, window[-1].end)
            if end <= start:
                continue

            chunks.append(
                Chunk(
                    text=decode_span(data, start, end),
                    start=start,
                    end=end,
                    index=len(chunks),
                )
            )

        logger.debug(
            f"Grouped {len(sentences)} sentences into {len(chunks)} chunks "
            f"({self.sentences_per_chunk} per chunk)"
        )
        return chunks

    def estimate_chunks(self, text_len: int) -> int:
        # Roughly 100 bytes per sentence
        return max((text_len // 100) // self.sentences_per_chunk, 1)
