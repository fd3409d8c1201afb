"""Fixed-size chunker implementation."""

from loguru import logger

from ...core.chunk import Chunk
from ...errors import ConfigurationError, InvalidChunkSizeError, OverlapExceedsSizeError
from ...observability import trace_span
from ...utils.boundaries import ceil_char_boundary, decode_span, floor_char_boundary
from ..base import BaseChunker


class FixedSizeChunker(BaseChunker):
    """Chunks text into fixed-size byte windows with optional overlap.

    Windows start every ``chunk_size - overlap`` bytes. Window ends are moved
    back, and window starts forward, to the nearest character boundary, so
    multi-byte characters are never split. With ``overlap=0`` consecutive
    chunks are exactly adjacent.

    Example (chunk_size=10, overlap=3)::

        "abcdefghijklmnopqrstuvwxyz"
        Chunk 0: "abcdefghij"  [0..10]
        Chunk 1: "hijklmnopq"  [7..17]
        Chunk 2: "opqrstuvwx"  [14..24]
        Chunk 3: "vwxyz"       [21..26]

    Attributes:
        chunk_size: Maximum bytes per chunk
        overlap: Bytes shared by consecutive chunks
    """

    def __init__(self, chunk_size: int = 500, overlap: int = 50):
        """Initialize the chunker.

        Args:
            chunk_size: Maximum bytes per chunk
            overlap: Bytes to overlap between chunks

        Raises:
            InvalidChunkSizeError: If chunk_size <= 0
            OverlapExceedsSizeError: If overlap >= chunk_size
            ConfigurationError: If overlap is negative
        """
        if chunk_size <= 0:
            raise InvalidChunkSizeError(chunk_size)
        if overlap < 0:
            raise ConfigurationError(f"overlap must be >= 0, got {overlap}")
        if overlap >= chunk_size:
            raise OverlapExceedsSizeError(chunk_size, overlap)

        self.chunk_size = chunk_size
        self.overlap = overlap

    @classmethod
    def no_overlap(cls, chunk_size: int) -> "FixedSizeChunker":
        """Create a chunker whose chunks tile the document."""
        return cls(chunk_size=chunk_size, overlap=0)

    @property
    def step(self) -> int:
        """Distance between consecutive chunk starts."""
        return self.chunk_size - self.overlap

    @trace_span("chunker.fixed_size")
    def chunk(self, text: str) -> list[Chunk]:
        if not text:
            return []

        data = text.encode("utf-8")
        length = len(data)
        chunks: list[Chunk] = []
        start = 0

        while start < length:
            end = floor_char_boundary(data, min(start + self.chunk_size, length))
            if end <= start:
                # chunk_size is narrower than the character at start
                end = ceil_char_boundary(data, start + 1)

            chunks.append(
                Chunk(
                    text=decode_span(data, start, end),
                    start=start,
                    end=end,
                    index=len(chunks),
                )
            )

            # Never start past the previous end, or a character would be skipped
            next_start = ceil_char_boundary(data, min(start + self.step, end))
            if next_start >= length or next_start <= start:
                break
            start = next_start

        logger.debug(f"Split {length} bytes into {len(chunks)} fixed-size chunks")
        return chunks

    def estimate_chunks(self, text_len: int) -> int:
        if text_len == 0:
            return 0
        return -(-text_len // self.step)
