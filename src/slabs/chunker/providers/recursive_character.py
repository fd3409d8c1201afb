"""Recursive character-based text chunker.

This chunker implements a hierarchical splitting strategy similar to LangChain's
RecursiveCharacterTextSplitter: split on the coarsest separator first and only
fall back to finer separators for fragments that are still too large.

Given separators ``["\\n\\n", "\\n", ". ", " "]`` and ``chunk_size=100``:

1. Split on "\\n\\n" (paragraphs) and greedily merge paragraphs up to 100 bytes
2. Any merged fragment still over 100 bytes is split on "\\n" (lines)
3. Then ". " (sentences), then " " (words)
4. Anything left over 100 bytes is cut at 100-byte character boundaries
"""

from loguru import logger

from ...core.chunk import Chunk
from ...errors import ConfigurationError, InvalidChunkSizeError
from ...observability import trace_span
from ...utils.boundaries import ceil_char_boundary, decode_span, floor_char_boundary
from ..base import BaseChunker

PROSE_SEPARATORS = ["\n\n", "\n", ". ", " "]
MARKDOWN_SEPARATORS = ["\n## ", "\n### ", "\n\n", "\n", ". ", " "]


class RecursiveCharacterChunker(BaseChunker):
    """Recursively chunks text using a hierarchy of separators.

    Separators stay attached to the end of the fragment they terminate, so
    the raw fragments always concatenate back to the original text and
    offsets are computed by walking them in order. An empty separator splits
    into individual characters.

    Overlap is applied afterwards: each chunk's start is pulled back by up to
    ``chunk_overlap`` bytes, never past the start of the previous fragment and
    never so far that the chunk grows beyond ``chunk_size``.

    Attributes:
        chunk_size: Maximum bytes per chunk
        separators: Separators in order of preference, coarsest first
        chunk_overlap: Maximum bytes shared with the previous chunk
    """

    def __init__(
        self,
        chunk_size: int = 500,
        separators: list[str] | None = None,
        chunk_overlap: int = 0,
    ):
        """Initialize the recursive character chunker.

        Args:
            chunk_size: Maximum bytes per chunk
            separators: Custom separator list (prose separators if None)
            chunk_overlap: Bytes of backward overlap per chunk

        Raises:
            InvalidChunkSizeError: If chunk_size <= 0
            ConfigurationError: If separators is empty or overlap is negative
        """
        if chunk_size <= 0:
            raise InvalidChunkSizeError(chunk_size)
        if separators is not None and not separators:
            raise ConfigurationError("separators must not be empty")
        if chunk_overlap < 0:
            raise ConfigurationError(f"chunk_overlap must be >= 0, got {chunk_overlap}")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = list(separators) if separators is not None else list(PROSE_SEPARATORS)
        self._separator_bytes = [s.encode("utf-8") for s in self.separators]

    @classmethod
    def prose(cls, chunk_size: int, chunk_overlap: int = 0) -> "RecursiveCharacterChunker":
        """Paragraph, line, sentence, then word separators."""
        return cls(chunk_size, PROSE_SEPARATORS, chunk_overlap)

    @classmethod
    def markdown(cls, chunk_size: int, chunk_overlap: int = 0) -> "RecursiveCharacterChunker":
        """Section headings first, then the prose separators."""
        return cls(chunk_size, MARKDOWN_SEPARATORS, chunk_overlap)

    @trace_span("chunker.recursive")
    def chunk(self, text: str) -> list[Chunk]:
        if not text:
            return []

        data = text.encode("utf-8")
        spans = self._spans(data)

        chunks = []
        previous_start = 0
        for index, (start, end) in enumerate(spans):
            chunk_start = start
            if self.chunk_overlap:
                chunk_start = max(start - self.chunk_overlap, previous_start)
                if end - chunk_start > self.chunk_size:
                    chunk_start = min(end - self.chunk_size, start)
                chunk_start = ceil_char_boundary(data, chunk_start)
            previous_start = start

            chunks.append(
                Chunk(
                    text=decode_span(data, chunk_start, end),
                    start=chunk_start,
                    end=end,
                    index=index,
                )
            )

        if chunks:
            logger.debug(
                f"Split {len(data)} bytes into {len(chunks)} chunks "
                f"(avg size: {sum(c.end - c.start for c in chunks) / len(chunks):.0f})"
            )
        return chunks

    def split_spans(self, text: str) -> list[tuple[int, int]]:
        """Return the raw fragment byte spans, before overlap is applied.

        The spans tile ``text`` exactly: each starts where the previous ended.
        """
        if not text:
            return []
        return self._spans(text.encode("utf-8"))

    def estimate_chunks(self, text_len: int) -> int:
        step = max(self.chunk_size - self.chunk_overlap, 1)
        return max(text_len // step, 1)

    def _spans(self, data: bytes) -> list[tuple[int, int]]:
        spans = []
        cursor = 0
        for fragment in self._split_recursive(data, 0):
            spans.append((cursor, cursor + len(fragment)))
            cursor += len(fragment)
        return spans

    def _split_recursive(self, fragment: bytes, sep_index: int) -> list[bytes]:
        """Split a fragment with separators[sep_index:] until every piece fits."""
        if len(fragment) <= self.chunk_size:
            return [fragment]
        if sep_index >= len(self._separator_bytes):
            return self._force_split(fragment)

        parts = self._split_by_separator(fragment, self._separator_bytes[sep_index])
        if len(parts) == 1:
            return self._split_recursive(fragment, sep_index + 1)

        result: list[bytes] = []
        current = b""
        for part in parts:
            if not current:
                current = part
            elif len(current) + len(part) <= self.chunk_size:
                current += part
            else:
                result.extend(self._flush(current, sep_index))
                current = part

        if current:
            result.extend(self._flush(current, sep_index))
        return result

    def _flush(self, current: bytes, sep_index: int) -> list[bytes]:
        if len(current) <= self.chunk_size:
            return [current]
        return self._split_recursive(current, sep_index + 1)

    @staticmethod
    def _split_by_separator(fragment: bytes, separator: bytes) -> list[bytes]:
        """Split on a separator, keeping it at the end of each piece."""
        if not separator:
            return [ch.encode("utf-8") for ch in fragment.decode("utf-8")]

        pieces = fragment.split(separator)
        return [piece + separator for piece in pieces[:-1]] + [pieces[-1]]

    def _force_split(self, fragment: bytes) -> list[bytes]:
        """Cut at chunk_size boundaries when no separator helps."""
        result = []
        start = 0
        while start < len(fragment):
            end = floor_char_boundary(fragment, min(start + self.chunk_size, len(fragment)))
            if end <= start:
                # A single character wider than chunk_size
                end = ceil_char_boundary(fragment, start + 1)
            result.append(fragment[start:end])
            start = end
        return result
