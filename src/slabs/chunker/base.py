"""Base chunker interface."""

from abc import ABC, abstractmethod

from ..core.chunk import Chunk


class BaseChunker(ABC):
    """Abstract base class for text chunking.

    Chunkers split one document into ordered ``Chunk`` records whose
    offsets are UTF-8 byte offsets into that document. Implementations hold
    only their configuration, so one instance may chunk many documents
    concurrently.
    """

    @abstractmethod
    def chunk(self, text: str) -> list[Chunk]:
        """Split text into chunks.

        Args:
            text: Document to split

        Returns:
            Chunks in document order, indexed from zero
        """
        pass

    def estimate_chunks(self, text_len: int) -> int:
        """Estimate the number of chunks for a document of ``text_len`` bytes.

        Only meant for pre-sizing; may be approximate.
        """
        return max(text_len // 500, 1)
