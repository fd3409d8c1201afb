"""Base sentence segmenter interface."""

from abc import ABC, abstractmethod
from typing import NamedTuple


class SentenceSpan(NamedTuple):
    """One sentence with its UTF-8 byte span in the source text.

    Spans produced by a segmenter tile the text: each span starts where the
    previous one ended and trailing whitespace belongs to the sentence.
    """

    start: int
    end: int
    text: str


class BaseSegmenter(ABC):
    """Abstract base class for sentence boundary detection."""

    @abstractmethod
    def segment(self, text: str) -> list[SentenceSpan]:
        """Split text into ordered sentence spans.

        Args:
            text: Text to segment

        Returns:
            Sentence spans in document order (empty for empty text)
        """
        pass
