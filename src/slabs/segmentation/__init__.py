"""Sentence segmentation used by the sentence and semantic chunkers."""

from .base import BaseSegmenter, SentenceSpan
from .providers.unicode import UnicodeSentenceSegmenter

__all__ = ["BaseSegmenter", "SentenceSpan", "UnicodeSentenceSegmenter"]
