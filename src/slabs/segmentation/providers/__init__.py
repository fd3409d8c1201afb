from .unicode import UnicodeSentenceSegmenter

__all__ = ["UnicodeSentenceSegmenter"]
