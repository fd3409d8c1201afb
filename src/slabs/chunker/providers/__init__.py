"""Provider implementations for chunkers."""

from .code import CodeChunker
from .fixed_size import FixedSizeChunker
from .model import ModelChunker
from .recursive_character import (
    MARKDOWN_SEPARATORS,
    PROSE_SEPARATORS,
    RecursiveCharacterChunker,
)
from .semantic import SemanticChunker
from .sentence import SentenceChunker

__all__ = [
    "CodeChunker",
    "FixedSizeChunker",
    "ModelChunker",
    "RecursiveCharacterChunker",
    "SemanticChunker",
    "SentenceChunker",
    "PROSE_SEPARATORS",
    "MARKDOWN_SEPARATORS",
]
