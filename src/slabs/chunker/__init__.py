"""Chunker module for text splitting.

This module provides the chunking contract, its implementations, the
late-chunking pooler and a factory for creating chunkers by name.
"""

from .base import BaseChunker
from .factory import ChunkerFactory
from .late import LateChunker, LateChunkingPooler, LateChunkResult
from .providers import (
    CodeChunker,
    FixedSizeChunker,
    ModelChunker,
    RecursiveCharacterChunker,
    SemanticChunker,
    SentenceChunker,
)

__all__ = [
    "BaseChunker",
    "ChunkerFactory",
    "CodeChunker",
    "FixedSizeChunker",
    "LateChunker",
    "LateChunkingPooler",
    "LateChunkResult",
    "ModelChunker",
    "RecursiveCharacterChunker",
    "SemanticChunker",
    "SentenceChunker",
]
