"""
slabs - Text chunking for retrieval pipelines.

This package splits documents into bounded, byte-addressable chunks with
pluggable strategies (fixed windows, sentences, recursive separators, syntax
trees, embedding similarity) and pools late-chunking embeddings.
"""

__version__ = "0.1.0"

# Chunkers
from .chunker import (
    BaseChunker,
    ChunkerFactory,
    CodeChunker,
    FixedSizeChunker,
    LateChunker,
    LateChunkingPooler,
    LateChunkResult,
    ModelChunker,
    RecursiveCharacterChunker,
    SemanticChunker,
    SentenceChunker,
)

# Configuration
from .config import ChunkingConfig, ComponentConfig, ComponentFactory

# Core entities
from .core import Chunk, ChunkCapacity, Fit

# Collaborators
from .embedder import BaseEmbedder, BaseSplitPredictor, MockEmbedder
from .errors import (
    CapacityError,
    ConfigurationError,
    EmbeddingError,
    FeatureUnavailableError,
    InvalidChunkSizeError,
    OverlapExceedsSizeError,
    SlabsError,
    SyntaxTreeError,
)
from .segmentation import BaseSegmenter, SentenceSpan, UnicodeSentenceSegmenter
from .syntax import BaseSyntaxProvider, CodeLanguage, TreeSitterSyntaxProvider

__all__ = [
    # Version
    "__version__",
    # Core
    "Chunk",
    "ChunkCapacity",
    "Fit",
    # Chunkers
    "BaseChunker",
    "FixedSizeChunker",
    "SentenceChunker",
    "RecursiveCharacterChunker",
    "CodeChunker",
    "SemanticChunker",
    "ModelChunker",
    "ChunkerFactory",
    # Late chunking
    "LateChunker",
    "LateChunkingPooler",
    "LateChunkResult",
    # Collaborators
    "BaseEmbedder",
    "BaseSplitPredictor",
    "MockEmbedder",
    "BaseSegmenter",
    "SentenceSpan",
    "UnicodeSentenceSegmenter",
    "BaseSyntaxProvider",
    "CodeLanguage",
    "TreeSitterSyntaxProvider",
    # Config
    "ChunkingConfig",
    "ComponentConfig",
    "ComponentFactory",
    # Errors
    "SlabsError",
    "ConfigurationError",
    "InvalidChunkSizeError",
    "OverlapExceedsSizeError",
    "CapacityError",
    "FeatureUnavailableError",
    "EmbeddingError",
    "SyntaxTreeError",
]
