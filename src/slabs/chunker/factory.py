"""Name-based construction of chunkers, used by the config layer."""

from typing import Any

from loguru import logger

from ..errors import FeatureUnavailableError
from .base import BaseChunker
from .providers.code import CodeChunker
from .providers.fixed_size import FixedSizeChunker
from .providers.model import ModelChunker
from .providers.recursive_character import RecursiveCharacterChunker
from .providers.semantic import SemanticChunker
from .providers.sentence import SentenceChunker


class ChunkerFactory:
    """Registry mapping strategy names to chunker classes.

    ``semantic`` and ``model`` need a live embedder or predictor passed in
    ``params``; the rest are built from plain numbers and strings, so they
    can come straight from a config file.
    """

    _registry: dict[str, type[BaseChunker]] = {
        "fixed_size": FixedSizeChunker,
        "sentence": SentenceChunker,
        "recursive": RecursiveCharacterChunker,
        "code": CodeChunker,
        "semantic": SemanticChunker,
        "model": ModelChunker,
    }

    @classmethod
    def create(cls, chunker_type: str, **params: Any) -> BaseChunker:
        """Build the chunker registered under ``chunker_type``.

        ``params`` go to the class constructor unchanged, so its own
        validation errors (``InvalidChunkSizeError`` and friends) propagate.

        Raises:
            FeatureUnavailableError: If nothing is registered under that name
        """
        chunker_class = cls._registry.get(chunker_type)
        if chunker_class is None:
            known = ", ".join(cls._registry)
            raise FeatureUnavailableError(
                f"chunker type '{chunker_type}'",
                f"Unknown chunker type: '{chunker_type}'. Available types: {known}",
            )

        logger.debug(f"Building '{chunker_type}' chunker ({chunker_class.__name__}) from {params}")
        return chunker_class(**params)

    @classmethod
    def register(cls, chunker_type: str, chunker_class: type[BaseChunker]):
        """Add or replace a strategy; raises TypeError for non-chunker classes."""
        if not isinstance(chunker_class, type) or not issubclass(chunker_class, BaseChunker):
            name = getattr(chunker_class, "__name__", repr(chunker_class))
            raise TypeError(f"{name} must be a subclass of BaseChunker")

        cls._registry[chunker_type] = chunker_class
        logger.info(f"Chunker type '{chunker_type}' now maps to {chunker_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        return list(cls._registry)
