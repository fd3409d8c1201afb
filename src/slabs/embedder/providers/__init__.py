from .mock import MockEmbedder

__all__ = ["MockEmbedder"]
