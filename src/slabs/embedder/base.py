"""Embedding interface consumed by the semantic chunker."""

from abc import ABC, abstractmethod


class BaseEmbedder(ABC):
    """Turns sentences into vectors.

    The semantic chunker calls ``embed`` once per document with every
    sentence in order. Model loading, batching and connections are the
    implementation's business; the chunker never closes or retries it.
    """

    @abstractmethod
    def embed(self, texts: list[str]) -> list[list[float]]:
        """Return one vector per text, in input order.

        Any exception raised here makes the semantic chunker fall back to a
        single chunk; raising ``EmbeddingError`` keeps the log message clear.
        """
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Length of every vector returned by ``embed``."""
        pass
