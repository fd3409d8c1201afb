"""Deterministic hash-seeded embedder for tests and offline runs."""

import hashlib

import numpy as np
from loguru import logger

from ..base import BaseEmbedder


class MockEmbedder(BaseEmbedder):
    """Maps each text to a reproducible random unit vector.

    The vector is drawn from a normal distribution seeded by a SHA-256
    digest of ``seed`` and the text, so the same text always lands on the
    same point and different texts are nearly orthogonal. Useful for
    exercising the semantic chunker without a model; the similarities carry
    no meaning.

    Attributes:
        seed: Mixed into every digest; changing it changes every vector
    """

    def __init__(self, dimension: int = 384, seed: int = 42):
        self._dimension = dimension
        self.seed = seed
        logger.warning("MockEmbedder produces meaningless vectors; do not use it for real documents")

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed(self, texts: list[str]) -> list[list[float]]:
        logger.debug(f"Hashing {len(texts)} texts into {self._dimension}-d mock vectors")
        return [self._vector_for(text) for text in texts]

    def _vector_for(self, text: str) -> list[float]:
        digest = hashlib.sha256(f"{self.seed}:{text}".encode("utf-8")).digest()
        rng = np.random.default_rng(int.from_bytes(digest[:8], "big"))
        vec = rng.standard_normal(self._dimension)

        norm = np.linalg.norm(vec)
        if norm == 0:
            return [0.0] * self._dimension
        return (vec / norm).tolist()
