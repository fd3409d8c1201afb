"""Embedding and split-prediction services consumed by the chunkers.

Real backends live outside this package; ``MockEmbedder`` exists for tests
and demos.
"""

from .base import BaseEmbedder
from .predictor import BaseSplitPredictor
from .providers.mock import MockEmbedder

__all__ = ["BaseEmbedder", "BaseSplitPredictor", "MockEmbedder"]
