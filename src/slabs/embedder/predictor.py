"""Split prediction interface for model-based chunking."""

from abc import ABC, abstractmethod


class BaseSplitPredictor(ABC):
    """A model that proposes chunk boundaries.

    Backends are typically token-classification models that tag the token
    where a new segment begins.
    """

    @abstractmethod
    def predict_splits(self, text: str) -> list[int]:
        """Predict split points for ``text``.

        Returns:
            Ordered UTF-8 byte offsets where a new chunk should start.
            Consumers ignore offsets that do not increase or fall outside
            the document.
        """
        pass
