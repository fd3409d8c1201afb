"""Model-based chunker driven by predicted split points."""

from loguru import logger

from ...core.chunk import Chunk
from ...embedder.predictor import BaseSplitPredictor
from ...errors import FeatureUnavailableError
from ...observability import trace_span
from ...utils.boundaries import decode_span, floor_char_boundary
from ..base import BaseChunker


class ModelChunker(BaseChunker):
    """Splits text wherever a prediction model says a new segment begins.

    The predictor returns byte offsets. Each one is moved back to the
    nearest character boundary; offsets that do not advance past the
    previous cut, or that reach the end of the document, are ignored. The
    text after the last accepted cut becomes the final chunk, so the chunks
    always tile the document.

    Attributes:
        predictor: Split-prediction service owned by the caller
    """

    def __init__(self, predictor: BaseSplitPredictor | None):
        if predictor is None:
            raise FeatureUnavailableError(
                "model chunking", "model chunking requires a split predictor"
            )
        self.predictor = predictor

    @trace_span("chunker.model")
    def chunk(self, text: str) -> list[Chunk]:
        if not text:
            return []

        data = text.encode("utf-8")
        cuts = self.predictor.predict_splits(text)

        chunks: list[Chunk] = []
        start = 0
        for cut in cuts:
            cut = floor_char_boundary(data, cut)
            if cut <= start or cut >= len(data):
                continue
            chunks.append(self._make_chunk(data, start, cut, len(chunks)))
            start = cut

        chunks.append(self._make_chunk(data, start, len(data), len(chunks)))

        ignored = len(cuts) - (len(chunks) - 1)
        if ignored:
            logger.debug(f"Ignored {ignored} out-of-order or out-of-range split points")
        return chunks

    @staticmethod
    def _make_chunk(data: bytes, start: int, end: int, index: int) -> Chunk:
        return Chunk(text=decode_span(data, start, end), start=start, end=end, index=index)
