"""Chunk entity representing one fragment of a document."""

from pydantic import BaseModel, Field, model_validator


class Chunk(BaseModel):
    """A fragment of a document with its byte span and position.

    ``start`` and ``end`` are UTF-8 byte offsets into the original document,
    so ``document.encode("utf-8")[start:end]`` recovers the fragment. The
    semantic chunker is the one exception: it joins sentences with a single
    space, so its text may differ from the raw span.

    Attributes:
        text: The chunk text
        start: Byte offset where the chunk starts (inclusive)
        end: Byte offset where the chunk ends (exclusive)
        index: Zero-based position in emission order
    """

    text: str
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    index: int = Field(..., ge=0)

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_span(self) -> "Chunk":
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")
        return self

    @property
    def byte_length(self) -> int:
        """Length of the chunk text in UTF-8 bytes."""
        return len(self.text.encode("utf-8"))

    @property
    def span(self) -> tuple[int, int]:
        """The ``(start, end)`` byte span in the original document."""
        return (self.start, self.end)

    def is_empty(self) -> bool:
        return not self.text

    def __str__(self) -> str:
        return (
            f"Chunk(index={self.index}, span={self.start}..{self.end}, "
            f"len={self.byte_length})"
        )
