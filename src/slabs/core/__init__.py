"""Core data entities for slabs."""

from .capacity import ChunkCapacity, Fit
from .chunk import Chunk

__all__ = ["Chunk", "ChunkCapacity", "Fit"]
