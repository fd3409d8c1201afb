"""Utility functions for slabs."""

from .boundaries import (
    ceil_char_boundary,
    decode_span,
    floor_char_boundary,
    is_char_boundary,
    trimmed_span,
)
from .performance import timed, timer
from .similarity import cosine_similarity

__all__ = [
    "ceil_char_boundary",
    "cosine_similarity",
    "decode_span",
    "floor_char_boundary",
    "is_char_boundary",
    "timed",
    "timer",
    "trimmed_span",
]
