"""
Slabs Error Classification.

This module provides the exceptions raised (or logged) by the chunking core.

Error Categories:
-----------------
1. Configuration Errors: raised at construction time, never deferred
   into a chunking call
   - Invalid chunk size (zero or negative)
   - Overlap not smaller than the chunk size
   - Capacity whose max is below its desired size

2. Capability Errors: an optional collaborator is missing or failed
   - Feature unavailable (grammar not installed, no embedder given)
   - Embedding backend failure
   - Syntax tree failure

Splitters absorb capability failures with conservative fallbacks: the code
chunker returns no chunks, the semantic chunker returns the whole document.

Usage:
------
    from slabs.errors import ConfigurationError, OverlapExceedsSizeError

    try:
        chunker = FixedSizeChunker(chunk_size=100, overlap=100)
    except OverlapExceedsSizeError as e:
        logger.error(f"Bad chunker settings: {e}")
"""

from typing import Any


class SlabsError(Exception):
    """
    Base exception for all slabs errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.original_error:
            cause = self.original_error
            parts.append(f"Caused by: {type(cause).__name__}: {cause}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the error for structured log records."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Configuration Errors - raised while building a chunker or capacity
# =============================================================================

class ConfigurationError(SlabsError, ValueError):
    """
    Raised when a component is built with invalid settings.

    Subclasses ValueError so callers validating user input can catch
    either type.
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class InvalidChunkSizeError(ConfigurationError):
    """Raised when a chunk size (or sentence count) is not positive."""

    def __init__(self, size: int):
        super().__init__(f"invalid chunk size: {size} (must be > 0)")
        self.size = size


class OverlapExceedsSizeError(ConfigurationError):
    """Raised when the overlap is not strictly smaller than the chunk size."""

    def __init__(self, size: int, overlap: int):
        super().__init__(f"overlap {overlap} exceeds chunk size {size}")
        self.size = size
        self.overlap = overlap


class CapacityError(ConfigurationError):
    """
    Raised when a capacity's max is below its desired size.

    Capacities are often built from user supplied ranges, so this is a
    recoverable error rather than an assertion.
    """

    def __init__(self, desired: int, max: int):
        super().__init__(f"max ({max}) must be >= desired ({desired})")
        self.desired = desired
        self.max = max


# =============================================================================
# Capability Errors - optional collaborators
# =============================================================================

class FeatureUnavailableError(SlabsError):
    """Raised when an optional capability (grammar, embedder, chunker type) is missing."""

    def __init__(
        self,
        feature: str,
        message: str | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(
            message or f"{feature} is not available",
            details={"feature": feature},
            original_error=original_error,
        )
        self.feature = feature


class EmbeddingError(SlabsError):
    """Raised when an embedding backend fails."""
    pass


class SyntaxTreeError(SlabsError):
    """Raised when source code cannot be turned into a syntax tree."""
    pass


# =============================================================================
# Helper Functions
# =============================================================================

def is_configuration_error(error: Exception) -> bool:
    """
    Check if an error was caused by invalid settings.

    Args:
        error: The exception to check

    Returns:
        True if the error should be fixed by changing configuration
    """
    return isinstance(error, ConfigurationError)
