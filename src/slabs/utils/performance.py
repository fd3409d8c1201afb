"""Timing helpers for chunking calls.

Only two things in the package are slow enough to watch: parsing a syntax
tree and the embedder round-trip of the semantic chunker. Both are logged
through loguru, never collected.
"""

import time
from collections.abc import Callable
from contextlib import contextmanager
from functools import wraps
from typing import Any

from loguru import logger

SLOW_CALL_MS = 1000


def _since(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@contextmanager
def timer(operation: str, log_level: str = "DEBUG", threshold_ms: float = 0):
    """Log how long the enclosed block took, failures included.

    Args:
        operation: Label used in the log line
        log_level: Loguru level name, case-insensitive
        threshold_ms: Blocks faster than this are not logged

    Example:
        >>> with timer("Parsing python source"):
        ...     root = provider.parse(language, source)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = _since(start)
        if elapsed_ms >= threshold_ms:
            logger.log(log_level.upper(), f"{operation} took {elapsed_ms:.2f}ms")


def timed(operation: str | None = None, threshold_ms: float = 100):
    """Decorator form of ``timer`` that escalates to INFO past one second.

    The label defaults to ``module.function``.
    """
    def decorator(func: Callable) -> Callable:
        label = operation or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed_ms = _since(start)
                if elapsed_ms > SLOW_CALL_MS:
                    logger.info(f"{label} took {elapsed_ms / 1000:.2f}s")
                elif elapsed_ms >= threshold_ms:
                    logger.debug(f"{label} took {elapsed_ms:.2f}ms")

        return wrapper
    return decorator
