"""
Tracing Decorators

Wraps chunking calls in OpenTelemetry spans. Besides the static attributes
given to the decorator, each span records the size of the document passed in
(``slabs.input.bytes``, taken from the first ``str`` argument) and the number
of items returned (``slabs.output.count``, when the call returns a list).
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any

from opentelemetry.trace import Span, Status, StatusCode

from slabs.observability.tracer import get_tracer, is_tracing_enabled

INPUT_BYTES_ATTRIBUTE = "slabs.input.bytes"
OUTPUT_COUNT_ATTRIBUTE = "slabs.output.count"


def trace_span(
    name: str | None = None,
    attributes: dict[str, Any] | None = None,
    record_exception: bool = True,
):
    """
    Decorator to trace a function execution as an OpenTelemetry span.

    Does nothing until ``init_tracer`` has been called.

    Args:
        name: Span name. Defaults to the function's qualified name.
        attributes: Static attributes to add to the span.
        record_exception: If True, record exceptions in the span.

    Example:
        @trace_span("chunker.fixed_size", attributes={"component": "chunker"})
        def chunk(self, text):
            ...
    """
    def decorator(func: Callable) -> Callable:
        span_name = name or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not is_tracing_enabled():
                return func(*args, **kwargs)

            with _start_span(span_name) as span:
                _set_input_attributes(span, attributes, args)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    _record_failure(span, e, record_exception)
                    raise
                _set_output_attributes(span, result)
                return result

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            if not is_tracing_enabled():
                return await func(*args, **kwargs)

            with _start_span(span_name) as span:
                _set_input_attributes(span, attributes, args)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _record_failure(span, e, record_exception)
                    raise
                _set_output_attributes(span, result)
                return result

        if _is_coroutine_function(func):
            return async_wrapper
        return wrapper

    return decorator


def _start_span(span_name: str):
    # Failures are recorded by _record_failure, honoring record_exception
    return get_tracer().start_as_current_span(
        span_name, record_exception=False, set_status_on_exception=False
    )


def _set_input_attributes(span: Span, attributes: dict[str, Any] | None, args: tuple) -> None:
    if attributes:
        for key, value in attributes.items():
            span.set_attribute(key, value)

    text = next((arg for arg in args if isinstance(arg, str)), None)
    if text is not None:
        span.set_attribute(INPUT_BYTES_ATTRIBUTE, len(text.encode("utf-8")))


def _set_output_attributes(span: Span, result: Any) -> None:
    if isinstance(result, list):
        span.set_attribute(OUTPUT_COUNT_ATTRIBUTE, len(result))


def _record_failure(span: Span, error: Exception, record_exception: bool) -> None:
    if record_exception:
        span.record_exception(error)
        span.set_status(Status(StatusCode.ERROR, str(error)))


def _is_coroutine_function(func: Callable) -> bool:
    """Check if a function is a coroutine function."""
    return inspect.iscoroutinefunction(func)
