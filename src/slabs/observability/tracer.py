"""
Span tracing for chunking calls.

``init_tracer`` installs an OpenTelemetry ``TracerProvider`` private to this
package (the process-wide provider is left alone, so host applications keep
their own). Spans can be printed to stderr or appended to a file; a caller
wanting another backend attaches its own span processor through
``get_tracer_provider``.

Before ``init_tracer`` and after ``shutdown_tracer`` the decorators skip span
creation entirely.
"""

from pathlib import Path
from typing import TextIO

from loguru import logger
from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

_provider: TracerProvider | None = None
_active_tracer: trace.Tracer | None = None
_span_file: TextIO | None = None


def is_tracing_enabled() -> bool:
    return _active_tracer is not None


def init_tracer(
    service_name: str = "slabs",
    enable_console_export: bool = False,
    log_file: str | None = None,
) -> bool:
    """
    Install the package tracer, replacing any earlier one.

    Args:
        service_name: ``service.name`` resource attribute on every span.
        enable_console_export: Print finished spans to stderr.
        log_file: Append finished spans to this file instead; parent
            directories are created.

    Returns:
        True once spans are being recorded.
    """
    global _provider, _active_tracer, _span_file

    if _provider is not None:
        shutdown_tracer()

    _provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _span_file = path.open("a", encoding="utf-8")
        _provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=_span_file)))
        logger.info(f"Writing chunking spans to {path}")
    elif enable_console_export:
        _provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
        logger.info("Writing chunking spans to stderr")

    _active_tracer = _provider.get_tracer("slabs")
    logger.info(f"Tracing enabled for service '{service_name}'")
    return True


def get_tracer_provider() -> TracerProvider | None:
    """The provider installed by ``init_tracer``, or None."""
    return _provider


def get_tracer() -> trace.Tracer:
    """The package tracer, falling back to OpenTelemetry's global one."""
    return _active_tracer or trace.get_tracer("slabs")


def shutdown_tracer():
    """Flush pending spans and disable tracing. Safe to call repeatedly."""
    global _provider, _active_tracer, _span_file

    provider, _provider, _active_tracer = _provider, None, None
    if provider is not None:
        provider.shutdown()
        logger.info("Tracing disabled")

    if _span_file is not None:
        _span_file.close()
        _span_file = None
