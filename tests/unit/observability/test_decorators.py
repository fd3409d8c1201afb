"""Tests for the trace_span decorator."""

import pytest
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from slabs.chunker import FixedSizeChunker
from slabs.observability import get_tracer_provider, init_tracer
from slabs.observability.decorators import _is_coroutine_function, trace_span


@pytest.fixture
def exported_spans():
    """Install a tracer and collect finished spans in memory."""
    init_tracer(service_name="slabs-test")
    exporter = InMemorySpanExporter()
    get_tracer_provider().add_span_processor(SimpleSpanProcessor(exporter))
    return exporter


class TestWithoutTracer:
    def test_sync_passthrough(self):
        @trace_span("add")
        def add(x, y):
            return x + y

        assert add(1, 2) == 3

    @pytest.mark.asyncio
    async def test_async_passthrough(self):
        @trace_span("double")
        async def double(x):
            return x * 2

        assert await double(5) == 10

    def test_metadata_kept(self):
        @trace_span()
        def documented():
            """Docs."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docs."

    def test_errors_propagate(self):
        @trace_span("boom")
        def boom():
            raise ValueError("kaput")

        with pytest.raises(ValueError, match="kaput"):
            boom()


class TestWithTracer:
    def test_span_name_defaults_to_qualname(self, exported_spans):
        @trace_span()
        def unnamed():
            return None

        unnamed()

        (span,) = exported_spans.get_finished_spans()
        assert span.name.endswith("unnamed")

    def test_static_attributes(self, exported_spans):
        @trace_span("labelled", attributes={"component": "test"})
        def labelled():
            return "ok"

        assert labelled() == "ok"
        (span,) = exported_spans.get_finished_spans()
        assert span.attributes["component"] == "test"

    def test_chunker_span_records_sizes(self, exported_spans):
        chunks = FixedSizeChunker(4, 0).chunk("héllo world")

        (span,) = exported_spans.get_finished_spans()
        assert span.name == "chunker.fixed_size"
        assert span.attributes["slabs.input.bytes"] == 12
        assert span.attributes["slabs.output.count"] == len(chunks)

    def test_failure_sets_error_status(self, exported_spans):
        @trace_span("failing")
        def failing():
            raise RuntimeError("broken")

        with pytest.raises(RuntimeError):
            failing()

        (span,) = exported_spans.get_finished_spans()
        assert span.status.status_code == StatusCode.ERROR
        assert any(event.name == "exception" for event in span.events)

    def test_failure_not_recorded_when_disabled(self, exported_spans):
        @trace_span("quiet", record_exception=False)
        def quiet():
            raise RuntimeError("broken")

        with pytest.raises(RuntimeError):
            quiet()

        (span,) = exported_spans.get_finished_spans()
        assert span.status.status_code != StatusCode.ERROR
        assert not span.events

    @pytest.mark.asyncio
    async def test_async_failure(self, exported_spans):
        @trace_span("async_failing")
        async def async_failing():
            raise ValueError("async kaput")

        with pytest.raises(ValueError, match="async kaput"):
            await async_failing()

        (span,) = exported_spans.get_finished_spans()
        assert span.name == "async_failing"
        assert span.status.status_code == StatusCode.ERROR


def test_coroutine_detection():
    async def coroutine():
        pass

    def plain():
        pass

    assert _is_coroutine_function(coroutine) is True
    assert _is_coroutine_function(plain) is False
