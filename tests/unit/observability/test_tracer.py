"""Tests for tracer setup and teardown."""

from slabs.observability import (
    get_tracer,
    get_tracer_provider,
    init_tracer,
    is_tracing_enabled,
    shutdown_tracer,
    trace_span,
)


def test_disabled_until_initialized():
    assert is_tracing_enabled() is False
    assert get_tracer_provider() is None


def test_global_tracer_usable_when_disabled():
    with get_tracer().start_as_current_span("noop") as span:
        span.set_attribute("key", "value")


def test_init_then_shutdown():
    assert init_tracer(service_name="slabs-test") is True
    assert is_tracing_enabled() is True
    assert get_tracer_provider() is not None

    shutdown_tracer()
    assert is_tracing_enabled() is False
    assert get_tracer_provider() is None

    # second shutdown is a no-op
    shutdown_tracer()


def test_reinit_replaces_provider():
    init_tracer(service_name="first")
    first = get_tracer_provider()
    init_tracer(service_name="second")

    assert get_tracer_provider() is not first
    assert get_tracer_provider().resource.attributes["service.name"] == "second"


def test_spans_appended_to_file(tmp_path):
    log_file = tmp_path / "traces" / "spans.jsonl"
    init_tracer(service_name="slabs-test", log_file=str(log_file))

    @trace_span("chunker.test")
    def traced():
        return 1

    traced()
    shutdown_tracer()

    assert "chunker.test" in log_file.read_text(encoding="utf-8")
