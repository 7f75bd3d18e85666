"""Tests for DebugSpanExporter."""

import threading

from opentelemetry.sdk.trace.export import SpanExportResult
from opentelemetry.trace import format_span_id, format_trace_id

from agenttrace.models.tracing import EVENT_ID
from agenttrace.telemetry import is_debug_span


def emit(tracer, name: str, attributes: dict):
    span = tracer.start_span(name, attributes=attributes)
    span.end()
    return span


class TestSpanFiltering:
    """Tests for which spans are stored."""

    def test_debug_span_names(self):
        """Test exact names and the execute_tool prefix."""
        assert is_debug_span("call_llm")
        assert is_debug_span("send_data")
        assert is_debug_span("execute_tool")
        assert is_debug_span("execute_tool get_weather")
        assert not is_debug_span("call_llm_stream")
        assert not is_debug_span("invocation")
        assert not is_debug_span("agent_run [weather_agent]")

    def test_only_matching_spans_are_stored(self, tracer, debug_exporter):
        """Test that other span names never create entries."""
        emit(tracer, "call_llm", {EVENT_ID: "e-llm"})
        emit(tracer, "send_data", {EVENT_ID: "e-send"})
        emit(tracer, "execute_tool_search", {EVENT_ID: "e-tool"})
        emit(tracer, "invocation", {EVENT_ID: "e-inv"})
        emit(tracer, "agent_run", {EVENT_ID: "e-run"})

        assert set(debug_exporter.get_trace_dict()) == {"e-llm", "e-send", "e-tool"}

    def test_spans_without_event_id_are_skipped(self, tracer, debug_exporter):
        """Test that a matching span with no event id is not stored."""
        emit(tracer, "call_llm", {"gen_ai.request.model": "m"})

        assert debug_exporter.get_trace_dict() == {}


class TestStoredAttributes:
    """Tests for the stored attribute maps."""

    def test_stores_attributes_with_ids(self, tracer, debug_exporter):
        """Test execute_tool_search with {event_id: e1, foo: bar}."""
        span = emit(tracer, "execute_tool_search", {EVENT_ID: "e1", "foo": "bar"})
        ctx = span.get_span_context()

        assert debug_exporter.get("e1") == {
            EVENT_ID: "e1",
            "foo": "bar",
            "trace_id": format_trace_id(ctx.trace_id),
            "span_id": format_span_id(ctx.span_id),
        }

    def test_ids_are_hex(self, tracer, debug_exporter):
        """Test trace and span id formatting."""
        emit(tracer, "call_llm", {EVENT_ID: "e1"})

        stored = debug_exporter.get("e1")
        assert len(stored["trace_id"]) == 32
        assert len(stored["span_id"]) == 16
        int(stored["trace_id"], 16)
        int(stored["span_id"], 16)

    def test_values_are_stringified(self, tracer, debug_exporter):
        """Test that non-string attributes are stored as strings."""
        emit(
            tracer,
            "call_llm",
            {
                EVENT_ID: "e1",
                "gen_ai.request.top_p": 0.5,
                "gen_ai.request.max_tokens": 256,
                "streaming": True,
                "stop": ["a", "b"],
            },
        )

        stored = debug_exporter.get("e1")
        assert stored["gen_ai.request.top_p"] == "0.5"
        assert stored["gen_ai.request.max_tokens"] == "256"
        assert stored["streaming"] == "true"
        assert stored["stop"] == '["a", "b"]'

    def test_reused_event_id_overwrites(self, tracer, debug_exporter):
        """Test that the latest span for an event id fully replaces the old one."""
        emit(tracer, "execute_tool get_weather", {EVENT_ID: "e1", "first": "1"})
        emit(tracer, "execute_tool (merged)", {EVENT_ID: "e1", "second": "2"})

        stored = debug_exporter.get("e1")
        assert stored["second"] == "2"
        assert "first" not in stored
        assert len(debug_exporter.get_trace_dict()) == 1


class TestExporterApi:
    """Tests for the exporter's accessors and lifecycle."""

    def test_get_unknown_event(self, debug_exporter):
        """Test that unknown events return None."""
        assert debug_exporter.get("missing") is None

    def test_get_returns_copy(self, tracer, debug_exporter):
        """Test that callers cannot mutate the store through get()."""
        emit(tracer, "call_llm", {EVENT_ID: "e1"})

        debug_exporter.get("e1")["injected"] = "x"
        debug_exporter.get_trace_dict()["e2"] = {}

        assert "injected" not in debug_exporter.get("e1")
        assert debug_exporter.get("e2") is None

    def test_export_returns_success(self, debug_exporter):
        """Test exporting an empty batch."""
        assert debug_exporter.export([]) == SpanExportResult.SUCCESS

    def test_shutdown_keeps_entries(self, tracer, debug_exporter):
        """Test that shutdown is a no-op for the in-memory store."""
        emit(tracer, "call_llm", {EVENT_ID: "e1"})

        debug_exporter.shutdown()

        assert debug_exporter.get("e1") is not None
        assert debug_exporter.force_flush() is True

    def test_concurrent_export_and_read(self, tracer, debug_exporter):
        """Test exporting from several threads while reading."""
        def writer(prefix: str):
            for i in range(50):
                emit(tracer, "call_llm", {EVENT_ID: f"{prefix}-{i}"})

        def reader():
            for _ in range(50):
                debug_exporter.get_trace_dict()

        threads = [threading.Thread(target=writer, args=(f"w{n}",)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(debug_exporter.get_trace_dict()) == 200
