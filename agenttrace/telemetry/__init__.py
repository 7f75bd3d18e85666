"""Telemetry: span registry, annotators and the debug span exporter."""

from .annotators import (
    llm_request_to_trace,
    trace_llm_call,
    trace_merged_tool_calls,
    trace_tool_call,
)
from .exporter import DebugSpanExporter, is_debug_span
from .registry import (
    SpanRegistry,
    default_registry,
    register_span_processor,
    start_trace,
)
from .serialization import NOT_SERIALIZABLE, safe_serialize

__all__ = [
    "DebugSpanExporter",
    "NOT_SERIALIZABLE",
    "SpanRegistry",
    "default_registry",
    "is_debug_span",
    "llm_request_to_trace",
    "register_span_processor",
    "safe_serialize",
    "start_trace",
    "trace_llm_call",
    "trace_merged_tool_calls",
    "trace_tool_call",
]
