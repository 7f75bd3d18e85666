"""In-memory span exporter backing the debug trace API."""

import json
import threading
from typing import Sequence

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult
from opentelemetry.trace import format_span_id, format_trace_id

from ..logging_config import get_logger
from ..models.tracing import EVENT_ID, EXECUTE_TOOL, TraceAttributeSet

logger = get_logger(__name__)

DEBUG_SPAN_NAMES = frozenset({"call_llm", "send_data"})


def is_debug_span(name: str) -> bool:
    """Whether spans with this name are kept for per-event debugging."""
    return name in DEBUG_SPAN_NAMES or name.startswith(EXECUTE_TOOL)


def _attribute_to_string(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value))
    return str(value)


class DebugSpanExporter(SpanExporter):
    """Keeps attributes of call_llm, send_data and execute_tool* spans by event id.

    Entries are never evicted; a span reusing an event id replaces the
    previous entry.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._trace_dict: dict[str, TraceAttributeSet] = {}

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        for span in spans:
            if not is_debug_span(span.name):
                continue

            attributes: TraceAttributeSet = {
                key: _attribute_to_string(value)
                for key, value in (span.attributes or {}).items()
            }
            span_context = span.context
            attributes["trace_id"] = format_trace_id(span_context.trace_id)
            attributes["span_id"] = format_span_id(span_context.span_id)

            event_id = attributes.get(EVENT_ID)
            if event_id is None:
                continue
            with self._lock:
                self._trace_dict[event_id] = attributes
            logger.debug("Stored trace for event %s (span %s)", event_id, span.name)

        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        """Nothing to release; the store is purely in memory."""
        return

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True

    def get(self, event_id: str) -> TraceAttributeSet | None:
        """Attributes captured for event_id, or None."""
        with self._lock:
            attributes = self._trace_dict.get(event_id)
            return dict(attributes) if attributes is not None else None

    def get_trace_dict(self) -> dict[str, TraceAttributeSet]:
        """Snapshot of every stored event's attributes."""
        with self._lock:
            return {k: dict(v) for k, v in self._trace_dict.items()}
