"""Local tracer provider registry and dual-tracer fan-out.

Spans emitted by agenttrace go to two places: a local ``TracerProvider``
owned by a ``SpanRegistry`` (carrying whatever span processors were
registered on it) and the global OpenTelemetry provider configured by the
embedding process. The global one is a no-op unless the host sets it up.

Processors must be registered before the first span is started. The first
call to ``start_trace`` (or ``ensure_initialized``) seals the registry;
later registrations are dropped with a warning.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.trace import Span, Status, StatusCode, Tracer

from ..logging_config import get_logger
from ..models.tracing import SYSTEM_NAME

logger = get_logger(__name__)


class SpanRegistry:
    """Owns the local tracer provider and the processors attached to it."""

    def __init__(self):
        self._lock = threading.Lock()
        self._init_lock = threading.Lock()
        self._processors: list[SpanProcessor] = []
        self._sealed = False
        self._attached: tuple[SpanProcessor, ...] = ()
        self._provider: TracerProvider | None = None
        self._tracer: Tracer | None = None

    def add_span_processor(self, processor: SpanProcessor) -> None:
        """Register a processor for the local provider.

        Has no effect once the registry is sealed.
        """
        with self._lock:
            if not self._sealed:
                self._processors.append(processor)
                return
        logger.warning(
            "Span processor %s registered after tracing started; ignored",
            type(processor).__name__,
        )

    def ensure_initialized(self) -> TracerProvider:
        """Create the local provider once, attaching every registered processor."""
        if self._provider is not None:
            return self._provider
        with self._init_lock:
            if self._provider is not None:
                return self._provider

            with self._lock:
                self._sealed = True
                processors = tuple(self._processors)

            provider = TracerProvider()
            for processor in processors:
                provider.add_span_processor(processor)

            self._attached = processors
            self._tracer = provider.get_tracer(SYSTEM_NAME)
            self._provider = provider
            logger.info(
                "Local tracer provider initialized with %d span processor(s)",
                len(processors),
            )
            return provider

    @property
    def is_sealed(self) -> bool:
        with self._lock:
            return self._sealed

    @property
    def attached_processors(self) -> tuple[SpanProcessor, ...]:
        """Processors attached to the local provider, in registration order."""
        return self._attached

    @property
    def tracer_provider(self) -> TracerProvider:
        return self.ensure_initialized()

    def get_tracers(self) -> list[Tracer]:
        """Return [local tracer, global tracer]."""
        self.ensure_initialized()
        return [
            self._tracer,
            trace.get_tracer_provider().get_tracer(SYSTEM_NAME),
        ]

    def start_trace(self, name: str, context: Context | None = None) -> list[Span]:
        """Start one span per tracer, all named ``name``."""
        return [
            tracer.start_span(name, context=context) for tracer in self.get_tracers()
        ]

    @contextmanager
    def trace(self, name: str, context: Context | None = None) -> Iterator[list[Span]]:
        """Start fan-out spans; if the body raises, record the error and end them."""
        spans = self.start_trace(name, context=context)
        try:
            yield spans
        except BaseException as exc:
            for span in spans:
                if span.is_recording():
                    span.record_exception(exc)
                    span.set_status(Status(StatusCode.ERROR, str(exc)))
                    span.end()
            raise

    def shutdown(self) -> None:
        """Flush and shut down the local provider, if it was created."""
        if self._provider is not None:
            self._provider.shutdown()


_default_registry = SpanRegistry()


def default_registry() -> SpanRegistry:
    """The process-wide registry."""
    return _default_registry


def register_span_processor(processor: SpanProcessor) -> None:
    """Register a processor on the process-wide registry.

    Must be called before any spans are emitted; later calls are ignored.
    The global OpenTelemetry provider configuration is respected in addition.
    """
    _default_registry.add_span_processor(processor)


def start_trace(name: str, context: Context | None = None) -> list[Span]:
    """Start fan-out spans on the process-wide registry."""
    return _default_registry.start_trace(name, context=context)
