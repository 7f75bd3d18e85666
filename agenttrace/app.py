"""Application bootstrap and lifecycle management."""

from typing import Protocol

from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)

from .config import Settings, load_settings
from .graph import DotGraphRenderer, IGraphRenderer
from .logging_config import get_logger
from .services import (
    IAgentLoader,
    InMemorySessionService,
    ISessionService,
    StaticAgentLoader,
)
from .telemetry import DebugSpanExporter, SpanRegistry, default_registry

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Register span sinks and seal the tracer registry."""
        ...

    async def stop(self) -> None:
        """Flush pending spans."""
        ...


class Application:
    """Wires the tracer registry, debug exporter and debug collaborators."""

    def __init__(
        self,
        registry: SpanRegistry | None = None,
        session_service: ISessionService | None = None,
        agent_loader: IAgentLoader | None = None,
        renderer: IGraphRenderer | None = None,
        settings: Settings | None = None,
    ):
        self._registry = registry if registry is not None else default_registry()
        self._session_service = session_service or InMemorySessionService()
        self._agent_loader = agent_loader or StaticAgentLoader()
        self._renderer = renderer or DotGraphRenderer()
        self._settings = settings or load_settings()

        # Created in start()
        self._exporter: DebugSpanExporter | None = None

    async def start(self) -> None:
        """Register span sinks and seal the tracer registry."""
        logger.info("Starting application")

        # 1. Debug exporter, synchronously so traces are queryable right after a span ends
        self._exporter = DebugSpanExporter()
        self._registry.add_span_processor(SimpleSpanProcessor(self._exporter))

        # 2. Optional console export
        if self._settings.trace_console_export:
            self._registry.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
            logger.info("Console span export enabled")

        # 3. Seal the registry before any traffic
        self._registry.ensure_initialized()
        attached = any(
            getattr(processor, "span_exporter", None) is self._exporter
            for processor in self._registry.attached_processors
        )
        if not attached:
            logger.warning(
                "Tracer registry was already initialized; debug traces will not be captured"
            )
        logger.info("Application started")

    async def stop(self) -> None:
        """Flush pending spans. The registry lives for the whole process."""
        if self._registry.is_sealed:
            self._registry.tracer_provider.force_flush()
        logger.info("Application stopped")

    @property
    def registry(self) -> SpanRegistry:
        return self._registry

    @property
    def exporter(self) -> DebugSpanExporter:
        """Get the debug span exporter."""
        if not self._exporter:
            raise RuntimeError("Application not started")
        return self._exporter

    @property
    def session_service(self) -> ISessionService:
        return self._session_service

    @property
    def agent_loader(self) -> IAgentLoader:
        return self._agent_loader

    @property
    def renderer(self) -> IGraphRenderer:
        return self._renderer

    @property
    def settings(self) -> Settings:
        return self._settings
