"""agenttrace: dual-sink span instrumentation and debug inspection for agent runs."""

from .app import Application, IApplication
from .graph import DotGraphRenderer, IGraphRenderer, highlight_pairs
from .models import (
    Agent,
    Content,
    Event,
    FunctionCall,
    FunctionResponse,
    FunctionTool,
    InvocationContext,
    LLMRequest,
    LLMResponse,
    Part,
    Session,
    SessionID,
)
from .services import (
    AgentNotFoundError,
    IAgentLoader,
    InMemorySessionService,
    ISessionService,
    SessionNotFoundError,
    StaticAgentLoader,
)
from .telemetry import (
    DebugSpanExporter,
    SpanRegistry,
    register_span_processor,
    start_trace,
    trace_llm_call,
    trace_merged_tool_calls,
    trace_tool_call,
)

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Agent",
    "Content",
    "Event",
    "FunctionCall",
    "FunctionResponse",
    "FunctionTool",
    "InvocationContext",
    "LLMRequest",
    "LLMResponse",
    "Part",
    "Session",
    "SessionID",
    # Telemetry
    "DebugSpanExporter",
    "SpanRegistry",
    "register_span_processor",
    "start_trace",
    "trace_llm_call",
    "trace_merged_tool_calls",
    "trace_tool_call",
    # Graph
    "DotGraphRenderer",
    "IGraphRenderer",
    "highlight_pairs",
    # Services
    "AgentNotFoundError",
    "IAgentLoader",
    "InMemorySessionService",
    "ISessionService",
    "SessionNotFoundError",
    "StaticAgentLoader",
]
