"""Core data models for agenttrace."""

from .agents import Agent, FunctionTool, InvocationContext, Tool
from .content import Blob, Content, FunctionCall, FunctionResponse, Part
from .llm import GenerateContentConfig, LLMRequest, LLMResponse, UsageMetadata
from .session import Event, Session, SessionID
from .tracing import (
    HighlightPair,
    LLMCallAttributes,
    MergedToolCallAttributes,
    ToolCallAttributes,
    TraceAttributeSet,
)

__all__ = [
    # Content
    "Blob",
    "Content",
    "FunctionCall",
    "FunctionResponse",
    "Part",
    # LLM
    "GenerateContentConfig",
    "LLMRequest",
    "LLMResponse",
    "UsageMetadata",
    # Sessions
    "Event",
    "Session",
    "SessionID",
    # Agents
    "Agent",
    "FunctionTool",
    "InvocationContext",
    "Tool",
    # Tracing
    "HighlightPair",
    "LLMCallAttributes",
    "MergedToolCallAttributes",
    "ToolCallAttributes",
    "TraceAttributeSet",
]
