"""Collaborator services consumed by the debug API."""

from .agent_loader import AgentNotFoundError, IAgentLoader, StaticAgentLoader
from .session_service import (
    InMemorySessionService,
    ISessionService,
    SessionNotFoundError,
)

__all__ = [
    "AgentNotFoundError",
    "IAgentLoader",
    "InMemorySessionService",
    "ISessionService",
    "SessionNotFoundError",
    "StaticAgentLoader",
]
