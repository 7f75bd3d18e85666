"""Agent and tool data models."""

from dataclasses import dataclass, field
from typing import Protocol

from .session import Session


class Tool(Protocol):
    """Anything an agent can call."""

    @property
    def name(self) -> str:
        ...

    @property
    def description(self) -> str:
        ...


@dataclass
class FunctionTool:
    """A plain named tool."""

    name: str
    description: str = ""


@dataclass
class Agent:
    """An agent node in the call graph."""

    name: str
    description: str = ""
    sub_agents: list["Agent"] = field(default_factory=list)
    tools: list[Tool] = field(default_factory=list)


@dataclass
class InvocationContext:
    """Context of a single agent invocation."""

    invocation_id: str
    session: Session
    agent: Agent | None = None
