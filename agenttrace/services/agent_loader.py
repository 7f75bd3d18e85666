"""Agent lookup by application name."""

from typing import Protocol

from ..models import Agent


class AgentNotFoundError(LookupError):
    """Raised when no agent is registered under a name."""


class IAgentLoader(Protocol):
    """Resolves application names to root agents."""

    def list_agents(self) -> list[str]:
        """Names of all loadable agents."""
        ...

    def load_agent(self, name: str) -> Agent:
        """Load an agent. Raises AgentNotFoundError if unknown."""
        ...


class StaticAgentLoader:
    """Agent loader over a fixed name -> agent mapping."""

    def __init__(self, agents: dict[str, Agent] | None = None):
        self._agents = dict(agents or {})

    def list_agents(self) -> list[str]:
        return sorted(self._agents)

    def load_agent(self, name: str) -> Agent:
        agent = self._agents.get(name)
        if agent is None:
            raise AgentNotFoundError(f"agent {name} not found")
        return agent
