"""Session and event data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .content import FunctionCall, FunctionResponse
from .llm import LLMResponse


@dataclass
class Event:
    """One execution step (LLM call, tool call, tool response) of an agent run."""

    id: str
    author: str
    invocation_id: str = ""
    llm_response: LLMResponse = field(default_factory=LLMResponse)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def _parts(self) -> list:
        content = self.llm_response.content if self.llm_response else None
        if content is None or not content.parts:
            return []
        return content.parts

    def function_calls(self) -> list[FunctionCall]:
        """Function calls carried by this event, in part order."""
        return [p.function_call for p in self._parts() if p.function_call is not None]

    def function_responses(self) -> list[FunctionResponse]:
        """Function responses carried by this event, in part order."""
        return [
            p.function_response
            for p in self._parts()
            if p.function_response is not None
        ]


@dataclass(frozen=True)
class SessionID:
    """Fully-qualified session identifier."""

    app_name: str
    user_id: str
    session_id: str

    @classmethod
    def from_path_params(
        cls, app_name: str | None, user_id: str | None, session_id: str | None
    ) -> "SessionID":
        """Build a SessionID from URL path parameters.

        Raises:
            ValueError: If any component is missing or blank.
        """
        for label, value in (
            ("app_name", app_name),
            ("user_id", user_id),
            ("session_id", session_id),
        ):
            if not value or not value.strip():
                raise ValueError(f"{label} parameter is required")
        return cls(app_name=app_name, user_id=user_id, session_id=session_id)


@dataclass
class Session:
    """A conversation between a user and an app, as an ordered event log."""

    id: str
    app_name: str
    user_id: str
    events: list[Event] = field(default_factory=list)
    state: dict[str, Any] = field(default_factory=dict)
    last_update_time: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def find_event(self, event_id: str) -> Event | None:
        """Return the first event with the given id, or None."""
        for event in self.events:
            if event.id == event_id:
                return event
        return None
