"""Session lookup used by the debug API."""

import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Protocol

from ..logging_config import get_logger
from ..models import Event, Session

logger = get_logger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when a session does not exist."""


class ISessionService(Protocol):
    """Read access to sessions and their ordered event logs."""

    async def get_session(
        self, app_name: str, user_id: str, session_id: str
    ) -> Session:
        """Get a session. Raises SessionNotFoundError if missing."""
        ...


class InMemorySessionService:
    """Process-local session store keyed by (app_name, user_id, session_id)."""

    def __init__(self):
        self._sessions: dict[tuple[str, str, str], Session] = {}
        self._lock = threading.Lock()

    async def create_session(
        self,
        app_name: str,
        user_id: str,
        session_id: str | None = None,
        state: dict[str, Any] | None = None,
    ) -> Session:
        """Create and store a new empty session."""
        session = Session(
            id=session_id or str(uuid.uuid4()),
            app_name=app_name,
            user_id=user_id,
            state=dict(state or {}),
        )
        with self._lock:
            key = (app_name, user_id, session.id)
            if key in self._sessions:
                raise ValueError(f"session already exists: {session.id}")
            self._sessions[key] = session
        logger.info("Session %s created for %s/%s", session.id, app_name, user_id)
        return session

    async def get_session(
        self, app_name: str, user_id: str, session_id: str
    ) -> Session:
        with self._lock:
            session = self._sessions.get((app_name, user_id, session_id))
        if session is None:
            raise SessionNotFoundError(
                f"session {session_id} not found for app {app_name}, user {user_id}"
            )
        return session

    async def append_event(self, session: Session, event: Event) -> Event:
        """Append an event to a stored session's log."""
        with self._lock:
            stored = self._sessions.get((session.app_name, session.user_id, session.id))
            if stored is None:
                raise SessionNotFoundError(f"session {session.id} not found")
            stored.events.append(event)
            stored.last_update_time = datetime.now(timezone.utc)
        return event
