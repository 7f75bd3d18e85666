"""Debug API routes: per-event traces and call graphs."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...graph import highlight_pairs
from ...logging_config import get_logger
from ...models import SessionID

logger = get_logger(__name__)


class GraphResponse(BaseModel):
    """Response model for an event graph."""

    dotSrc: str


class DebugAPIController:
    """Handlers behind the debug routes."""

    def __init__(self, app: Application):
        self._app = app

    async def trace_dict(self, event_id: str) -> dict[str, str]:
        """Span attributes recorded for an event."""
        if not event_id or not event_id.strip():
            raise HTTPException(status_code=400, detail="event_id parameter is required")

        attributes = self._app.exporter.get(event_id)
        if attributes is None:
            raise HTTPException(status_code=404, detail=f"event not found: {event_id}")
        return attributes

    async def event_graph(
        self, app_name: str, user_id: str, session_id: str, event_id: str
    ) -> dict[str, str]:
        """DOT graph of the app's agents with the event's nodes highlighted."""
        try:
            sid = SessionID.from_path_params(app_name, user_id, session_id)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            session = await self._app.session_service.get_session(
                sid.app_name, sid.user_id, sid.session_id
            )
        except Exception as e:
            raise HTTPException(status_code=400, detail=str(e))

        if not event_id or not event_id.strip():
            raise HTTPException(status_code=400, detail="event_id parameter is required")

        event = session.find_event(event_id)
        if event is None:
            raise HTTPException(status_code=404, detail="event not found")

        pairs = highlight_pairs(event)

        try:
            agent = self._app.agent_loader.load_agent(sid.app_name)
            graph = self._app.renderer.render(agent, pairs)
        except Exception as e:
            logger.error("Failed to build graph for event %s: %s", event_id, e)
            raise HTTPException(status_code=500, detail=str(e))

        return {"dotSrc": graph}


def create_debug_router(app: Application) -> APIRouter:
    """Create debug router."""
    router = APIRouter(prefix="/api", tags=["debug"])
    controller = DebugAPIController(app)

    @router.get("/debug/events/{event_id}/trace", response_model=dict[str, str])
    async def get_event_trace(event_id: str) -> dict[str, str]:
        """Get span attributes captured for an event."""
        return await controller.trace_dict(event_id)

    @router.get(
        "/apps/{app_name}/users/{user_id}/sessions/{session_id}/events/{event_id}/graph",
        response_model=GraphResponse,
    )
    async def get_event_graph(
        app_name: str, user_id: str, session_id: str, event_id: str
    ) -> dict[str, str]:
        """Get the agent graph with an event's call edges highlighted."""
        return await controller.event_graph(app_name, user_id, session_id, event_id)

    @router.get("/list-apps", response_model=list[str])
    async def list_apps() -> list[str]:
        """List loadable app names."""
        try:
            return app.agent_loader.list_agents()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
