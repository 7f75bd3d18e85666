"""Pytest configuration and fixtures."""

import asyncio
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from agenttrace.config import Settings
from agenttrace.models import Agent, FunctionTool
from tests.factories import call_part, make_event, response_part


@pytest.fixture
def registry():
    """Fresh, unsealed span registry."""
    from agenttrace.telemetry import SpanRegistry

    return SpanRegistry()


@pytest.fixture
def memory_exporter():
    """In-memory exporter collecting finished spans."""
    return InMemorySpanExporter()


@pytest.fixture
def recording_registry(registry, memory_exporter):
    """Registry whose local provider records finished spans in memory_exporter."""
    registry.add_span_processor(SimpleSpanProcessor(memory_exporter))
    return registry


@pytest.fixture
def debug_exporter():
    """Create DebugSpanExporter."""
    from agenttrace.telemetry import DebugSpanExporter

    return DebugSpanExporter()


@pytest.fixture
def tracer(debug_exporter):
    """Tracer whose spans are exported synchronously to debug_exporter."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(debug_exporter))
    yield provider.get_tracer("tests")
    provider.shutdown()


@pytest.fixture
def weather_agent():
    """Root agent with one tool and one sub-agent."""
    search = Agent(
        name="search_agent",
        description="Looks things up",
        tools=[FunctionTool(name="search", description="Web search")],
    )
    return Agent(
        name="weather_agent",
        description="Answers weather questions",
        sub_agents=[search],
        tools=[FunctionTool(name="get_weather", description="Gets the weather")],
    )


@pytest.fixture
def session_service():
    """In-memory session service holding one session with three events."""
    from agenttrace.services import InMemorySessionService

    service = InMemorySessionService()

    async def populate():
        session = await service.create_session(
            app_name="weather_app", user_id="user-1", session_id="sess-1"
        )
        await service.append_event(
            session, make_event("evt-call", "weather_agent", [call_part("get_weather")])
        )
        await service.append_event(
            session,
            make_event(
                "evt-resp", "weather_agent", [response_part("get_weather", {"t": 21})]
            ),
        )
        await service.append_event(session, make_event("evt-text", "weather_agent"))

        ghost = await service.create_session(
            app_name="ghost_app", user_id="user-1", session_id="sess-ghost"
        )
        await service.append_event(ghost, make_event("evt-ghost", "ghost_agent"))

    asyncio.run(populate())
    return service


@pytest.fixture
def application(registry, session_service, weather_agent):
    """Application wired with an isolated registry and test collaborators."""
    from agenttrace.app import Application
    from agenttrace.services import StaticAgentLoader

    return Application(
        registry=registry,
        session_service=session_service,
        agent_loader=StaticAgentLoader({"weather_app": weather_agent}),
        settings=Settings(),
    )


@pytest.fixture
def client(application):
    """TestClient running the application lifespan."""
    from agenttrace.api import create_fastapi_app

    with TestClient(create_fastapi_app(application)) as test_client:
        yield test_client
