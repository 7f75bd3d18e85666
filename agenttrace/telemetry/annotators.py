"""Attach operation attributes to fan-out spans and close them."""

from typing import Any, Sequence

from opentelemetry.trace import Span

from ..models import (
    Content,
    Event,
    FunctionResponse,
    InvocationContext,
    LLMCallAttributes,
    LLMRequest,
    MergedToolCallAttributes,
    Tool,
    ToolCallAttributes,
)
from ..models.tracing import AttributeValue
from .serialization import safe_serialize


def _end_all(spans: Sequence[Span]) -> None:
    for span in spans:
        span.end()


def _annotate_and_end(
    spans: Sequence[Span], attributes: dict[str, AttributeValue]
) -> None:
    for span in spans:
        span.set_attributes(attributes)
        span.end()


def llm_request_to_trace(llm_request: LLMRequest) -> dict[str, Any]:
    """Traceable view of a request: inline binary parts are dropped."""
    return {
        "config": llm_request.config,
        "model": llm_request.model,
        "content": [
            Content(
                role=content.role,
                parts=[p for p in content.parts if p.inline_data is None],
            )
            for content in llm_request.contents
        ],
    }


def _first_function_response(event: Event) -> FunctionResponse | None:
    content = event.llm_response.content if event.llm_response else None
    if content is None or not content.parts:
        return None
    return content.parts[0].function_response


def trace_llm_call(
    spans: Sequence[Span],
    invocation_context: InvocationContext,
    llm_request: LLMRequest,
    event: Event | None,
) -> None:
    """Fill and close call_llm spans."""
    if event is None:
        _end_all(spans)
        return

    config = llm_request.config
    attributes = LLMCallAttributes(
        model=llm_request.model,
        invocation_id=event.invocation_id,
        session_id=invocation_context.session.id,
        event_id=event.id,
        llm_request=safe_serialize(llm_request_to_trace(llm_request)),
        llm_response=safe_serialize(event.llm_response),
        top_p=config.top_p if config else None,
        max_tokens=config.max_output_tokens if config else 0,
    )
    # TODO: add usage metadata and finish reason once LLMResponse carries finish_reason
    _annotate_and_end(spans, attributes.to_attributes())


def trace_tool_call(
    spans: Sequence[Span],
    tool: Tool,
    args: dict[str, Any],
    event: Event | None,
) -> None:
    """Fill and close execute_tool spans for a single tool invocation."""
    if event is None:
        _end_all(spans)
        return

    attributes = ToolCallAttributes(
        tool_name=tool.name,
        tool_description=tool.description,
        tool_call_args=safe_serialize(args),
        event_id=event.id,
    )
    function_response = _first_function_response(event)
    if function_response is not None:
        if function_response.id:
            attributes.tool_call_id = function_response.id
        if function_response.response is not None:
            attributes.tool_response = safe_serialize(function_response.response)

    _annotate_and_end(spans, attributes.to_attributes())


def trace_merged_tool_calls(spans: Sequence[Span], event: Event | None) -> None:
    """Fill and close execute_tool spans for a merged parallel-tools response."""
    if event is None:
        _end_all(spans)
        return

    attributes = MergedToolCallAttributes(
        event_id=event.id,
        tool_response=safe_serialize(event),
    )
    _annotate_and_end(spans, attributes.to_attributes())
