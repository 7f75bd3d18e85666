"""Span attribute schemas for traced agent operations.

Each dataclass covers one operation kind and renders to the flat
OpenTelemetry attribute mapping under the wire keys the debug UI reads.
"""

from dataclasses import dataclass

SYSTEM_NAME = "gcp.vertex.agent"
NOT_SPECIFIED = "<not specified>"
MERGED_TOOLS = "(merged tools)"
EXECUTE_TOOL = "execute_tool"

GEN_AI_OPERATION_NAME = "gen_ai.operation.name"
GEN_AI_TOOL_NAME = "gen_ai.tool.name"
GEN_AI_TOOL_DESCRIPTION = "gen_ai.tool.description"
GEN_AI_TOOL_CALL_ID = "gen_ai.tool.call.id"
GEN_AI_SYSTEM = "gen_ai.system"
GEN_AI_REQUEST_MODEL = "gen_ai.request.model"
GEN_AI_REQUEST_TOP_P = "gen_ai.request.top_p"
GEN_AI_REQUEST_MAX_TOKENS = "gen_ai.request.max_tokens"

INVOCATION_ID = f"{SYSTEM_NAME}.invocation_id"
SESSION_ID = f"{SYSTEM_NAME}.session_id"
EVENT_ID = f"{SYSTEM_NAME}.event_id"
LLM_REQUEST = f"{SYSTEM_NAME}.llm_request"
LLM_RESPONSE = f"{SYSTEM_NAME}.llm_response"
TOOL_CALL_ARGS = f"{SYSTEM_NAME}.tool_call_args"
TOOL_RESPONSE = f"{SYSTEM_NAME}.tool_response"

AttributeValue = str | int | float
TraceAttributeSet = dict[str, str]
HighlightPair = tuple[str, str]


@dataclass
class LLMCallAttributes:
    """Attributes of a call_llm span."""

    model: str
    invocation_id: str
    session_id: str
    event_id: str
    llm_request: str
    llm_response: str
    top_p: float | None = None
    max_tokens: int = 0

    def to_attributes(self) -> dict[str, AttributeValue]:
        attributes: dict[str, AttributeValue] = {
            GEN_AI_SYSTEM: SYSTEM_NAME,
            GEN_AI_REQUEST_MODEL: self.model,
            INVOCATION_ID: self.invocation_id,
            SESSION_ID: self.session_id,
            EVENT_ID: self.event_id,
            LLM_REQUEST: self.llm_request,
            LLM_RESPONSE: self.llm_response,
        }
        if self.top_p is not None:
            attributes[GEN_AI_REQUEST_TOP_P] = float(self.top_p)
        if self.max_tokens:
            attributes[GEN_AI_REQUEST_MAX_TOKENS] = int(self.max_tokens)
        return attributes


@dataclass
class ToolCallAttributes:
    """Attributes of an execute_tool span for a single tool."""

    tool_name: str
    tool_description: str
    tool_call_args: str
    event_id: str
    tool_call_id: str = NOT_SPECIFIED
    tool_response: str = NOT_SPECIFIED

    def to_attributes(self) -> dict[str, AttributeValue]:
        # llm_request/llm_response are not applicable to tools but the UI expects them
        return {
            GEN_AI_OPERATION_NAME: EXECUTE_TOOL,
            GEN_AI_TOOL_NAME: self.tool_name,
            GEN_AI_TOOL_DESCRIPTION: self.tool_description,
            LLM_REQUEST: "{}",
            LLM_RESPONSE: "{}",
            TOOL_CALL_ARGS: self.tool_call_args,
            EVENT_ID: self.event_id,
            GEN_AI_TOOL_CALL_ID: self.tool_call_id,
            TOOL_RESPONSE: self.tool_response,
        }


@dataclass
class MergedToolCallAttributes:
    """Attributes of an execute_tool span covering several parallel tool calls."""

    event_id: str
    tool_response: str

    def to_attributes(self) -> dict[str, AttributeValue]:
        return {
            GEN_AI_OPERATION_NAME: EXECUTE_TOOL,
            GEN_AI_TOOL_NAME: MERGED_TOOLS,
            GEN_AI_TOOL_DESCRIPTION: MERGED_TOOLS,
            LLM_REQUEST: "{}",
            LLM_RESPONSE: "{}",
            TOOL_CALL_ARGS: "N/A",
            EVENT_ID: self.event_id,
            TOOL_RESPONSE: self.tool_response,
        }
