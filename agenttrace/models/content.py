"""Content parts exchanged between agents, models and tools."""

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass
class Blob:
    """Inline binary payload (image, audio, file bytes)."""

    mime_type: str
    data: bytes


@dataclass
class FunctionCall:
    """A model's request to invoke a tool."""

    name: str
    args: dict[str, Any] = field(default_factory=dict)
    id: str = ""


@dataclass
class FunctionResponse:
    """The result of a tool invocation, fed back to the model."""

    name: str
    response: dict[str, Any] | None = None
    id: str = ""


@dataclass
class Part:
    """A single part of a Content. Exactly one field is expected to be set."""

    text: str | None = None
    inline_data: Blob | None = None
    function_call: FunctionCall | None = None
    function_response: FunctionResponse | None = None


@dataclass
class Content:
    """Multi-part message content with a role."""

    role: Literal["user", "model", ""] = ""
    parts: list[Part] = field(default_factory=list)
