"""LLM request/response data models."""

from dataclasses import dataclass, field

from .content import Content


@dataclass
class GenerateContentConfig:
    """Sampling and generation parameters for a model call."""

    temperature: float | None = None
    top_p: float | None = None
    top_k: int | None = None
    max_output_tokens: int = 0
    system_instruction: str | None = None


@dataclass
class LLMRequest:
    """Request sent to a model."""

    model: str
    contents: list[Content] = field(default_factory=list)
    config: GenerateContentConfig = field(default_factory=GenerateContentConfig)


@dataclass
class UsageMetadata:
    """Token accounting reported by the model."""

    prompt_token_count: int = 0
    candidates_token_count: int = 0
    total_token_count: int = 0


@dataclass
class LLMResponse:
    """Response (or partial response) produced by a model."""

    content: Content | None = None
    partial: bool = False
    turn_complete: bool = False
    error_code: str | None = None
    error_message: str | None = None
    usage_metadata: UsageMetadata | None = None
