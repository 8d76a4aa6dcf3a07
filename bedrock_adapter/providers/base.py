"""Request and result types shared by the Bedrock provider functions."""

from collections.abc import Callable, Mapping, Sequence
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic_ai.result import StreamedRunResult

from bedrock_adapter.config import DEFAULT_MAX_RETRIES, DEFAULT_OBJECT_NAME, DEFAULT_REGION
from bedrock_adapter.messages import MessageLike

T = TypeVar("T")

CredentialProvider = Callable[[], Mapping[str, Any]]

# Handed back to the caller untouched; enter it with ``async with``.
TextStream = AbstractAsyncContextManager[StreamedRunResult[None, str]]


@dataclass
class Usage:
    """Token usage from a response."""
    input_tokens: int = 0
    output_tokens: int = 0

    @classmethod
    def from_sdk(cls, usage: Any) -> "Usage":
        """Normalize an SDK usage object to input/output counts.

        Accepts prompt/completion, request/response or input/output naming.
        """
        def first(*names: str) -> int:
            for name in names:
                value = getattr(usage, name, None)
                if value is not None:
                    return value
            return 0

        return cls(
            input_tokens=first("prompt_tokens", "input_tokens", "request_tokens"),
            output_tokens=first("completion_tokens", "output_tokens", "response_tokens"),
        )


@dataclass(kw_only=True)
class BedrockRequest:
    """Parameters for a text generation or streaming call."""
    model_id: str
    messages: Sequence[MessageLike]
    access_key_id: str | None = None
    secret_access_key: str | None = None
    session_token: str | None = None
    credential_provider: CredentialProvider | None = None
    region: str | None = DEFAULT_REGION
    base_url: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    additional_model_request_fields: dict[str, Any] | None = None


@dataclass(kw_only=True)
class BedrockObjectRequest(BedrockRequest):
    """Parameters for a structured object generation call."""
    schema: Any
    object_name: str = DEFAULT_OBJECT_NAME
    max_retries: int = DEFAULT_MAX_RETRIES


@dataclass
class TextResult:
    text: str
    usage: Usage


@dataclass
class ObjectResult(Generic[T]):
    object: T
    usage: Usage
