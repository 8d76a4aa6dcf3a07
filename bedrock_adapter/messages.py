"""Core message types for the Bedrock adapter."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, get_args

from pydantic_ai.messages import (
    ModelMessage,
    ModelRequest,
    ModelRequestPart,
    ModelResponse,
    SystemPromptPart,
    TextPart,
    UserPromptPart,
)

Role = Literal["system", "user", "assistant"]

ROLES: tuple[str, ...] = get_args(Role)


@dataclass(frozen=True)
class Message:
    """A role-tagged message in the conversation."""
    role: Role
    content: str

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Message":
        """Build a Message from a ``{"role": ..., "content": ...}`` mapping.

        Raises:
            ValueError: If the role is unknown or a field is missing
        """
        role = data.get("role")
        if role not in ROLES:
            raise ValueError(f"Unknown message role {role!r}. Expected one of: {', '.join(ROLES)}")
        content = data.get("content")
        if not isinstance(content, str):
            raise ValueError(f"Message content must be a string, got {type(content).__name__}")
        return cls(role=role, content=content)

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


MessageLike = Message | Mapping[str, Any]


def coerce_messages(messages: Iterable[MessageLike]) -> list[Message]:
    """Accept Message objects or plain role/content dicts."""
    return [m if isinstance(m, Message) else Message.from_dict(m) for m in messages]


def to_model_messages(messages: Iterable[MessageLike]) -> list[ModelMessage]:
    """Convert messages to pydantic-ai's history format.

    Consecutive system/user messages share one request; each assistant
    message becomes a response. The final request is what gets sent.
    """
    history: list[ModelMessage] = []
    pending: list[ModelRequestPart] = []

    for msg in coerce_messages(messages):
        if msg.role == "assistant":
            if pending:
                history.append(ModelRequest(parts=pending))
                pending = []
            history.append(ModelResponse(parts=[TextPart(content=msg.content)]))
        elif msg.role == "system":
            pending.append(SystemPromptPart(content=msg.content))
        else:
            pending.append(UserPromptPart(content=msg.content))

    if pending:
        history.append(ModelRequest(parts=pending))

    return history
