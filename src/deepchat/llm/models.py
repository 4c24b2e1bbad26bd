from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Role of a message sender."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender: 'user', 'assistant', or 'system'")
    content: str = Field(description="Raw, unrendered content of the message")

    def to_payload(self) -> dict[str, str]:
        """Convert to the backend's wire format."""
        return {"role": self.role.value, "content": self.content}


class ChatRequest(BaseModel):
    """Request body for the backend's chat endpoint."""

    model: str
    messages: list[dict[str, str]]
    stream: bool = False

    @classmethod
    def from_history(cls, model: str, history: list[ChatMessage]) -> "ChatRequest":
        return cls(model=model, messages=[msg.to_payload() for msg in history])


class PullRequest(BaseModel):
    """Request body for the backend's pull endpoint."""

    name: str
    stream: bool = False


class AssistantPayload(BaseModel):
    """The ``message`` object inside a chat response."""

    role: str = "assistant"
    content: str


class ChatResponseEnvelope(BaseModel):
    """Validated response of the chat endpoint.

    Only ``message.content`` is required; timing and token counters the
    backend may add are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    message: AssistantPayload
    model: str | None = None
    done: bool | None = None


class ModelTag(BaseModel):
    """One installed model as reported by the tags endpoint."""

    model_config = ConfigDict(extra="allow")

    name: str
    details: dict[str, Any] | None = None


class TagsResponseEnvelope(BaseModel):
    """Validated response of the tags endpoint.

    A missing ``models`` field is treated as an empty catalog.
    """

    model_config = ConfigDict(extra="ignore")

    models: list[ModelTag] = Field(default_factory=list)

    def has_model(self, name: str) -> bool:
        return any(tag.name == name for tag in self.models)
