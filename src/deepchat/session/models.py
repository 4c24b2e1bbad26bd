"""Data models for conversation sessions.

Defines the notification payloads a session hands to its listener and the
outcome of a single exchange.
"""

from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..llm.models import ChatMessage

Transcript = tuple[ChatMessage, ...]


class ExchangeOutcome(str, Enum):
    """Result of one call to ``send_user_message``."""

    COMPLETED = "completed"
    FAILED = "failed"
    IGNORED = "ignored"  # Blank input, nothing happened


class FailureKind(str, Enum):
    """Which kind of backend failure ended an exchange."""

    BACKEND_UNREACHABLE = "backend_unreachable"
    BACKEND_ERROR = "backend_error"


class ExchangeFailure(BaseModel):
    """User-facing advisory emitted when an exchange fails.

    Rendered out of band, never inside the transcript.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind = Field(description="Category of the backend failure")
    message: str = Field(description="Advisory text shown to the user")
    detail: str = Field(description="Underlying transport or server message")
    model: str = Field(description="Model that was asked for a reply")


class SessionListener(ABC):
    """Rendering collaborator notified by a ConversationSession.

    Implementations receive raw message content and do their own
    rendering.
    """

    @abstractmethod
    def on_transcript_updated(self, transcript: Transcript) -> None:
        """Called with the full ordered transcript after every mutation."""

    @abstractmethod
    def on_exchange_failed(self, failure: ExchangeFailure) -> None:
        """Called once per failed exchange."""
