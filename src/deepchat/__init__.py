"""
Deepchat: a chat client for DeepSeek models served by a local inference backend.

The session module owns the conversation transcript; the llm module hides
the backend protocol; the render module turns raw message markdown into
safe, highlighted HTML.
"""

__version__ = "0.1.0"

from .llm import (
    DEEPSEEK_MODELS,
    BackendError,
    BackendUnreachable,
    ChatMessage,
    DeepSeekModel,
    InferenceClient,
    OllamaClient,
    Role,
    create_inference_client,
)
from .render import render_content
from .session import (
    ConversationSession,
    ExchangeFailure,
    ExchangeOutcome,
    FailureKind,
    SessionListener,
    SessionRegistry,
)

__all__ = [
    "DEEPSEEK_MODELS",
    "BackendError",
    "BackendUnreachable",
    "ChatMessage",
    "ConversationSession",
    "DeepSeekModel",
    "ExchangeFailure",
    "ExchangeOutcome",
    "FailureKind",
    "InferenceClient",
    "OllamaClient",
    "Role",
    "SessionListener",
    "SessionRegistry",
    "create_inference_client",
    "render_content",
]
